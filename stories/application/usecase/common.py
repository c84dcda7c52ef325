"""Response pieces shared by several use cases."""

from pydantic import BaseModel

from stories.domain.model import User


class AuthorInfo(BaseModel):
    """Display attributes of a content author."""

    id: str
    name: str
    avatar_url: str | None
    promotion: str | None
    verified: bool

    @classmethod
    def from_user(cls, user: User | None) -> "AuthorInfo | None":
        if user is None:
            return None
        return cls(
            id=str(user.id),
            name=user.name,
            avatar_url=user.avatar_url,
            promotion=user.promotion,
            verified=user.verified,
        )
