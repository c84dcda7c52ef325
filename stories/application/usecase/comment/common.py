"""Comment response items."""

from datetime import datetime

from pydantic import BaseModel

from stories.application.usecase.common import AuthorInfo
from stories.domain.model import Comment, User


class CommentItem(BaseModel):
    """A single comment as returned to clients."""

    id: str
    testimonial_id: str
    author: AuthorInfo | None
    content: str
    parent_id: str | None
    depth: int
    likes_count: int
    replies_count: int
    liked_by_user: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls, comment: Comment, author: User | None, liked_by_user: bool = False
    ) -> "CommentItem":
        return cls(
            id=str(comment.id),
            testimonial_id=str(comment.testimonial_id),
            author=AuthorInfo.from_user(author),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            likes_count=comment.likes_count,
            replies_count=comment.replies_count,
            liked_by_user=liked_by_user,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
