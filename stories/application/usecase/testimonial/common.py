"""Testimonial response items."""

from datetime import datetime

from pydantic import BaseModel

from stories.application.usecase.common import AuthorInfo
from stories.domain.model import Testimonial, User


class TestimonialItem(BaseModel):
    """A testimonial as returned to clients."""

    id: str
    author: AuthorInfo | None
    content: str
    likes_count: int
    comments_count: int
    liked_by_user: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls,
        testimonial: Testimonial,
        author: User | None,
        liked_by_user: bool = False,
    ) -> "TestimonialItem":
        return cls(
            id=str(testimonial.id),
            author=AuthorInfo.from_user(author),
            content=testimonial.content,
            likes_count=testimonial.likes_count,
            comments_count=testimonial.comments_count,
            liked_by_user=liked_by_user,
            created_at=testimonial.created_at,
            updated_at=testimonial.updated_at,
        )
