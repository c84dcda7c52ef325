"""PostgreSQL repository implementations."""

from stories.persistence.repository.comment import PostgresCommentRepository
from stories.persistence.repository.like import PostgresLikeRepository
from stories.persistence.repository.testimonial import PostgresTestimonialRepository
from stories.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTestimonialRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
