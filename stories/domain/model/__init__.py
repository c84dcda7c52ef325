"""Domain model entities for Stories."""

from stories.domain.model.comment import Comment
from stories.domain.model.like import Like
from stories.domain.model.testimonial import Testimonial
from stories.domain.model.user import User

__all__ = [
    "User",
    "Testimonial",
    "Comment",
    "Like",
]
