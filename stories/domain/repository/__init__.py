"""Repository interfaces for Stories domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from stories.domain.repository.comment import CommentRepository
from stories.domain.repository.like import LikeRepository
from stories.domain.repository.testimonial import TestimonialRepository
from stories.domain.repository.unit_of_work import UnitOfWork
from stories.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TestimonialRepository",
    "CommentRepository",
    "LikeRepository",
    "UnitOfWork",
]
