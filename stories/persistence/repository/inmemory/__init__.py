"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .like import InMemoryLikeRepository
from .testimonial import InMemoryTestimonialRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryLikeRepository",
    "InMemoryTestimonialRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
