"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentTreeNode
from .jwt_service import JWTService
from .like_service import LikeService
from .testimonial_service import TestimonialService
from .user_service import UserService

__all__ = [
    "CommentService",
    "CommentTreeNode",
    "JWTService",
    "LikeService",
    "Service",
    "TestimonialService",
    "UserService",
]
