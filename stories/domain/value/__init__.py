"""Domain value objects for Stories."""

from stories.domain.value.identifiers import (
    CommentId,
    LikeId,
    TestimonialId,
    UserId,
    parse_uuid,
)
from stories.domain.value.types import (
    LikeableType,
    LikeAction,
    LikeToggleResult,
    TestimonialSort,
)

__all__ = [
    # Identifiers
    "UserId",
    "TestimonialId",
    "CommentId",
    "LikeId",
    "parse_uuid",
    # Types
    "LikeableType",
    "LikeAction",
    "LikeToggleResult",
    "TestimonialSort",
]
