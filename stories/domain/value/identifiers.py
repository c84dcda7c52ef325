"""Strongly typed identifiers for Stories domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from stories.domain.error import ValidationError

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
TestimonialId = NewType("TestimonialId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)


def parse_uuid(value: str, resource: str) -> UUID:
    """Parse an identifier received from a client.

    Args:
        value: Raw identifier string
        resource: Resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If the value is not a well-formed UUID
    """
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {resource} id: {value}")
