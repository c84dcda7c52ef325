"""Domain value objects for Stories.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from stories.domain.value.common import ValueObject


class LikeableType(str, Enum):
    """Type of entity that can be liked."""

    TESTIMONIAL = "testimonial"
    COMMENT = "comment"


class LikeAction(str, Enum):
    """Outcome of a like toggle."""

    LIKED = "liked"
    UNLIKED = "unliked"


class TestimonialSort(str, Enum):
    """Sort order for testimonial listings."""

    RECENT = "recent"  # created_at DESC
    POPULAR = "popular"  # likes_count DESC, created_at DESC
    COMMENTED = "commented"  # comments_count DESC, created_at DESC


class LikeToggleResult(ValueObject):
    """Settled state of a like set after a toggle.

    ``likes_count`` is the size of the like set after the toggle, read back
    from storage rather than computed from a delta.
    """

    action: LikeAction
    likes_count: int
    liked_by_user: bool
