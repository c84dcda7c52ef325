"""Like entity.

A like is one user's membership in the like set of a testimonial or a
comment. Each user can like an item at most once.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from stories.domain.model.common import DomainModel
from stories.domain.value import LikeableType, LikeId, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per item (enforced by database unique constraint)
    - Polymorphic reference to the liked item (testimonial or comment)
    """

    id: LikeId
    user_id: UserId
    likeable_type: LikeableType
    likeable_id: UUID  # TestimonialId or CommentId (both are UUIDs)
    created_at: datetime = Field(default_factory=datetime.now)
