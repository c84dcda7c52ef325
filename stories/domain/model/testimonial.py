"""Testimonial entity.

Testimonials are short stories shared by members. Comments attach to them
and form reply threads.
"""

from datetime import datetime

from pydantic import Field

from stories.domain.model.common import DomainModel
from stories.domain.value import TestimonialId, UserId

TESTIMONIAL_MIN_LENGTH = 10
TESTIMONIAL_MAX_LENGTH = 1000


class Testimonial(DomainModel):
    """Testimonial entity.

    Counters are denormalized and always recomputed from live data:
    - likes_count: size of the testimonial's like set
    - comments_count: number of comments at every depth
    """

    id: TestimonialId
    author_id: UserId
    content: str = Field(
        min_length=TESTIMONIAL_MIN_LENGTH, max_length=TESTIMONIAL_MAX_LENGTH
    )
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
