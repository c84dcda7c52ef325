"""Comment entity.

Comments are threaded discussions on testimonials. A comment without a
parent is a root; every reply sits exactly one level below its parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stories.domain.model.common import DomainModel
from stories.domain.value import CommentId, TestimonialId, UserId

# Deepest level a reply may be stored at (roots are depth 0)
MAX_COMMENT_DEPTH = 10

# Deepest level returned when a thread is assembled for reading
COMMENT_READ_DEPTH = 5

COMMENT_MAX_LENGTH = 500


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a testimonial or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level, fixed at creation (0 for top-level)

    Counters:
    - likes_count: size of the comment's like set
    - replies_count: number of direct children only
    """

    id: CommentId
    testimonial_id: TestimonialId
    author_id: UserId
    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0, le=MAX_COMMENT_DEPTH)
    likes_count: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None
