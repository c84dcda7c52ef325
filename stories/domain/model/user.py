"""User entity.

Users are referenced by testimonials, comments and likes. The comment
engine only reads their display attributes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stories.domain.model.common import DomainModel
from stories.domain.value import UserId


class User(DomainModel):
    """User entity.

    ``promotion`` is the member's graduating class label and ``verified``
    marks accounts confirmed by the school.
    """

    id: UserId
    name: str = Field(min_length=2, max_length=50)
    email: str
    avatar_url: Optional[str] = None
    promotion: Optional[str] = None
    verified: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
