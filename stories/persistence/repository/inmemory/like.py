"""In-memory like repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from stories.domain.model.like import Like
from stories.domain.repository.like import LikeRepository
from stories.domain.value import LikeableType, UserId
from stories.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        for like in self._db.likes:
            if (
                like.user_id == user_id
                and like.likeable_type == likeable_type
                and like.likeable_id == likeable_id
            ):
                return like
        return None

    async def find_by_user_and_likeables(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_ids: Sequence[UUID],
    ) -> list[Like]:
        """Find a user's likes on multiple items (batch query)."""
        if not likeable_ids:
            return []

        wanted = set(likeable_ids)
        return [
            like
            for like in self._db.likes
            if like.user_id == user_id
            and like.likeable_type == likeable_type
            and like.likeable_id in wanted
        ]

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this item
        """
        existing = await self.find_by_user_and_likeable(
            like.user_id, like.likeable_type, like.likeable_id
        )
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._db.likes.append(like)
        return like

    async def delete_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> bool:
        """Delete a like by user and item."""
        existing = await self.find_by_user_and_likeable(
            user_id, likeable_type, likeable_id
        )
        if existing is None:
            return False
        self._db.likes.remove(existing)
        return True

    async def delete_by_likeables(
        self,
        likeable_type: LikeableType,
        likeable_ids: Sequence[UUID],
    ) -> int:
        """Delete every like on the given items."""
        wanted = set(likeable_ids)
        kept = [
            like
            for like in self._db.likes
            if not (like.likeable_type == likeable_type and like.likeable_id in wanted)
        ]
        removed = len(self._db.likes) - len(kept)
        self._db.likes[:] = kept
        return removed

    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        return sum(
            1
            for like in self._db.likes
            if like.likeable_type == likeable_type and like.likeable_id == likeable_id
        )
