"""PostgreSQL implementation of Like repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from stories.domain.model import Like
from stories.domain.repository import LikeRepository
from stories.domain.value import LikeableType, UserId
from stories.persistence.mappers import like_to_dict, row_to_like
from stories.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id == likeable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_likeables(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple items (batch query)."""
        if not likeable_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id.in_(likeable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: Like) -> Like:
        """Save a like (create)."""
        stmt = insert(likes_table).values(**like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> bool:
        """Delete a like by user and item."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id == likeable_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_likeables(
        self,
        likeable_type: LikeableType,
        likeable_ids: Sequence[UUID],
    ) -> int:
        """Delete every like on the given items."""
        if not likeable_ids:
            return 0

        stmt = delete(likes_table).where(
            and_(
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id.in_(likeable_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                and_(
                    likes_table.c.likeable_type == likeable_type.value,
                    likes_table.c.likeable_id == likeable_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
