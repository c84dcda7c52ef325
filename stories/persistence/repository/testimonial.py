"""PostgreSQL implementation of Testimonial repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from stories.domain.model import Testimonial
from stories.domain.repository import TestimonialRepository
from stories.domain.value import TestimonialId, TestimonialSort
from stories.persistence.mappers import row_to_testimonial, testimonial_to_dict
from stories.persistence.tables import testimonials_table


class PostgresTestimonialRepository(TestimonialRepository):
    """PostgreSQL implementation of TestimonialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_search(stmt: Select, search: Optional[str]) -> Select:
        """Restrict a query to testimonials whose content contains ``search``."""
        if not search:
            return stmt
        # Escape LIKE wildcards so the search is a plain substring match
        escaped = (
            search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        return stmt.where(
            testimonials_table.c.content.ilike(f"%{escaped}%", escape="\\")
        )

    async def find_by_id(self, testimonial_id: TestimonialId) -> Optional[Testimonial]:
        """Find a testimonial by ID."""
        stmt = select(testimonials_table).where(
            testimonials_table.c.id == testimonial_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_testimonial(row._asdict()) if row else None

    async def find_all(
        self,
        sort: TestimonialSort = TestimonialSort.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Testimonial]:
        """Find testimonials with filtering and pagination."""
        stmt = self._apply_search(select(testimonials_table), search)

        if sort == TestimonialSort.POPULAR:
            stmt = stmt.order_by(
                desc(testimonials_table.c.likes_count),
                desc(testimonials_table.c.created_at),
            )
        elif sort == TestimonialSort.COMMENTED:
            stmt = stmt.order_by(
                desc(testimonials_table.c.comments_count),
                desc(testimonials_table.c.created_at),
            )
        else:
            stmt = stmt.order_by(desc(testimonials_table.c.created_at))

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [row_to_testimonial(row._asdict()) for row in result.fetchall()]

    async def count(self, search: Optional[str] = None) -> int:
        """Count testimonials matching the search filter."""
        stmt = self._apply_search(
            select(func.count()).select_from(testimonials_table), search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, testimonial: Testimonial) -> Testimonial:
        """Save a testimonial (create or update)."""
        testimonial_dict = testimonial_to_dict(testimonial)
        existing = await self.find_by_id(testimonial.id)

        if existing:
            stmt = (
                testimonials_table.update()
                .where(testimonials_table.c.id == testimonial.id)
                .values(**testimonial_dict)
            )
        else:
            stmt = testimonials_table.insert().values(**testimonial_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return testimonial

    async def update_likes_count(
        self, testimonial_id: TestimonialId, likes_count: int
    ) -> None:
        """Persist a recomputed like count."""
        stmt = (
            testimonials_table.update()
            .where(testimonials_table.c.id == testimonial_id)
            .values(likes_count=likes_count, updated_at=datetime.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, testimonial_id: TestimonialId) -> None:
        """Delete a testimonial (hard delete)."""
        stmt = testimonials_table.delete().where(
            testimonials_table.c.id == testimonial_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
