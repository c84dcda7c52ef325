"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stories.domain.model import Comment
from stories.domain.repository import CommentRepository
from stories.domain.value import CommentId, TestimonialId
from stories.persistence.mappers import comment_to_dict, row_to_comment
from stories.persistence.tables import comments_table, testimonials_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_testimonial(self, testimonial_id: TestimonialId) -> List[Comment]:
        """Find every comment of a testimonial, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.testimonial_id == testimonial_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_testimonial(
        self, testimonial_id: TestimonialId
    ) -> List[CommentId]:
        """Delete every comment of a testimonial."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.testimonial_id == testimonial_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = [CommentId(row.id) for row in result.fetchall()]
        await self.session.flush()
        return deleted

    async def count_by_testimonial(self, testimonial_id: TestimonialId) -> int:
        """Count comments of a testimonial at all depths."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.testimonial_id == testimonial_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_likes_count(self, comment_id: CommentId, likes_count: int) -> None:
        """Persist a recomputed like count."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(likes_count=likes_count, updated_at=datetime.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def refresh_counters(
        self,
        testimonial_id: TestimonialId,
        parent_id: Optional[CommentId] = None,
    ) -> Tuple[int, Optional[int]]:
        """Recompute thread counters inside a savepoint.

        Each counter is set from a correlated COUNT in a single UPDATE, so the
        stored value reflects the rows visible to this transaction.
        """
        async with self.session.begin_nested():
            comments_total = (
                select(func.count())
                .select_from(comments_table)
                .where(comments_table.c.testimonial_id == testimonial_id)
                .scalar_subquery()
            )
            result = await self.session.execute(
                testimonials_table.update()
                .where(testimonials_table.c.id == testimonial_id)
                .values(comments_count=comments_total)
                .returning(testimonials_table.c.comments_count)
            )
            comments_count = result.scalar() or 0

            replies_count: Optional[int] = None
            if parent_id:
                children = comments_table.alias("children")
                replies_total = (
                    select(func.count())
                    .select_from(children)
                    .where(children.c.parent_id == parent_id)
                    .scalar_subquery()
                )
                result = await self.session.execute(
                    comments_table.update()
                    .where(comments_table.c.id == parent_id)
                    .values(replies_count=replies_total)
                    .returning(comments_table.c.replies_count)
                )
                replies_count = result.scalar()

        return comments_count, replies_count
