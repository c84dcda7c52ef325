"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from stories.domain.model.comment import Comment
from stories.domain.repository.comment import CommentRepository
from stories.domain.value import CommentId, TestimonialId
from stories.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._db.comments.get(comment_id)

    async def find_by_testimonial(self, testimonial_id: TestimonialId) -> list[Comment]:
        """Find every comment of a testimonial, oldest first."""
        comments = [
            c for c in self._db.comments.values() if c.testimonial_id == testimonial_id
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment, oldest first."""
        comments = [c for c in self._db.comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._db.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._db.comments.pop(comment_id, None)

    async def delete_by_testimonial(
        self, testimonial_id: TestimonialId
    ) -> list[CommentId]:
        """Delete every comment of a testimonial."""
        doomed = [
            c.id
            for c in self._db.comments.values()
            if c.testimonial_id == testimonial_id
        ]
        for comment_id in doomed:
            del self._db.comments[comment_id]
        return doomed

    async def count_by_testimonial(self, testimonial_id: TestimonialId) -> int:
        """Count comments of a testimonial at all depths."""
        return sum(
            1 for c in self._db.comments.values() if c.testimonial_id == testimonial_id
        )

    async def update_likes_count(self, comment_id: CommentId, likes_count: int) -> None:
        """Persist a recomputed like count."""
        comment = self._db.comments.get(comment_id)
        if comment:
            self._db.comments[comment_id] = comment.model_copy(
                update={"likes_count": likes_count, "updated_at": datetime.now()}
            )

    async def refresh_counters(
        self,
        testimonial_id: TestimonialId,
        parent_id: Optional[CommentId] = None,
    ) -> tuple[int, Optional[int]]:
        """Recompute thread counters from the stored comments."""
        comments_count = await self.count_by_testimonial(testimonial_id)
        testimonial = self._db.testimonials.get(testimonial_id)
        if testimonial:
            self._db.testimonials[testimonial_id] = testimonial.model_copy(
                update={"comments_count": comments_count}
            )

        replies_count: Optional[int] = None
        parent = self._db.comments.get(parent_id) if parent_id else None
        if parent:
            replies_count = len(await self.find_children(parent.id))
            self._db.comments[parent.id] = parent.model_copy(
                update={"replies_count": replies_count}
            )

        return comments_count, replies_count
