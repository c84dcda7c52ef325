"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from stories.domain.model.comment import Comment
from stories.domain.value import CommentId, TestimonialId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_testimonial(self, testimonial_id: TestimonialId) -> List[Comment]:
        """Find every comment of a testimonial, at all depths.

        Args:
            testimonial_id: The testimonial ID

        Returns:
            Flat list of comments ordered by creation time (oldest first)
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments, oldest first
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment (hard delete).

        Replies are not touched; callers delete them first.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_testimonial(
        self, testimonial_id: TestimonialId
    ) -> List[CommentId]:
        """Delete every comment of a testimonial.

        Args:
            testimonial_id: The testimonial ID

        Returns:
            IDs of the deleted comments
        """
        pass

    @abstractmethod
    async def count_by_testimonial(self, testimonial_id: TestimonialId) -> int:
        """Count comments of a testimonial at all depths.

        Args:
            testimonial_id: The testimonial ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def update_likes_count(self, comment_id: CommentId, likes_count: int) -> None:
        """Persist a recomputed like count.

        Args:
            comment_id: The comment ID
            likes_count: Current size of the like set
        """
        pass

    @abstractmethod
    async def refresh_counters(
        self,
        testimonial_id: TestimonialId,
        parent_id: Optional[CommentId] = None,
    ) -> Tuple[int, Optional[int]]:
        """Recompute denormalized thread counters from live rows.

        Sets the testimonial's comments_count to the number of its comments
        and, when ``parent_id`` is given and still exists, the parent's
        replies_count to the number of its direct children. Implementations
        backed by a transactional store isolate this in a savepoint so a
        failure leaves the surrounding transaction usable.

        Args:
            testimonial_id: The testimonial whose comment count to refresh
            parent_id: The comment whose reply count to refresh, if any

        Returns:
            Tuple of (comments_count, replies_count or None)
        """
        pass
