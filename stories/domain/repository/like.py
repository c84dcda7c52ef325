"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from stories.domain.model.like import Like
from stories.domain.value import LikeableType, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific item.

        Args:
            user_id: The user's ID
            likeable_type: Type of item (testimonial or comment)
            likeable_id: ID of the item

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_likeables(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple items (batch query).

        Args:
            user_id: The user's ID
            likeable_type: Type of items (testimonial or comment)
            likeable_ids: List of item IDs to check

        Returns:
            List of likes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes this item
        """
        pass

    @abstractmethod
    async def delete_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> bool:
        """Delete a like by user and item.

        Args:
            user_id: The user's ID
            likeable_type: Type of item (testimonial or comment)
            likeable_id: ID of the item

        Returns:
            True if a like was deleted, False if no like existed
        """
        pass

    @abstractmethod
    async def delete_by_likeables(
        self,
        likeable_type: LikeableType,
        likeable_ids: Sequence[UUID],
    ) -> int:
        """Delete every like on the given items.

        Used when the items themselves are deleted.

        Args:
            likeable_type: Type of items (testimonial or comment)
            likeable_ids: IDs of the items

        Returns:
            Number of likes deleted
        """
        pass

    @abstractmethod
    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> int:
        """Count likes on a specific item.

        Args:
            likeable_type: Type of item (testimonial or comment)
            likeable_id: ID of the item

        Returns:
            Number of likes
        """
        pass
