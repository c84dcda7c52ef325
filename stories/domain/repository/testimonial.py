"""Testimonial repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stories.domain.model.testimonial import Testimonial
from stories.domain.value import TestimonialId, TestimonialSort


class TestimonialRepository(ABC):
    """Repository for Testimonial entity.

    Defines the contract for testimonial persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, testimonial_id: TestimonialId) -> Optional[Testimonial]:
        """Find a testimonial by ID.

        Args:
            testimonial_id: The testimonial's unique identifier

        Returns:
            The testimonial if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: TestimonialSort = TestimonialSort.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Testimonial]:
        """Find testimonials with filtering and pagination.

        Args:
            sort: Sort order (recent, popular or commented)
            search: Case-insensitive substring to match in the content
            limit: Maximum number of testimonials to return
            offset: Number of testimonials to skip

        Returns:
            List of testimonials matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count testimonials matching the search filter.

        Args:
            search: Case-insensitive substring to match in the content

        Returns:
            Total number of matching testimonials
        """
        pass

    @abstractmethod
    async def save(self, testimonial: Testimonial) -> Testimonial:
        """Save a testimonial (create or update).

        Args:
            testimonial: The testimonial to save

        Returns:
            The saved testimonial
        """
        pass

    @abstractmethod
    async def update_likes_count(
        self, testimonial_id: TestimonialId, likes_count: int
    ) -> None:
        """Persist a recomputed like count.

        Args:
            testimonial_id: The testimonial ID
            likes_count: Current size of the like set
        """
        pass

    @abstractmethod
    async def delete(self, testimonial_id: TestimonialId) -> None:
        """Delete a testimonial (hard delete).

        Args:
            testimonial_id: The testimonial ID to delete
        """
        pass
