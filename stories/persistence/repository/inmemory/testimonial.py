"""In-memory testimonial repository for testing."""

from datetime import datetime
from typing import Optional

from stories.domain.model.testimonial import Testimonial
from stories.domain.repository.testimonial import TestimonialRepository
from stories.domain.value import TestimonialId, TestimonialSort
from stories.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryTestimonialRepository(TestimonialRepository):
    """In-memory implementation of TestimonialRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    def _matching(self, search: Optional[str]) -> list[Testimonial]:
        testimonials = list(self._db.testimonials.values())
        if search:
            needle = search.lower()
            testimonials = [t for t in testimonials if needle in t.content.lower()]
        return testimonials

    async def find_by_id(self, testimonial_id: TestimonialId) -> Optional[Testimonial]:
        """Find a testimonial by ID."""
        return self._db.testimonials.get(testimonial_id)

    async def find_all(
        self,
        sort: TestimonialSort = TestimonialSort.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Testimonial]:
        """Find testimonials with filtering and pagination."""
        testimonials = self._matching(search)

        # Newest first, then stable sort on the primary key
        testimonials.sort(key=lambda t: t.created_at, reverse=True)
        if sort == TestimonialSort.POPULAR:
            testimonials.sort(key=lambda t: t.likes_count, reverse=True)
        elif sort == TestimonialSort.COMMENTED:
            testimonials.sort(key=lambda t: t.comments_count, reverse=True)

        return testimonials[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count testimonials matching the search filter."""
        return len(self._matching(search))

    async def save(self, testimonial: Testimonial) -> Testimonial:
        """Save or update a testimonial."""
        self._db.testimonials[testimonial.id] = testimonial
        return testimonial

    async def update_likes_count(
        self, testimonial_id: TestimonialId, likes_count: int
    ) -> None:
        """Persist a recomputed like count."""
        testimonial = self._db.testimonials.get(testimonial_id)
        if testimonial:
            self._db.testimonials[testimonial_id] = testimonial.model_copy(
                update={"likes_count": likes_count, "updated_at": datetime.now()}
            )

    async def delete(self, testimonial_id: TestimonialId) -> None:
        """Delete a testimonial."""
        self._db.testimonials.pop(testimonial_id, None)
