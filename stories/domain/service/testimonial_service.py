"""Testimonial domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from stories.domain.error import ForbiddenError, NotFoundError, ValidationError
from stories.domain.model.testimonial import (
    TESTIMONIAL_MAX_LENGTH,
    TESTIMONIAL_MIN_LENGTH,
    Testimonial,
)
from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
)
from stories.domain.value import LikeableType, TestimonialId, TestimonialSort, UserId

from .base import Service

MAX_PAGE_SIZE = 50


class TestimonialService(Service):
    """Domain service for testimonial operations."""

    def __init__(
        self,
        testimonial_repository: TestimonialRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize testimonial service.

        Args:
            testimonial_repository: Testimonial repository
            comment_repository: Comment repository (purged with the testimonial)
            like_repository: Like repository (purged with the testimonial)
        """
        self.testimonial_repository = testimonial_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository

    async def create_testimonial(self, author_id: UserId, content: str) -> Testimonial:
        """Create a testimonial.

        Args:
            author_id: Author user ID
            content: Testimonial text, trimmed before storage

        Returns:
            Created testimonial with zeroed counters

        Raises:
            ValidationError: If the trimmed content is out of bounds
        """
        with logfire.span(
            "testimonial_service.create_testimonial", author_id=str(author_id)
        ):
            trimmed = content.strip() if content else ""
            if not (TESTIMONIAL_MIN_LENGTH <= len(trimmed) <= TESTIMONIAL_MAX_LENGTH):
                logfire.warn(
                    "Testimonial content out of bounds",
                    author_id=str(author_id),
                    length=len(trimmed),
                )
                raise ValidationError(
                    f"Testimonial content must be between {TESTIMONIAL_MIN_LENGTH} "
                    f"and {TESTIMONIAL_MAX_LENGTH} characters"
                )

            now = datetime.now()
            testimonial = Testimonial(
                id=TestimonialId(uuid4()),
                author_id=author_id,
                content=trimmed,
                likes_count=0,
                comments_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.testimonial_repository.save(testimonial)
            logfire.info(
                "Testimonial created",
                testimonial_id=str(saved.id),
                author_id=str(author_id),
            )
            return saved

    async def get_testimonial(self, testimonial_id: TestimonialId) -> Testimonial:
        """Get a testimonial by ID.

        Raises:
            NotFoundError: If the testimonial does not exist
        """
        with logfire.span(
            "testimonial_service.get_testimonial", testimonial_id=str(testimonial_id)
        ):
            testimonial = await self.testimonial_repository.find_by_id(testimonial_id)
            if not testimonial:
                logfire.warn(
                    "Testimonial not found", testimonial_id=str(testimonial_id)
                )
                raise NotFoundError("Testimonial", str(testimonial_id))
            return testimonial

    async def list_testimonials(
        self,
        sort: TestimonialSort = TestimonialSort.RECENT,
        search: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Testimonial], int]:
        """List one page of testimonials.

        Args:
            sort: Sort order
            search: Case-insensitive substring filter on the content
            page: 1-based page number
            limit: Page size (1 to MAX_PAGE_SIZE)

        Returns:
            Tuple of (testimonials on the page, total matching testimonials)

        Raises:
            ValidationError: If page or limit is out of range
        """
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if not (1 <= limit <= MAX_PAGE_SIZE):
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

        search = search.strip() if search else None

        with logfire.span(
            "testimonial_service.list_testimonials",
            sort=sort.value,
            search=search,
            page=page,
            limit=limit,
        ):
            testimonials = await self.testimonial_repository.find_all(
                sort=sort,
                search=search or None,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.testimonial_repository.count(search=search or None)
            logfire.info(
                "Testimonials listed", count=len(testimonials), total=total, page=page
            )
            return testimonials, total

    async def delete_testimonial(
        self, testimonial_id: TestimonialId, requester_id: UserId
    ) -> Testimonial:
        """Delete a testimonial with its comments and likes.

        Args:
            testimonial_id: Testimonial to delete
            requester_id: User asking for the deletion

        Returns:
            The deleted testimonial

        Raises:
            NotFoundError: If the testimonial does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "testimonial_service.delete_testimonial",
            testimonial_id=str(testimonial_id),
            requester_id=str(requester_id),
        ):
            testimonial = await self.get_testimonial(testimonial_id)
            if testimonial.author_id != requester_id:
                logfire.warn(
                    "Unauthorized testimonial delete attempt",
                    testimonial_id=str(testimonial_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "testimonial", str(testimonial_id), str(requester_id)
                )

            comment_ids = await self.comment_repository.delete_by_testimonial(
                testimonial_id
            )
            await self.like_repository.delete_by_likeables(
                LikeableType.COMMENT, comment_ids
            )
            await self.like_repository.delete_by_likeables(
                LikeableType.TESTIMONIAL, [testimonial_id]
            )
            await self.testimonial_repository.delete(testimonial_id)

            logfire.info(
                "Testimonial deleted",
                testimonial_id=str(testimonial_id),
                deleted_comments=len(comment_ids),
            )
            return testimonial
