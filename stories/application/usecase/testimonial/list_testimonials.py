"""List testimonials use case."""

import math
from uuid import UUID

import logfire
from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.application.usecase.testimonial.common import TestimonialItem
from stories.domain.error import ValidationError
from stories.domain.service import LikeService, TestimonialService, UserService
from stories.domain.value import LikeableType, TestimonialSort, UserId


class Pagination(BaseModel):
    """Pagination block of a listing."""

    page: int
    limit: int
    total: int
    pages: int


class ListTestimonialsRequest(BaseModel):
    """List testimonials request.

    Paging values are range checked by the testimonial service so that bad
    paging surfaces as a domain validation error.
    """

    sort: str = TestimonialSort.RECENT.value
    search: str | None = None
    page: int = 1
    limit: int = 10
    viewer_id: str | None = None  # Current user ID (if authenticated)


class ListTestimonialsResponse(BaseModel):
    """List testimonials response."""

    testimonials: list[TestimonialItem]
    pagination: Pagination


class ListTestimonialsUseCase(BaseUseCase):
    """Use case for listing testimonials with sorting, search and paging."""

    def __init__(
        self,
        testimonial_service: TestimonialService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        """Initialize list testimonials use case.

        Args:
            testimonial_service: Testimonial domain service
            like_service: Like service for the viewer's like flags
            user_service: User service for author display attributes
        """
        self.testimonial_service = testimonial_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(
        self, request: ListTestimonialsRequest
    ) -> ListTestimonialsResponse:
        """Execute list testimonials flow.

        Args:
            request: List request with sort, search and paging

        Returns:
            One page of testimonials and the pagination block

        Raises:
            ValidationError: If the sort order or paging is invalid
        """
        try:
            sort = TestimonialSort(request.sort)
        except ValueError:
            raise ValidationError(f"Invalid sort order: {request.sort}")

        with logfire.span(
            "list_testimonials.execute",
            sort=sort.value,
            search=request.search,
            page=request.page,
            limit=request.limit,
        ):
            testimonials, total = await self.testimonial_service.list_testimonials(
                sort=sort,
                search=request.search,
                page=request.page,
                limit=request.limit,
            )

            # Batch lookups to avoid N+1 queries
            viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
            authors = await self.user_service.get_users_by_ids(
                [t.author_id for t in testimonials]
            )
            likes = await self.like_service.get_user_likes(
                viewer_id, LikeableType.TESTIMONIAL, [t.id for t in testimonials]
            )

            items = [
                TestimonialItem.from_domain(
                    testimonial,
                    authors.get(testimonial.author_id),
                    likes.get(testimonial.id, False),
                )
                for testimonial in testimonials
            ]

            return ListTestimonialsResponse(
                testimonials=items,
                pagination=Pagination(
                    page=request.page,
                    limit=request.limit,
                    total=total,
                    pages=math.ceil(total / request.limit),
                ),
            )
