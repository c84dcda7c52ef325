"""Get testimonial use case."""

from uuid import UUID

from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.application.usecase.testimonial.common import TestimonialItem
from stories.domain.service import LikeService, TestimonialService, UserService
from stories.domain.value import LikeableType, TestimonialId, UserId, parse_uuid


class GetTestimonialRequest(BaseModel):
    """Get testimonial request."""

    testimonial_id: str
    viewer_id: str | None = None


class GetTestimonialResponse(TestimonialItem):
    """Get testimonial response."""


class GetTestimonialUseCase(BaseUseCase):
    """Use case for reading a single testimonial."""

    def __init__(
        self,
        testimonial_service: TestimonialService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        self.testimonial_service = testimonial_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetTestimonialRequest) -> GetTestimonialResponse:
        """Execute get testimonial flow.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the testimonial does not exist
        """
        testimonial_id = TestimonialId(
            parse_uuid(request.testimonial_id, "testimonial")
        )
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        testimonial = await self.testimonial_service.get_testimonial(testimonial_id)

        authors = await self.user_service.get_users_by_ids([testimonial.author_id])
        likes = await self.like_service.get_user_likes(
            viewer_id, LikeableType.TESTIMONIAL, [testimonial.id]
        )

        item = TestimonialItem.from_domain(
            testimonial,
            authors.get(testimonial.author_id),
            likes.get(testimonial.id, False),
        )
        return GetTestimonialResponse(**item.model_dump())
