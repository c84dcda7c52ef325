"""Create testimonial use case."""

from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.application.usecase.testimonial.common import TestimonialItem
from stories.domain.service import TestimonialService, UserService
from stories.domain.value import UserId, parse_uuid


class CreateTestimonialRequest(BaseModel):
    """Create testimonial request."""

    content: str
    author_id: str  # User ID from authenticated user


class CreateTestimonialResponse(TestimonialItem):
    """Create testimonial response."""


class CreateTestimonialUseCase(BaseUseCase):
    """Use case for sharing a new testimonial."""

    def __init__(
        self, testimonial_service: TestimonialService, user_service: UserService
    ) -> None:
        self.testimonial_service = testimonial_service
        self.user_service = user_service

    async def execute(
        self, request: CreateTestimonialRequest
    ) -> CreateTestimonialResponse:
        """Create the testimonial and attach its author.

        Raises:
            ValidationError: If the content length is out of range
        """
        author_id = UserId(parse_uuid(request.author_id, "user"))

        testimonial = await self.testimonial_service.create_testimonial(
            author_id=author_id, content=request.content
        )

        authors = await self.user_service.get_users_by_ids([author_id])
        item = TestimonialItem.from_domain(testimonial, authors.get(author_id))
        return CreateTestimonialResponse(**item.model_dump())
