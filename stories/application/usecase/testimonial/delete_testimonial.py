"""Delete testimonial use case."""

from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.domain.service import TestimonialService
from stories.domain.value import TestimonialId, UserId, parse_uuid


class DeleteTestimonialRequest(BaseModel):
    """Delete testimonial request."""

    testimonial_id: str
    user_id: str  # Requesting user, must be the author


class DeleteTestimonialResponse(BaseModel):
    """Delete testimonial response."""

    testimonial_id: str
    message: str = "Testimonial deleted"


class DeleteTestimonialUseCase(BaseUseCase):
    """Use case for deleting a testimonial with its comments and likes."""

    def __init__(self, testimonial_service: TestimonialService) -> None:
        self.testimonial_service = testimonial_service

    async def execute(
        self, request: DeleteTestimonialRequest
    ) -> DeleteTestimonialResponse:
        """Execute delete testimonial flow.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the testimonial does not exist
            ForbiddenError: If the requester is not the author
        """
        testimonial_id = TestimonialId(
            parse_uuid(request.testimonial_id, "testimonial")
        )
        requester_id = UserId(parse_uuid(request.user_id, "user"))

        testimonial = await self.testimonial_service.delete_testimonial(
            testimonial_id, requester_id
        )
        return DeleteTestimonialResponse(testimonial_id=str(testimonial.id))
