"""Testimonial routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from stories.adapter.realtime import EventPublisher
from stories.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from stories.application.usecase.testimonial import (
    CreateTestimonialRequest,
    CreateTestimonialResponse,
    CreateTestimonialUseCase,
    DeleteTestimonialRequest,
    DeleteTestimonialResponse,
    DeleteTestimonialUseCase,
    GetTestimonialRequest,
    GetTestimonialResponse,
    GetTestimonialUseCase,
    ListTestimonialsRequest,
    ListTestimonialsResponse,
    ListTestimonialsUseCase,
)
from stories.domain.service import JWTService
from stories.domain.value import LikeableType
from stories.interface.api.auth import bearer_scheme, optional_user_id, require_user_id

router = APIRouter(
    prefix="/testimonials", tags=["testimonials"], route_class=DishkaRoute
)


class CreateTestimonialAPIRequest(BaseModel):
    """API request for creating a testimonial.

    Length rules are checked by the domain so violations answer 400.
    """

    content: str


@router.post(
    "",
    response_model=CreateTestimonialResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_testimonial(
    request: CreateTestimonialAPIRequest,
    create_testimonial_use_case: FromDishka[CreateTestimonialUseCase],
    jwt_service: FromDishka[JWTService],
    publisher: FromDishka[EventPublisher],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CreateTestimonialResponse:
    """Share a new testimonial. Requires authentication."""
    user_id = require_user_id(jwt_service, credentials)

    response = await create_testimonial_use_case.execute(
        CreateTestimonialRequest(content=request.content, author_id=user_id)
    )
    publisher.testimonial_created(response.model_dump(mode="json"))
    return response


@router.get("", response_model=ListTestimonialsResponse)
async def list_testimonials(
    list_testimonials_use_case: FromDishka[ListTestimonialsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: str = "recent",
    search: str | None = None,
    page: int = 1,
    limit: int = 10,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListTestimonialsResponse:
    """List testimonials.

    Args:
        sort: ``recent``, ``popular`` or ``commented``
        search: Case-insensitive substring of the content
        page: 1-based page number
        limit: Page size, 1 to 50
    """
    return await list_testimonials_use_case.execute(
        ListTestimonialsRequest(
            sort=sort,
            search=search,
            page=page,
            limit=limit,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.get("/{testimonial_id}", response_model=GetTestimonialResponse)
async def get_testimonial(
    testimonial_id: str,
    get_testimonial_use_case: FromDishka[GetTestimonialUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetTestimonialResponse:
    """Get a single testimonial."""
    return await get_testimonial_use_case.execute(
        GetTestimonialRequest(
            testimonial_id=testimonial_id,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.post("/{testimonial_id}/like", response_model=ToggleLikeResponse)
async def toggle_testimonial_like(
    testimonial_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    publisher: FromDishka[EventPublisher],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ToggleLikeResponse:
    """Like or unlike a testimonial. Requires authentication."""
    user_id = require_user_id(jwt_service, credentials)

    response = await toggle_like_use_case.execute(
        ToggleLikeRequest(
            likeable_type=LikeableType.TESTIMONIAL,
            likeable_id=testimonial_id,
            user_id=user_id,
        )
    )
    publisher.testimonial_like_updated(response.model_dump(mode="json"))
    return response


@router.delete("/{testimonial_id}", response_model=DeleteTestimonialResponse)
async def delete_testimonial(
    testimonial_id: str,
    delete_testimonial_use_case: FromDishka[DeleteTestimonialUseCase],
    jwt_service: FromDishka[JWTService],
    publisher: FromDishka[EventPublisher],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteTestimonialResponse:
    """Delete a testimonial with its comments. Author only."""
    user_id = require_user_id(jwt_service, credentials)

    response = await delete_testimonial_use_case.execute(
        DeleteTestimonialRequest(testimonial_id=testimonial_id, user_id=user_id)
    )
    publisher.testimonial_deleted(response.testimonial_id)
    return response
