"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from stories.adapter.realtime import EventPublisher
from stories.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from stories.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from stories.domain.service import JWTService
from stories.domain.value import LikeableType
from stories.interface.api.auth import bearer_scheme, optional_user_id, require_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    testimonial_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    publisher: FromDishka[EventPublisher],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CreateCommentResponse:
    """Comment on a testimonial or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        publisher: Realtime publisher (injected)
        credentials: Bearer token

    Returns:
        Created comment details
    """
    user_id = require_user_id(jwt_service, credentials)

    response = await create_comment_use_case.execute(
        CreateCommentRequest(
            testimonial_id=request.testimonial_id,
            content=request.content,
            author_id=user_id,
            parent_id=request.parent_id,
        )
    )
    logfire.info(
        "Comment created via API",
        comment_id=response.id,
        testimonial_id=response.testimonial_id,
    )
    publisher.comment_created(response.model_dump(mode="json"))
    return response


@router.get("/testimonial/{testimonial_id}", response_model=GetCommentsResponse)
async def get_comments(
    testimonial_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetCommentsResponse:
    """Get the comment threads of a testimonial.

    Public; a valid token fills in ``liked_by_user``.
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            testimonial_id=testimonial_id,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.post("/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_comment_like(
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    publisher: FromDishka[EventPublisher],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ToggleLikeResponse:
    """Like or unlike a comment. Requires authentication."""
    user_id = require_user_id(jwt_service, credentials)

    response = await toggle_like_use_case.execute(
        ToggleLikeRequest(
            likeable_type=LikeableType.COMMENT,
            likeable_id=comment_id,
            user_id=user_id,
        )
    )
    publisher.comment_like_updated(response.model_dump(mode="json"))
    return response


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    publisher: FromDishka[EventPublisher],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies. Author only."""
    user_id = require_user_id(jwt_service, credentials)

    response = await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
    publisher.comment_deleted(response.model_dump(mode="json"))
    return response
