"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from stories.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from stories.domain.error import AuthenticationError
from stories.interface.api.auth import bearer_scheme

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetCurrentUserResponse:
    """Get the authenticated user's profile.

    Raises:
        AuthenticationError: If the token is missing, invalid or names an
            unknown user
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")

    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=credentials.credentials)
    )
