"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.domain.error import AuthenticationError, NotFoundError
from stories.domain.service import JWTService, UserService
from stories.domain.value import UserId
from stories.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str
    email: str
    avatar_url: str | None
    promotion: str | None
    verified: bool
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Extract user_id from token
        3. Load user from database
        4. Return user info

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            AuthenticationError: If the token is invalid or names an unknown user
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except JWTError as e:
            raise AuthenticationError(str(e))
        except (ValueError, NotFoundError):
            raise AuthenticationError("Invalid token")

        return GetCurrentUserResponse(
            user_id=str(user.id),
            name=user.name,
            email=user.email,
            avatar_url=user.avatar_url,
            promotion=user.promotion,
            verified=user.verified,
            created_at=user.created_at,
        )
