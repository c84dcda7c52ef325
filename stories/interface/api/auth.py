"""Bearer token helpers for route handlers."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stories.domain.error import AuthenticationError
from stories.domain.service import JWTService

# auto_error=False so that public endpoints accept anonymous callers
bearer_scheme = HTTPBearer(auto_error=False)


def optional_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Resolve the caller's user ID, or None for anonymous or bad tokens."""
    token = credentials.credentials if credentials else None
    user_id = jwt_service.get_user_id_from_token(token)
    return str(user_id) if user_id else None


def require_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str:
    """Resolve the caller's user ID.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")
    user_id = optional_user_id(jwt_service, credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")
    return user_id
