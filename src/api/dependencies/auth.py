"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies.services import get_user_service
from core.exceptions import AuthenticationError, ErrorCode, UserNotFoundError
from domain.entities.user import User
from domain.services.user_service import UserService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import IAuthProvider

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)

# Singleton auth provider
_auth_provider: IAuthProvider | None = None


def get_auth_provider() -> IAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    auth_provider: IAuthProvider = Depends(get_auth_provider),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """
    Dependency to get the current authenticated user.

    Only reads: verifies the bearer token, then resolves its subject.

    Raises:
        AuthenticationError: If no token is provided, the token is invalid or
            expired, or the user it names no longer exists
    """
    if not credentials:
        raise AuthenticationError(
            message="Not authorized, no token",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    payload = auth_provider.verify_token(credentials.credentials)

    try:
        return await user_service.get_by_id(payload.user_id)
    except UserNotFoundError:
        raise AuthenticationError(
            message="Not authorized, user not found",
            error_code=ErrorCode.UNAUTHORIZED,
        ) from None


# Type alias for convenience in route handlers
CurrentUser = Annotated[User, Depends(get_current_user)]
