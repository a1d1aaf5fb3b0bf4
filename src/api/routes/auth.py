"""Auth API routes: registration, login and the current profile."""

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser, get_auth_provider
from api.dependencies.services import get_user_service
from api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from domain.entities.user import User
from domain.services.user_service import UserService
from infrastructure.auth.provider import IAuthProvider

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User created, token issued"},
        400: {"description": "Validation error or email already registered"},
    },
)
async def register(
    body: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> AuthResponse:
    """Create an account and return a bearer token for it."""
    user = await user_service.register(body.name, body.email, body.password)
    return _build_auth_response(user, auth_provider)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    responses={
        200: {"description": "Credentials accepted, token issued"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    body: LoginRequest,
    user_service: UserService = Depends(get_user_service),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    user = await user_service.authenticate(body.email, body.password)
    return _build_auth_response(user, auth_provider)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the current user",
    responses={
        200: {"description": "The authenticated user's profile"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def me(user: CurrentUser) -> UserResponse:
    """Return the profile of the token's owner."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _build_auth_response(user: User, auth_provider: IAuthProvider) -> AuthResponse:
    return AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        token=auth_provider.create_token(user.id),
    )
