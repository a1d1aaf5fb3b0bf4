"""User service: registration, credential checks and profile lookup."""

import re
from collections.abc import Callable
from uuid import UUID

import structlog
from starlette.concurrency import run_in_threadpool

from core.exceptions import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    ErrorCode,
    UserNotFoundError,
    ValidationError,
)
from domain.entities.user import PasswordHasher, User
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6


class UserService:
    """Service layer for user credentials."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        hasher: PasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = hasher

    async def register(self, name: str, email: str, password: str) -> User:
        """Create a user with a hashed password.

        Raises:
            ValidationError: name, email or password constraints unmet
            EmailAlreadyRegisteredError: email already in use
        """
        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationError("Name is required", field="name")
        if len(clean_name) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"Name cannot exceed {NAME_MAX_LENGTH} characters", field="name"
            )

        clean_email = (email or "").strip().lower()
        if not clean_email:
            raise ValidationError("Email is required", field="email")
        if not EMAIL_PATTERN.match(clean_email):
            raise ValidationError("Please fill a valid email address", field="email")

        if len(password or "") < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
                field="password",
            )

        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(clean_email):
                raise EmailAlreadyRegisteredError(clean_email)

            user = User(name=clean_name, email=clean_email)
            # bcrypt is CPU bound; keep it off the event loop.
            await run_in_threadpool(user.set_password, password, self._hasher)

            created = await uow.users.create(user)
            await uow.commit()

        logger.info("user_registered", user_id=str(created.id))
        return created

    async def get_by_email(self, email: str) -> User | None:
        """Look up a user by email, including the password hash."""
        async with self._uow_factory() as uow:
            return await uow.users.get_by_email(email.strip().lower())  # type: ignore[no-any-return]

    async def get_by_id(self, user_id: UUID) -> User:
        """Look up a user by id. The password hash is not loaded."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    async def verify_password(self, user: User, password: str) -> bool:
        """Check a raw password against the user's stored hash."""
        return await run_in_threadpool(user.check_password, password, self._hasher)

    async def authenticate(self, email: str, password: str) -> User:
        """Resolve a user from login credentials.

        Raises:
            AuthenticationError: unknown email or wrong password
        """
        user = await self.get_by_email(email)
        if not user or not await self.verify_password(user, password):
            logger.info("login_failed")
            raise AuthenticationError(
                message="Invalid email or password",
                error_code=ErrorCode.INVALID_CREDENTIALS,
            )

        logger.info("login_succeeded", user_id=str(user.id))
        return user
