"""SQLAlchemy implementation of User repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import EmailAlreadyRegisteredError
from domain.entities.user import User
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID, leaving the password hash out."""
        stmt = select(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model, include_password=False) if model else None

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, including the password hash."""
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model, include_password=True) if model else None

    async def create(self, user: User) -> User:
        """Create a new user. The unique email index backs the service check."""
        if not user.password_hash:
            raise ValueError("User must have a password hash before it is stored")

        model = UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            raise EmailAlreadyRegisteredError(user.email) from None
        await self._session.refresh(model)
        return self._to_entity(model, include_password=False)

    def _to_entity(self, model: UserModel, include_password: bool) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash if include_password else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
