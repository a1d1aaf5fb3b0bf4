"""Dependency injection factories for services."""

from functools import lru_cache
from typing import Callable

from domain.services.todo_service import TodoService
from domain.services.user_service import UserService
from infrastructure.auth.password import BcryptPasswordHasher
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get password hasher instance."""
    return BcryptPasswordHasher()


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(get_uow_factory(), hasher=get_password_hasher())


@lru_cache
def get_todo_service() -> TodoService:
    """Get Todo service instance."""
    return TodoService(get_uow_factory())
