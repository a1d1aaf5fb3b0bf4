"""Shared fixtures for unit tests."""

from datetime import date
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

# Fixed "today" so date rules are deterministic.
TODAY = date(2026, 3, 15)


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.todos = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class FakePasswordHasher:
    """Reversible stand-in for bcrypt that counts hash calls."""

    def __init__(self) -> None:
        self.hash_calls = 0

    def hash(self, password: str) -> str:
        self.hash_calls += 1
        return f"hashed::{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed::{password}"


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    """Create a fresh FakePasswordHasher."""
    return FakePasswordHasher()


@pytest.fixture
def today() -> date:
    """The fixed current day used by rule tests."""
    return TODAY


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    """A random user ID distinct from user_id."""
    return uuid4()
