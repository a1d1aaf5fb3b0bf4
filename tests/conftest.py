"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any

# Keep test runs away from any developer .env database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.password import BcryptPasswordHasher
from infrastructure.database.models import Base

# Test database URL (SQLite in memory, one shared connection per engine)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SECRET_KEY = "test-secret-key"

DEFAULT_PASSWORD = "secret123"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key=TEST_SECRET_KEY,
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """Cheap bcrypt cost so the suite stays fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
    password_hasher: BcryptPasswordHasher,
) -> FastAPI:
    """
    Create the application wired to the test database.

    Only the service factories and the token provider are overridden; the
    auth gate itself runs for real.
    """
    from api.dependencies.auth import get_auth_provider
    from api.dependencies.services import get_todo_service, get_user_service
    from domain.services.todo_service import TodoService
    from domain.services.user_service import UserService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    user_service = UserService(test_uow_factory, hasher=password_hasher)
    todo_service = TodoService(test_uow_factory)

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_todo_service] = lambda: todo_service

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """
    Register users through the API.

    Returns an async callable producing the register response body plus a
    ready-made ``headers`` entry with the bearer token.
    """

    async def _make_user(
        email: str = "test@example.com",
        name: str = "Test User",
        password: str = DEFAULT_PASSWORD,
    ) -> dict[str, Any]:
        response = await client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        body = dict(response.json())
        body["headers"] = {"Authorization": f"Bearer {body['token']}"}
        return body

    return _make_user


@pytest.fixture
async def auth_headers(make_user: Callable[..., Awaitable[dict[str, Any]]]) -> dict[str, str]:
    """Register the default user and return its authorization headers."""
    user = await make_user()
    return dict(user["headers"])


@pytest.fixture
async def other_auth_headers(
    make_user: Callable[..., Awaitable[dict[str, Any]]],
) -> dict[str, str]:
    """A second, unrelated user."""
    user = await make_user(email="other@example.com", name="Other User")
    return dict(user["headers"])
