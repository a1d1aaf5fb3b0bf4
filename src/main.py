"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes import router as api_router
from api.routes.health import router as health_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.models import Base
from infrastructure.database.session import engine

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager: the engine lives as long as the process."""
    if settings.auto_create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_tables_ensured")

    logger.info("application_started", environment=settings.app_env)
    yield

    await engine.dispose()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Personal Task Tracker\n\n"
            "Register, log in, and manage your own tasks with target dates "
            "and a simple status lifecycle.\n\n"
            "### Authentication\n"
            "`/api/auth/register` and `/api/auth/login` return a token. All "
            "`/api/todos` endpoints and `/api/auth/me` require it "
            "in the Authorization header:\n"
            "```\nAuthorization: Bearer <your_token>\n```\n\n"
            "### Statuses\n"
            "- `IN_PROGRESS` (default)\n"
            "- `COMPLETED` (sets `completedDate`)\n"
            "- `CANCELLED`"
        ),
        version=settings.app_version,
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "auth",
                "description": "Registration, login and current user",
            },
            {
                "name": "todos",
                "description": "Task management operations",
            },
        ],
    )

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
