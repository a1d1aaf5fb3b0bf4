"""Health check endpoints."""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.common import MessageResponse
from core.config import settings
from infrastructure.database.session import get_async_session

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None


@router.get("/", response_model=MessageResponse, summary="Service banner")
async def root() -> MessageResponse:
    """Plain liveness banner."""
    return MessageResponse(message="API is running...")


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Health check including a database round trip."""
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning("database_health_check_failed", error=str(e))
        db_status = "unhealthy"

    overall_status = "healthy" if db_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=settings.app_version,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        database=db_status,
    )
