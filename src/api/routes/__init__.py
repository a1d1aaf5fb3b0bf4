"""API router configuration."""

from fastapi import APIRouter

from api.routes.auth import router as auth_router
from api.routes.todos import router as todos_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(todos_router)
