"""Pydantic schemas for Todo API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict

from api.schemas.common import CamelModel


class TodoCreate(CamelModel):
    """Schema for creating a Todo.

    Length limits are checked by the todo rules so that create and update
    report them the same way.
    """

    text: str | None = None
    description: str | None = None
    target_date: date | None = None


class TodoUpdate(CamelModel):
    """Schema for updating a Todo (all fields optional).

    Explicit ``null`` for ``targetDate`` or ``description`` clears the value.
    """

    text: str | None = None
    description: str | None = None
    target_date: date | None = None
    status: str | None = None


class TodoResponse(CamelModel):
    """Schema for Todo response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "user": "456e4567-e89b-12d3-a456-426614174000",
                "text": "Buy milk",
                "description": "Semi-skimmed",
                "targetDate": "2026-01-29",
                "status": "IN_PROGRESS",
                "completedDate": None,
                "createdAt": "2026-01-28T10:00:00",
                "updatedAt": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UUID
    text: str
    description: str | None
    target_date: date | None
    status: str
    completed_date: datetime | None
    created_at: datetime
    updated_at: datetime


class TodoCategoriesResponse(CamelModel):
    """Dashboard view: cancelled todos appear in no bucket."""

    overdue: list[TodoResponse]
    in_progress: list[TodoResponse]
    completed: list[TodoResponse]
