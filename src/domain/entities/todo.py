"""Todo domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID, uuid4


class TodoStatus(StrEnum):
    """Lifecycle states of a task."""

    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_active(self) -> bool:
        """Active tasks are neither completed nor cancelled."""
        return self is TodoStatus.IN_PROGRESS


@dataclass
class Todo:
    """Domain entity for a Todo/Task."""

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    target_date: date | None = None
    status: TodoStatus = TodoStatus.IN_PROGRESS
    completed_date: datetime | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def complete(self) -> None:
        """Mark the todo as completed, keeping the first completion time."""
        self.status = TodoStatus.COMPLETED
        if self.completed_date is None:
            self.completed_date = datetime.utcnow()
        self.updated_at = datetime.utcnow()

    def reopen(self, status: TodoStatus = TodoStatus.IN_PROGRESS) -> None:
        """Move the todo to a non-completed status."""
        self.status = status
        self.completed_date = None
        self.updated_at = datetime.utcnow()

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
