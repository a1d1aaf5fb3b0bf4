"""Validation and state-transition rules for todos.

Everything here is pure: callers pass in ``today`` and the entity, nothing
touches a repository. The service layer runs these before persisting.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable
from uuid import UUID

from core.exceptions import ErrorCode, ValidationError
from domain.entities.todo import Todo, TodoStatus

TEXT_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 250


def utc_today() -> date:
    """Current calendar day (UTC)."""
    return datetime.utcnow().date()


def validate_text(text: str | None) -> str:
    """Return the trimmed task text or raise ValidationError."""
    value = (text or "").strip()
    if not value:
        raise ValidationError("Text is required for a todo", field="text")
    if len(value) > TEXT_MAX_LENGTH:
        raise ValidationError(
            f"Task text cannot exceed {TEXT_MAX_LENGTH} characters", field="text"
        )
    return value


def validate_description(description: str | None) -> str | None:
    """Return the trimmed description, None when blank."""
    if description is None:
        return None
    value = description.strip()
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    return value or None


def parse_status(value: Any) -> TodoStatus:
    """Convert a raw status value, rejecting anything outside TodoStatus."""
    try:
        return TodoStatus(value)
    except ValueError:
        raise ValidationError(
            "Invalid status value.",
            field="status",
            error_code=ErrorCode.INVALID_STATUS,
        ) from None


def ensure_target_date_allowed(
    target_date: date | None, status: TodoStatus, today: date
) -> None:
    """Active tasks may not target a day before today.

    Completed and cancelled tasks are allowed past dates.
    """
    if target_date is None or not status.is_active:
        return
    if target_date < today:
        raise ValidationError(
            "Target date cannot be in the past for an active task.",
            field="targetDate",
            error_code=ErrorCode.TARGET_DATE_IN_PAST,
        )


def apply_status(todo: Todo, status: TodoStatus) -> None:
    """Set the status and keep completed_date consistent with it."""
    if status is TodoStatus.COMPLETED:
        todo.complete()
    else:
        todo.reopen(status)


def build_todo(
    user_id: UUID,
    text: str | None,
    description: str | None = None,
    target_date: date | None = None,
    *,
    today: date,
) -> Todo:
    """Validate creation input and return a new in-progress todo."""
    clean_text = validate_text(text)
    clean_description = validate_description(description)
    ensure_target_date_allowed(target_date, TodoStatus.IN_PROGRESS, today)
    return Todo(
        user_id=user_id,
        text=clean_text,
        description=clean_description,
        target_date=target_date,
    )


def apply_changes(
    todo: Todo,
    *,
    today: date,
    text: str | None = None,
    description: object = ...,  # Sentinel to detect explicit None
    target_date: object = ...,  # Sentinel to detect explicit None
    status: object = ...,  # Sentinel to detect explicit None
) -> Todo:
    """Apply a partial update to ``todo`` in place.

    All input is validated before the entity is touched, so a rejected update
    leaves it unchanged.
    """
    new_text = validate_text(text) if text is not None else None
    new_description = (
        validate_description(description)  # type: ignore[arg-type]
        if description is not ...
        else ...
    )
    new_status = parse_status(status) if status is not ... else None
    resulting_status = new_status or todo.status

    if target_date is not ... and target_date is not None:
        ensure_target_date_allowed(target_date, resulting_status, today)  # type: ignore[arg-type]
    elif target_date is ... and new_status is not None and not todo.status.is_active:
        # Reactivating keeps the stored date, which must still be valid.
        ensure_target_date_allowed(todo.target_date, resulting_status, today)

    if new_text is not None:
        todo.text = new_text
    if new_description is not ...:
        todo.description = new_description  # type: ignore[assignment]
    if target_date is not ...:
        todo.target_date = target_date  # type: ignore[assignment]
    if new_status is not None:
        apply_status(todo, new_status)

    todo.updated_at = datetime.utcnow()
    return todo


def is_overdue(todo: Todo, today: date) -> bool:
    """An active task whose target day has passed."""
    return (
        todo.status.is_active
        and todo.target_date is not None
        and todo.target_date < today
    )


@dataclass
class TodoCategories:
    """Dashboard grouping of a user's todos. Cancelled todos are left out."""

    overdue: list[Todo] = field(default_factory=list)
    in_progress: list[Todo] = field(default_factory=list)
    completed: list[Todo] = field(default_factory=list)


def categorize(todos: Iterable[Todo], today: date) -> TodoCategories:
    """Split todos into overdue / in progress / completed, preserving order."""
    categories = TodoCategories()
    for todo in todos:
        if todo.status is TodoStatus.COMPLETED:
            categories.completed.append(todo)
        elif todo.status is TodoStatus.CANCELLED:
            continue
        elif is_overdue(todo, today):
            categories.overdue.append(todo)
        else:
            categories.in_progress.append(todo)
    return categories
