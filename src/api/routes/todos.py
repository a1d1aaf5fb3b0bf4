"""Todo API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_todo_service
from api.schemas.common import DeleteResponse
from api.schemas.todo import (
    TodoCategoriesResponse,
    TodoCreate,
    TodoResponse,
    TodoUpdate,
)
from core.exceptions import TodoNotFoundError
from domain.entities.todo import Todo
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get(
    "",
    response_model=list[TodoResponse],
    summary="List all tasks",
    responses={
        200: {"description": "Tasks ordered by target date (undated last), newest first"},
        401: {"description": "Not authenticated"},
    },
)
async def list_todos(
    user: CurrentUser,
    service: TodoService = Depends(get_todo_service),
) -> list[TodoResponse]:
    """Get every task owned by the authenticated user."""
    todos = await service.list_for_user(user.id)
    return [_build_todo_response(todo) for todo in todos]


@router.get(
    "/categorized",
    response_model=TodoCategoriesResponse,
    summary="Tasks grouped for the dashboard",
    responses={
        200: {"description": "Overdue, in-progress and completed tasks"},
        401: {"description": "Not authenticated"},
    },
)
async def categorized_todos(
    user: CurrentUser,
    service: TodoService = Depends(get_todo_service),
) -> TodoCategoriesResponse:
    """
    Group the user's tasks into overdue, in progress and completed.

    Cancelled tasks are not listed in any group.
    """
    categories = await service.categorize_for_user(user.id)
    return TodoCategoriesResponse(
        overdue=[_build_todo_response(t) for t in categories.overdue],
        in_progress=[_build_todo_response(t) for t in categories.in_progress],
        completed=[_build_todo_response(t) for t in categories.completed],
    )


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    responses={
        201: {"description": "Task created successfully"},
        400: {"description": "Validation error"},
        401: {"description": "Not authenticated"},
    },
)
async def create_todo(
    body: TodoCreate,
    user: CurrentUser,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Create a new in-progress task for the authenticated user."""
    todo = await service.create(
        user_id=user.id,
        text=body.text,
        description=body.description,
        target_date=body.target_date,
    )
    return _build_todo_response(todo)


@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Get a task",
    responses={
        200: {"description": "Task details"},
        401: {"description": "Not authenticated or not the owner"},
        404: {"description": "Task not found"},
    },
)
async def get_todo(
    todo_id: str,
    user: CurrentUser,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Get a specific task by ID."""
    todo = await service.get_by_id(_parse_todo_id(todo_id), user.id)
    return _build_todo_response(todo)


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Update a task",
    responses={
        200: {"description": "Task updated successfully"},
        400: {"description": "Validation error"},
        401: {"description": "Not authenticated or not the owner"},
        404: {"description": "Task not found"},
    },
)
async def update_todo(
    todo_id: str,
    body: TodoUpdate,
    user: CurrentUser,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """
    Update an existing task. All fields are optional (partial update).

    Set `targetDate` to `null` to clear it. Moving to `COMPLETED` stamps
    `completedDate`; any other status clears it.
    """
    fields = body.model_fields_set

    # Explicit null text is still a supplied (empty) value.
    text = (body.text or "") if "text" in fields else None

    todo = await service.update(
        todo_id=_parse_todo_id(todo_id),
        user_id=user.id,
        text=text,
        description=body.description if "description" in fields else ...,
        target_date=body.target_date if "target_date" in fields else ...,
        status=body.status if "status" in fields else ...,
    )
    return _build_todo_response(todo)


@router.delete(
    "/{todo_id}",
    response_model=DeleteResponse,
    summary="Delete a task",
    responses={
        200: {"description": "Task deleted successfully"},
        401: {"description": "Not authenticated or not the owner"},
        404: {"description": "Task not found"},
    },
)
async def delete_todo(
    todo_id: str,
    user: CurrentUser,
    service: TodoService = Depends(get_todo_service),
) -> DeleteResponse:
    """Permanently delete a task."""
    await service.delete(_parse_todo_id(todo_id), user.id)
    return DeleteResponse(success=True, message="Todo removed")


def _parse_todo_id(todo_id: str) -> UUID:
    """Malformed ids can't name an existing task, so they are not found."""
    try:
        return UUID(todo_id)
    except ValueError:
        raise TodoNotFoundError(todo_id) from None


def _build_todo_response(todo: Todo) -> TodoResponse:
    """Convert domain entity to response schema."""
    return TodoResponse(
        id=todo.id,
        user=todo.user_id,
        text=todo.text,
        description=todo.description,
        target_date=todo.target_date,
        status=todo.status.value,
        completed_date=todo.completed_date,
        created_at=todo.created_at,
        updated_at=todo.updated_at,
    )
