"""Todo service layer with business logic."""

from collections.abc import Callable
from datetime import date
from uuid import UUID

import structlog

from core.exceptions import TodoAccessDeniedError, TodoNotFoundError
from domain.entities.todo import Todo
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import todo_rules
from domain.services.todo_rules import TodoCategories

logger = structlog.get_logger()


class TodoService:
    """Service layer for Todo business logic.

    Every operation on a single todo checks, in order, that it exists and
    that the caller owns it before any validation runs.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        today: Callable[[], date] = todo_rules.utc_today,
    ) -> None:
        self._uow_factory = uow_factory
        self._today = today

    async def list_for_user(self, user_id: UUID) -> list[Todo]:
        """Get all todos owned by a user, in display order."""
        async with self._uow_factory() as uow:
            return await uow.todos.get_all_for_user(user_id)  # type: ignore[no-any-return]

    async def categorize_for_user(self, user_id: UUID) -> TodoCategories:
        """Group a user's todos into overdue / in progress / completed."""
        todos = await self.list_for_user(user_id)
        return todo_rules.categorize(todos, self._today())

    async def get_by_id(self, todo_id: UUID, user_id: UUID) -> Todo:
        """Get a specific todo, ensuring user ownership."""
        async with self._uow_factory() as uow:
            return await self._get_owned(uow, todo_id, user_id, "access")

    async def create(
        self,
        user_id: UUID,
        text: str | None,
        description: str | None = None,
        target_date: date | None = None,
    ) -> Todo:
        """Create a new in-progress todo for the user."""
        todo = todo_rules.build_todo(
            user_id,
            text,
            description,
            target_date,
            today=self._today(),
        )
        async with self._uow_factory() as uow:
            created = await uow.todos.create(todo)
            await uow.commit()

        logger.info("todo_created", todo_id=str(created.id), user_id=str(user_id))
        return created

    async def update(
        self,
        todo_id: UUID,
        user_id: UUID,
        text: str | None = None,
        description: object = ...,  # Sentinel to detect explicit None
        target_date: object = ...,  # Sentinel to detect explicit None
        status: object = ...,  # Sentinel to detect explicit None
    ) -> Todo:
        """Apply a partial update. Omitted fields stay as they are."""
        async with self._uow_factory() as uow:
            todo = await self._get_owned(uow, todo_id, user_id, "update")

            todo_rules.apply_changes(
                todo,
                today=self._today(),
                text=text,
                description=description,
                target_date=target_date,
                status=status,
            )

            updated = await uow.todos.update(todo)
            await uow.commit()

        logger.info(
            "todo_updated",
            todo_id=str(todo_id),
            user_id=str(user_id),
            status=updated.status.value,
        )
        return updated

    async def delete(self, todo_id: UUID, user_id: UUID) -> bool:
        """Permanently delete a todo owned by the user."""
        async with self._uow_factory() as uow:
            await self._get_owned(uow, todo_id, user_id, "delete")

            deleted = await uow.todos.delete(todo_id)
            if not deleted:
                raise TodoNotFoundError(str(todo_id))
            await uow.commit()

        logger.info("todo_deleted", todo_id=str(todo_id), user_id=str(user_id))
        return True

    @staticmethod
    async def _get_owned(
        uow: IUnitOfWork, todo_id: UUID, user_id: UUID, action: str
    ) -> Todo:
        todo = await uow.todos.get(todo_id)
        if not todo:
            raise TodoNotFoundError(str(todo_id))
        if todo.user_id != user_id:
            logger.warning(
                "todo_access_denied",
                todo_id=str(todo_id),
                user_id=str(user_id),
                action=action,
            )
            raise TodoAccessDeniedError(action)
        return todo
