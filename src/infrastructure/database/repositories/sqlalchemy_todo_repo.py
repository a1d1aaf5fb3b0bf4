"""SQLAlchemy implementation of Todo repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.todo import Todo, TodoStatus
from infrastructure.database.models import TodoModel


class SQLAlchemyTodoRepository:
    """SQLAlchemy implementation of ITodoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Todo | None:
        """Get a todo by ID."""
        stmt = select(TodoModel).where(TodoModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_user(self, user_id: UUID) -> list[Todo]:
        """Get all todos for a user, soonest target date first, undated last."""
        stmt = (
            select(TodoModel)
            .where(TodoModel.user_id == user_id)
            .order_by(
                TodoModel.target_date.is_(None),
                TodoModel.target_date.asc(),
                TodoModel.created_at.desc(),
            )
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, todo: Todo) -> Todo:
        """Create a new todo."""
        model = self._to_model(todo)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, todo: Todo) -> Todo:
        """Update an existing todo. The owner is never rewritten."""
        stmt = select(TodoModel).where(TodoModel.id == todo.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Todo {todo.id} not found")

        # Update fields
        model.text = todo.text
        model.description = todo.description
        model.target_date = todo.target_date
        model.status = todo.status.value
        model.completed_date = todo.completed_date
        model.updated_at = todo.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Permanently delete a todo."""
        stmt = select(TodoModel).where(TodoModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: TodoModel) -> Todo:
        """Convert ORM model to domain entity."""
        return Todo(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            description=model.description,
            target_date=model.target_date,
            status=TodoStatus(model.status),
            completed_date=model.completed_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Todo) -> TodoModel:
        """Convert domain entity to ORM model."""
        return TodoModel(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            description=entity.description,
            target_date=entity.target_date,
            status=entity.status.value,
            completed_date=entity.completed_date,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
