"""Todo repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.todo import Todo


class ITodoRepository(Protocol):
    """Repository interface for Todo entities.

    Performs no ownership checks; callers decide who may see what.
    """

    async def get(self, id: UUID) -> Todo | None:
        """Get a todo by ID."""
        ...

    async def get_all_for_user(self, user_id: UUID) -> list[Todo]:
        """Get all todos owned by a user.

        Ordered by target date ascending (undated last), then newest first.
        """
        ...

    async def create(self, todo: Todo) -> Todo:
        """Create a new todo."""
        ...

    async def update(self, todo: Todo) -> Todo:
        """Persist the mutable fields of an existing todo."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a todo and return success status."""
        ...
