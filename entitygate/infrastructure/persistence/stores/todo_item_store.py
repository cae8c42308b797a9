"""TodoItem store.

Maps rows of ``todo_items`` to TodoItem entities. Ownership is the
``owner_id`` column of the item's own row, so a deleted item has no
recorded owner.
"""

from typing import Any

from sqlalchemy import Row

from entitygate.domain.entities import TodoItem, TodoItemCreate, TodoItemWrite
from entitygate.infrastructure.persistence.models.todo_item import (
    TodoItem as TodoItemModel,
)
from entitygate.infrastructure.persistence.stores.sql_entity_store import (
    SqlEntityStore,
)


class TodoItemStore(SqlEntityStore[TodoItem, TodoItemWrite, TodoItemCreate]):
    """SQL store for todo items."""

    model = TodoItemModel
    entity_name = TodoItem.entity_name

    def _to_entity(self, row: Row[Any]) -> TodoItem:
        return TodoItem(
            id=row.id,
            owner_id=row.owner_id,
            description=row.description,
            done=row.done,
        )

    def _create_values(self, payload: TodoItemCreate) -> dict[str, Any]:
        return {"description": payload.description, "owner_id": payload.owner_id}

    def _write_values(self, payload: TodoItemWrite) -> dict[str, Any]:
        return {"description": payload.description, "done": payload.done}
