"""Entity store adapters.

Usage:
    from entitygate.infrastructure.persistence.stores import TodoItemStore
"""

from entitygate.infrastructure.persistence.stores.sql_entity_store import (
    SqlEntityStore,
)
from entitygate.infrastructure.persistence.stores.todo_item_store import (
    TodoItemStore,
)

__all__ = ["SqlEntityStore", "TodoItemStore"]
