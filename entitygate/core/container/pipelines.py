"""Entity store and dispatch pipeline factories.

Each entity type gets one store and one pipeline, both app-scoped. The
store is stateless; sessions are supplied per call.
"""

from functools import lru_cache

from entitygate.application.dispatch import DispatchPipeline, EntityBinding
from entitygate.application.guards import OwnershipGuard
from entitygate.core.container.infrastructure import get_logger
from entitygate.domain.entities import TodoItem, TodoItemCreate, TodoItemWrite
from entitygate.infrastructure.persistence.stores import TodoItemStore


@lru_cache()
def get_todo_item_store() -> TodoItemStore:
    """Get TodoItem store singleton."""
    return TodoItemStore(logger=get_logger())


@lru_cache()
def get_todo_item_pipeline() -> DispatchPipeline[
    TodoItem, int, TodoItemWrite, TodoItemCreate
]:
    """Get TodoItem dispatch pipeline singleton.

    Owner-only access for every operation; listing returns the caller's
    own items.
    """
    store = get_todo_item_store()
    binding = EntityBinding(
        store=store,
        guard=OwnershipGuard(store),
        ownership=store,
    )
    return DispatchPipeline(binding=binding, logger=get_logger())
