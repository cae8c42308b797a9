"""Container module - centralized dependency injection.

    from entitygate.core.container import get_db_session, get_todo_item_pipeline

The container is organized into modules:
- infrastructure: database, logging, token service
- pipelines: entity stores and dispatch pipelines
"""

from entitygate.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_jwt_service,
    get_logger,
)
from entitygate.core.container.pipelines import (
    get_todo_item_pipeline,
    get_todo_item_store,
)

__all__ = [
    "get_database",
    "get_db_session",
    "get_jwt_service",
    "get_logger",
    "get_todo_item_pipeline",
    "get_todo_item_store",
]
