"""TodoItem resource router.

Owner-only CRUD over todo items, mounted at ``/api/v1/todo-items``.
"""

from entitygate.core.container import get_todo_item_pipeline
from entitygate.presentation.renderers import JsonListRenderer, JsonRenderer
from entitygate.presentation.routers.entity_router import build_entity_router
from entitygate.presentation.schemas import (
    TodoItemCreateRequest,
    TodoItemDraftQuery,
    TodoItemResponse,
    TodoItemUpdateRequest,
)

router = build_entity_router(
    get_todo_item_pipeline(),
    JsonRenderer(TodoItemResponse),
    create_schema=TodoItemCreateRequest,
    create_payload=TodoItemCreateRequest.to_payload,
    write_schema=TodoItemUpdateRequest,
    write_payload=TodoItemUpdateRequest.to_payload,
    list_renderer=JsonListRenderer(TodoItemResponse),
    init_schema=TodoItemDraftQuery,
    init_renderer=JsonRenderer(TodoItemDraftQuery),
)
