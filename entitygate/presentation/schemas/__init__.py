"""Request and response schemas."""

from entitygate.presentation.schemas.todo_item_schemas import (
    TodoItemCreateRequest,
    TodoItemDraftQuery,
    TodoItemResponse,
    TodoItemUpdateRequest,
)

__all__ = [
    "TodoItemCreateRequest",
    "TodoItemDraftQuery",
    "TodoItemResponse",
    "TodoItemUpdateRequest",
]
