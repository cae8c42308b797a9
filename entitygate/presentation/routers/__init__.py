"""HTTP routers.

``v1_router`` mounts every entity router under ``/api/v1``.
"""

from fastapi import APIRouter

from entitygate.presentation.routers.entity_router import build_entity_router
from entitygate.presentation.routers.todo_items import router as todo_items_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(todo_items_router, prefix="/todo-items")

__all__ = ["build_entity_router", "todo_items_router", "v1_router"]
