"""Domain entities shipped with the service."""

from entitygate.domain.entities.todo_item import TodoItem, TodoItemCreate, TodoItemWrite

__all__ = ["TodoItem", "TodoItemCreate", "TodoItemWrite"]
