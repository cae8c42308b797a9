"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from entitygate.infrastructure.persistence.models.todo_item import TodoItem

__all__ = ["TodoItem"]
