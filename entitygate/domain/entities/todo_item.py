"""TodoItem domain entity and payloads.

A todo item belongs to exactly one user (``owner_id``). Descriptions are
unique per owner; the store reports a duplicate as ConflictError.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Created and destroyed by the store only; the pipeline passes
      payloads through and returns whatever the store yields

Usage:
    from entitygate.domain.entities import TodoItem, TodoItemCreate

    payload = TodoItemCreate(description="Buy milk", owner_id=7)
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True, kw_only=True)
class TodoItem:
    """A single todo entry.

    Attributes:
        id: Store-assigned identifier.
        owner_id: User that owns the item.
        description: Free-text description (unique per owner).
        done: Completion flag.
    """

    entity_name: ClassVar[str] = "TodoItem"

    id: int
    owner_id: int
    description: str
    done: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class TodoItemCreate:
    """Fields accepted when creating a todo item.

    Attributes:
        description: Item text.
        owner_id: Owning user. Filled from the caller's identity when the
            request is decoded; None for an anonymous caller.
    """

    description: str
    owner_id: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TodoItemWrite:
    """Fields accepted when updating a todo item."""

    description: str
    done: bool = False
