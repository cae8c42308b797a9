"""Event signals attached to successful mutations.

A successful write, create or delete yields exactly one signal named
``<EntityName><Operation>`` (``TodoItemCreated``, ``WidgetDeleted``).
The transport exposes it to downstream consumers in a response header,
so the value must be a legal header value: visible ASCII, space or tab,
with no leading or trailing whitespace.

A name that cannot be encoded is a defect in entity naming, not a
runtime condition, and is reported as InternalError.

Usage:
    match event_signal("TodoItem", EntityOperation.CREATED):
        case Success(value=signal):
            headers["HX-Trigger"] = signal.name
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from enum import Enum

from entitygate.core.errors import InternalError
from entitygate.core.result import Failure, Result, Success


class EntityOperation(str, Enum):
    """Mutating operations that emit a signal (past tense)."""

    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"


@dataclass(frozen=True, slots=True, kw_only=True)
class EventSignal:
    """Named token describing a completed mutation.

    Attributes:
        entity_name: Entity type name.
        operation: Operation that completed.
    """

    entity_name: str
    operation: EntityOperation

    @property
    def name(self) -> str:
        """Signal string, e.g. ``TodoItemUpdated``."""
        return f"{self.entity_name}{self.operation.value}"

    def __str__(self) -> str:
        return self.name


def _is_header_safe(value: str) -> bool:
    # Header values lose surrounding whitespace in transit.
    if value != value.strip():
        return False
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def event_signal(
    entity_name: str, operation: EntityOperation
) -> Result[EventSignal, InternalError]:
    """Build the signal for an entity operation.

    Args:
        entity_name: Entity type name.
        operation: Completed operation.

    Returns:
        Success(EventSignal) or Failure(InternalError) when the name is
        empty or not encodable as a header value.
    """
    if not entity_name or not _is_header_safe(entity_name):
        return Failure(
            error=InternalError(
                message="Failed to build event signal",
                details={"entity_name": entity_name, "operation": operation.value},
            )
        )
    return Success(value=EventSignal(entity_name=entity_name, operation=operation))
