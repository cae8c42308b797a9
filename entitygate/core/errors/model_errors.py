"""Model (store-level) errors.

These are the domain error kinds produced at the boundary between the
store and the rest of the pipeline. Raw storage exceptions are
classified into one of these exactly once (see
``entitygate.infrastructure.persistence.storage_errors``); no component
above the store looks at a raw exception.

Error Types:
- NotFoundError: No matching row
- ConflictError: Unique / foreign-key / not-null / check constraint violated
- StorageFailureError: Any other storage-layer fault
- InternalError: Programmer-detectable misuse (e.g. malformed event signal)

Usage:
    from entitygate.core.errors import NotFoundError
    from entitygate.core.result import Failure

    return Failure(error=NotFoundError.for_entity("TodoItem", 7))
"""

from dataclasses import dataclass

from entitygate.core.enums import ErrorCode
from entitygate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Entity not found.

    Attributes:
        entity_name: Entity type name (TodoItem, Widget, ...).
        entity_id: Identifier that matched nothing, if known.
    """

    code: ErrorCode = ErrorCode.NOT_FOUND
    message: str = "Resource not found"
    entity_name: str | None = None
    entity_id: object | None = None

    @classmethod
    def for_entity(cls, entity_name: str, entity_id: object) -> "NotFoundError":
        """Build a not-found error for a specific entity id."""
        return cls(
            message=f"{entity_name} not found",
            entity_name=entity_name,
            entity_id=entity_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """A store constraint rejected the operation.

    Attributes:
        entity_name: Entity type involved, when the store knows it.
        constraint: Database-reported reason (for logs only).
    """

    code: ErrorCode = ErrorCode.CONFLICT
    message: str = "Operation is not allowed because of a conflict"
    entity_name: str | None = None
    constraint: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageFailureError(DomainError):
    """Storage-layer fault that is not a constraint violation.

    The message is never shown to callers.
    """

    code: ErrorCode = ErrorCode.STORAGE_FAILURE
    message: str = "Database error"


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Programmer-detectable misuse, e.g. an entity name that cannot be
    encoded as a transport header.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    message: str = "Internal error"


# Closed sum of model error kinds
type ModelError = NotFoundError | ConflictError | StorageFailureError | InternalError
