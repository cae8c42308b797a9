"""Result types for railway-oriented programming.

Every store call, guard check and pipeline stage returns a Result instead
of raising. Failures carry a tagged error value from the taxonomy in
``entitygate.core.errors`` so callers can match exhaustively on kind.

Usage:
    async def read(session, entity_id) -> Result[TodoItem | None, ModelError]:
        ...

    match await store.read(session, 7):
        case Success(value=None):
            ...  # no such row
        case Success(value=item):
            ...
        case Failure(error=NotFoundError()):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
