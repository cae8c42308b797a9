"""Base error class for Railway-Oriented Programming.

DomainError is the base class for every error in the dispatch taxonomy.
Errors flow through the system as data (inside ``Failure``), never as
raised exceptions, and are immutable once constructed.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Concrete kinds live in ``model_errors`` and ``auth_errors``

Usage:
    from entitygate.core.errors import DomainError
    from entitygate.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from entitygate.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging. Never shown to callers
            for storage or internal failures.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
