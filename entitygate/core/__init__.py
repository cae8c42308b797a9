"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- The dispatch error taxonomy (model and authorization errors)
- Settings and the dependency container
"""

from entitygate.core.enums import ErrorCode
from entitygate.core.errors import (
    ConflictError,
    DomainError,
    GuardFailedError,
    InternalError,
    NotFoundError,
    StorageFailureError,
    UnauthenticatedError,
    UnauthorizedError,
)
from entitygate.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "GuardFailedError",
    "InternalError",
    "NotFoundError",
    "Result",
    "StorageFailureError",
    "Success",
    "UnauthenticatedError",
    "UnauthorizedError",
]
