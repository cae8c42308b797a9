"""Core errors package.

Exports the full dispatch error taxonomy.

Usage:
    from entitygate.core.errors import DispatchError, NotFoundError, UnauthorizedError
"""

from entitygate.core.errors.auth_errors import (
    AuthError,
    GuardFailedError,
    UnauthenticatedError,
    UnauthorizedError,
)
from entitygate.core.errors.domain_error import DomainError
from entitygate.core.errors.model_errors import (
    ConflictError,
    InternalError,
    ModelError,
    NotFoundError,
    StorageFailureError,
)

# Anything the dispatch pipeline can fail with
type DispatchError = AuthError | ModelError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "StorageFailureError",
    "InternalError",
    "ModelError",
    "UnauthenticatedError",
    "UnauthorizedError",
    "GuardFailedError",
    "AuthError",
    "DispatchError",
]
