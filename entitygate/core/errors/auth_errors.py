"""Authorization errors returned by guards.

Error Types:
- UnauthenticatedError: No caller identity was supplied
- UnauthorizedError: Identity supplied but the guard denied the operation
- GuardFailedError: The guard's own store lookup failed; wraps the model error

A guard never returns NotFoundError directly. When an ownership record is
missing the guard answers UnauthorizedError so that a non-owner cannot
probe for the existence of a resource.

Usage:
    from entitygate.core.errors import UnauthenticatedError
    from entitygate.core.result import Failure

    if identity is None:
        return Failure(error=UnauthenticatedError())
"""

from dataclasses import dataclass

from entitygate.core.enums import ErrorCode
from entitygate.core.errors.domain_error import DomainError
from entitygate.core.errors.model_errors import ModelError


@dataclass(frozen=True, slots=True, kw_only=True)
class UnauthenticatedError(DomainError):
    """Caller is not authenticated."""

    code: ErrorCode = ErrorCode.UNAUTHENTICATED
    message: str = "Authentication required"


@dataclass(frozen=True, slots=True, kw_only=True)
class UnauthorizedError(DomainError):
    """Caller is authenticated but not allowed to perform the operation."""

    code: ErrorCode = ErrorCode.UNAUTHORIZED
    message: str = "Not authorized to access this resource"


@dataclass(frozen=True, slots=True, kw_only=True)
class GuardFailedError(DomainError):
    """Guard could not decide because a store lookup failed.

    Attributes:
        cause: Model error reported by the store during the guard's lookup.
    """

    cause: ModelError
    code: ErrorCode = ErrorCode.GUARD_FAILED
    message: str = "Authorization check failed"


# Closed sum of authorization error kinds
type AuthError = UnauthenticatedError | UnauthorizedError | GuardFailedError
