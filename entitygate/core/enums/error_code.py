"""Machine-readable error codes for the dispatch taxonomy.

Two layers:
- Model errors (store level): NOT_FOUND, CONFLICT, STORAGE_FAILURE, INTERNAL_ERROR
- Authorization errors: UNAUTHENTICATED, UNAUTHORIZED, GUARD_FAILED

The code values double as the slug in RFC 9457 ``type`` URLs.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Model errors
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE_FAILURE = "storage_failure"
    INTERNAL_ERROR = "internal_error"

    # Authorization errors
    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"
    GUARD_FAILED = "guard_failed"
