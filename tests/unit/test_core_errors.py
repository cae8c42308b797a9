"""Tests for the dispatch error taxonomy.

Verifies defaults, codes and the wrapping of model errors by
GuardFailedError.
"""

import pytest

from entitygate.core.enums import ErrorCode
from entitygate.core.errors import (
    ConflictError,
    GuardFailedError,
    InternalError,
    NotFoundError,
    StorageFailureError,
    UnauthenticatedError,
    UnauthorizedError,
)


@pytest.mark.unit
class TestModelErrors:
    def test_not_found_for_entity(self):
        error = NotFoundError.for_entity("Widget", 7)

        assert error.code == ErrorCode.NOT_FOUND
        assert error.message == "Widget not found"
        assert error.entity_name == "Widget"
        assert error.entity_id == 7

    def test_not_found_defaults(self):
        error = NotFoundError()

        assert error.message == "Resource not found"
        assert error.entity_name is None
        assert error.entity_id is None

    def test_conflict_carries_constraint(self):
        error = ConflictError(entity_name="TodoItem", constraint="UNIQUE failed")

        assert error.code == ErrorCode.CONFLICT
        assert error.constraint == "UNIQUE failed"

    def test_storage_failure_has_generic_message(self):
        assert StorageFailureError().message == "Database error"
        assert StorageFailureError().code == ErrorCode.STORAGE_FAILURE

    def test_internal_error_code(self):
        assert InternalError().code == ErrorCode.INTERNAL_ERROR

    def test_str_includes_code_and_message(self):
        error = NotFoundError.for_entity("Widget", 1)

        assert str(error) == "not_found: Widget not found"

    def test_errors_are_immutable(self):
        error = ConflictError()

        with pytest.raises(AttributeError):
            error.message = "changed"  # type: ignore[misc]


@pytest.mark.unit
class TestAuthErrors:
    def test_unauthenticated(self):
        error = UnauthenticatedError()

        assert error.code == ErrorCode.UNAUTHENTICATED
        assert error.message == "Authentication required"

    def test_unauthorized(self):
        error = UnauthorizedError()

        assert error.code == ErrorCode.UNAUTHORIZED
        assert error.message == "Not authorized to access this resource"

    def test_guard_failed_wraps_cause(self):
        cause = StorageFailureError()

        error = GuardFailedError(cause=cause)

        assert error.code == ErrorCode.GUARD_FAILED
        assert error.cause is cause

    def test_errors_compare_by_value(self):
        assert UnauthorizedError() == UnauthorizedError()
        assert UnauthorizedError() != UnauthenticatedError()
