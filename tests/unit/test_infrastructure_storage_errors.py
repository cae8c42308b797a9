"""Tests for map_storage_error.

Constraint violations must always surface as ConflictError, never as
StorageFailureError.
"""

import pytest
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    NoResultFound,
    OperationalError,
    ProgrammingError,
)

from entitygate.core.errors import ConflictError, NotFoundError, StorageFailureError
from entitygate.infrastructure.persistence.storage_errors import map_storage_error


def _integrity(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


@pytest.mark.unit
class TestMapStorageError:
    @pytest.mark.parametrize(
        "message",
        [
            "UNIQUE constraint failed: todo_items.owner_id, todo_items.description",
            "FOREIGN KEY constraint failed",
            "NOT NULL constraint failed: todo_items.owner_id",
            "CHECK constraint failed: done_flag",
        ],
    )
    def test_constraint_violation_is_conflict(self, message):
        error = map_storage_error(_integrity(message), entity_name="TodoItem")

        assert isinstance(error, ConflictError)
        assert error.entity_name == "TodoItem"
        assert error.constraint == message

    def test_no_result_is_not_found(self):
        error = map_storage_error(NoResultFound(), entity_name="TodoItem")

        assert isinstance(error, NotFoundError)
        assert error.message == "TodoItem not found"

    def test_no_result_without_entity_name(self):
        error = map_storage_error(NoResultFound())

        assert error == NotFoundError()

    @pytest.mark.parametrize(
        "exc",
        [
            OperationalError("SELECT 1", {}, Exception("database is locked")),
            ProgrammingError("SELECT 1", {}, Exception("no such table")),
            DBAPIError("SELECT 1", {}, Exception("connection reset")),
        ],
    )
    def test_other_faults_are_storage_failures(self, exc):
        error = map_storage_error(exc, entity_name="TodoItem")

        assert isinstance(error, StorageFailureError)
        assert error.message == "Database error"
        assert error.details == {"error_type": type(exc).__name__}
