"""Tests for event signals emitted after successful mutations."""

import pytest

from entitygate.core.enums import ErrorCode
from entitygate.core.result import Failure, Success
from entitygate.domain.events import EntityOperation, EventSignal, event_signal


@pytest.mark.unit
class TestEventSignal:
    @pytest.mark.parametrize(
        ("operation", "expected"),
        [
            (EntityOperation.CREATED, "WidgetCreated"),
            (EntityOperation.UPDATED, "WidgetUpdated"),
            (EntityOperation.DELETED, "WidgetDeleted"),
        ],
    )
    def test_name_is_entity_name_plus_operation(self, operation, expected):
        result = event_signal("Widget", operation)

        assert isinstance(result, Success)
        assert result.value.name == expected
        assert str(result.value) == expected

    def test_signal_keeps_parts(self):
        signal = EventSignal(entity_name="TodoItem", operation=EntityOperation.CREATED)

        assert signal.entity_name == "TodoItem"
        assert signal.operation is EntityOperation.CREATED
        assert signal.name == "TodoItemCreated"

    @pytest.mark.parametrize(
        "entity_name",
        ["Wídget", "Widget\n", "", "小部件", " Widget", "Widget\t"],
    )
    def test_unencodable_name_is_internal_error(self, entity_name):
        result = event_signal(entity_name, EntityOperation.CREATED)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        assert result.error.details == {
            "entity_name": entity_name,
            "operation": "Created",
        }
