"""End-to-end dispatch over SQLite with the default ownership guard.

Item 7 is owned by user 7. Each step runs in its own session, as separate
requests would.

Deletion semantics: ownership is read from the item's own row, so once an
item is gone nobody owns it. A repeated delete is therefore Unauthorized,
while an item removed after the guard passed but before the delete ran
is NotFound.
"""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy import delete, insert

from entitygate.application.dispatch import DispatchPipeline, EntityBinding
from entitygate.application.guards import OwnershipGuard
from entitygate.core.errors import (
    ConflictError,
    NotFoundError,
    UnauthenticatedError,
    UnauthorizedError,
)
from entitygate.core.result import Failure, Success
from entitygate.domain.entities import TodoItemCreate, TodoItemWrite
from entitygate.domain.identity import CallerIdentity
from entitygate.infrastructure.persistence.models import TodoItem as TodoItemModel
from entitygate.infrastructure.persistence.stores import TodoItemStore
from entitygate.presentation.renderers import JsonListRenderer, JsonRenderer
from entitygate.presentation.schemas import TodoItemResponse

OWNER = CallerIdentity(user_id=7)
STRANGER = CallerIdentity(user_id=8)


class DeletedAfterCheckGuard(OwnershipGuard):
    """Passes the ownership check, then removes the row before the delete
    runs, the way a concurrent request could."""

    async def can_delete(self, session, entity_id, identity):
        result = await super().can_delete(session, entity_id, identity)
        await session.execute(
            delete(TodoItemModel.__table__).where(
                TodoItemModel.__table__.c.id == entity_id
            )
        )
        return result


@pytest_asyncio.fixture
async def seeded(database):
    async with database.get_session() as session:
        await session.execute(
            insert(TodoItemModel.__table__).values(
                id=7, owner_id=7, description="Buy milk", done=False
            )
        )
    return database


@pytest.fixture
def store() -> TodoItemStore:
    return TodoItemStore()


def _pipeline(store, guard=None) -> DispatchPipeline:
    logger = MagicMock()
    logger.bind.return_value = logger
    binding = EntityBinding(
        store=store,
        guard=guard or OwnershipGuard(store),
        ownership=store,
    )
    return DispatchPipeline(binding=binding, logger=logger)


renderer = JsonRenderer(TodoItemResponse)


@pytest.mark.integration
class TestTodoItemDispatchScenario:
    async def test_owner_reads_item(self, seeded, store):
        async with seeded.get_session() as session:
            result = await _pipeline(store).read(session, 7, OWNER, renderer)

        assert isinstance(result, Success)
        assert result.value.body["id"] == 7
        assert result.value.signal is None

    async def test_other_user_is_unauthorized(self, seeded, store):
        async with seeded.get_session() as session:
            result = await _pipeline(store).read(session, 7, STRANGER, renderer)

        assert result == Failure(error=UnauthorizedError())

    async def test_anonymous_is_unauthenticated(self, seeded, store):
        async with seeded.get_session() as session:
            result = await _pipeline(store).read(session, 7, None, renderer)

        assert result == Failure(error=UnauthenticatedError())

    async def test_never_created_id_is_unauthorized_not_found(self, seeded, store):
        async with seeded.get_session() as session:
            result = await _pipeline(store).read(session, 999, STRANGER, renderer)

        assert result == Failure(error=UnauthorizedError())

    async def test_duplicate_create_is_conflict(self, seeded, store):
        async with seeded.get_session() as session:
            result = await _pipeline(store).create(
                session,
                TodoItemCreate(description="Buy milk", owner_id=7),
                OWNER,
                renderer,
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)

    async def test_owner_updates_item(self, seeded, store):
        async with seeded.get_session() as session:
            result = await _pipeline(store).write(
                session,
                7,
                TodoItemWrite(description="Buy oat milk", done=True),
                OWNER,
                renderer,
            )

        assert isinstance(result, Success)
        assert result.value.body["done"] is True
        assert result.value.signal.name == "TodoItemUpdated"

    async def test_delete_then_delete_again(self, seeded, store):
        pipeline = _pipeline(store)

        async with seeded.get_session() as session:
            first = await pipeline.delete(session, 7, OWNER, renderer)
        async with seeded.get_session() as session:
            second = await pipeline.delete(session, 7, OWNER, renderer)

        assert isinstance(first, Success)
        assert first.value.signal.name == "TodoItemDeleted"
        assert first.value.body["id"] == 7
        assert second == Failure(error=UnauthorizedError())

    async def test_deleted_between_guard_and_delete_is_not_found(
        self, seeded, store
    ):
        pipeline = _pipeline(store, guard=DeletedAfterCheckGuard(store))

        async with seeded.get_session() as session:
            result = await pipeline.delete(session, 7, OWNER, renderer)

        assert result == Failure(error=NotFoundError.for_entity("TodoItem", 7))

    async def test_list_owned_returns_only_callers_items(self, seeded, store):
        async with seeded.get_session() as session:
            await store.create(
                session, TodoItemCreate(description="Walk dog", owner_id=8)
            )

        async with seeded.get_session() as session:
            result = await _pipeline(store).list_owned(
                session, OWNER, JsonListRenderer(TodoItemResponse)
            )

        assert isinstance(result, Success)
        assert [entry["id"] for entry in result.value.body] == [7]
