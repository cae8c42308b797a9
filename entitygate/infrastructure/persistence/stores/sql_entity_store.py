"""Generic SQLAlchemy entity store.

Implements EntityStore and OwnershipProvider for any table with an
integer ``id`` primary key and an owner column. Statements are issued
against the table (not the ORM identity map), and mutations use
``RETURNING`` so the stored row comes back in the same round trip.

Every call is attempted exactly once. A SQLAlchemyError is logged with
its raw details, the session is rolled back and the error is returned
classified by map_storage_error. Callers only ever see a ModelError.

Subclasses provide:
    - model: Declarative model class
    - entity_name: Name used for signals and errors
    - _to_entity(row): Row -> domain entity
    - _create_values(payload) / _write_values(payload): payload -> columns

Usage:
    class TodoItemStore(SqlEntityStore[TodoItem, TodoItemWrite, TodoItemCreate]):
        model = TodoItemModel
        entity_name = "TodoItem"
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Any, ClassVar

from sqlalchemy import Row, Table, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import ModelError, NotFoundError
from entitygate.core.result import Failure, Result, Success
from entitygate.domain.protocols import LoggerProtocol
from entitygate.infrastructure.persistence.base import BaseModel
from entitygate.infrastructure.persistence.storage_errors import map_storage_error


class SqlEntityStore[E, W, C]:
    """Table-backed store for one entity type."""

    model: ClassVar[type[BaseModel]]
    entity_name: ClassVar[str]
    owner_column: ClassVar[str] = "owner_id"

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        """Initialize store.

        Args:
            logger: Receives raw storage exceptions before classification.
        """
        self._logger = logger

    @property
    def table(self) -> Table:
        return self.model.__table__  # type: ignore[return-value]

    def _to_entity(self, row: Row[Any]) -> E:
        raise NotImplementedError

    def _create_values(self, payload: C) -> dict[str, Any]:
        raise NotImplementedError

    def _write_values(self, payload: W) -> dict[str, Any]:
        raise NotImplementedError

    async def read(
        self, session: AsyncSession, entity_id: int
    ) -> Result[E | None, ModelError]:
        """Fetch one row by id; Success(None) when nothing matched."""
        stmt = select(*self.table.c).where(self.table.c.id == entity_id)

        async def run() -> E | None:
            row = (await session.execute(stmt)).first()
            return self._to_entity(row) if row is not None else None

        return await self._attempt(session, "read", run)

    async def write(
        self, session: AsyncSession, entity_id: int, payload: W
    ) -> Result[E | None, ModelError]:
        """UPDATE ... RETURNING; Success(None) when the id no longer exists."""
        stmt = (
            update(self.table)
            .where(self.table.c.id == entity_id)
            .values(**self._write_values(payload))
            .returning(*self.table.c)
        )

        async def run() -> E | None:
            row = (await session.execute(stmt)).first()
            return self._to_entity(row) if row is not None else None

        return await self._attempt(session, "write", run)

    async def create(self, session: AsyncSession, payload: C) -> Result[E, ModelError]:
        """INSERT ... RETURNING the stored row."""
        stmt = (
            insert(self.table)
            .values(**self._create_values(payload))
            .returning(*self.table.c)
        )

        async def run() -> E:
            row = (await session.execute(stmt)).one()
            return self._to_entity(row)

        return await self._attempt(session, "create", run)

    async def delete(
        self, session: AsyncSession, entity_id: int
    ) -> Result[E, ModelError]:
        """DELETE ... RETURNING; NotFoundError when nothing matched."""
        stmt = (
            delete(self.table)
            .where(self.table.c.id == entity_id)
            .returning(*self.table.c)
        )

        async def run() -> E | None:
            row = (await session.execute(stmt)).first()
            return self._to_entity(row) if row is not None else None

        result = await self._attempt(session, "delete", run)
        if isinstance(result, Success) and result.value is None:
            return Failure(
                error=NotFoundError.for_entity(self.entity_name, entity_id)
            )
        return result  # type: ignore[return-value]

    async def owner_of(
        self, session: AsyncSession, entity_id: int
    ) -> Result[int | None, ModelError]:
        """Owner recorded on the entity's row, None when there is no row."""
        owner = self.table.c[self.owner_column]
        stmt = select(owner).where(self.table.c.id == entity_id)

        async def run() -> int | None:
            return (await session.execute(stmt)).scalar_one_or_none()

        return await self._attempt(session, "owner_of", run)

    async def all_for_owner(
        self, session: AsyncSession, owner_id: int
    ) -> Result[list[E], ModelError]:
        """Every row owned by ``owner_id``, ordered by id."""
        owner = self.table.c[self.owner_column]
        stmt = (
            select(*self.table.c)
            .where(owner == owner_id)
            .order_by(self.table.c.id)
        )

        async def run() -> list[E]:
            rows = (await session.execute(stmt)).all()
            return [self._to_entity(row) for row in rows]

        return await self._attempt(session, "all_for_owner", run)

    async def _attempt[T](
        self,
        session: AsyncSession,
        operation: str,
        run: Callable[[], Awaitable[T]],
    ) -> Result[T, ModelError]:
        try:
            return Success(value=await run())
        except SQLAlchemyError as exc:
            await session.rollback()
            error = map_storage_error(exc, entity_name=self.entity_name)
            if self._logger is not None:
                self._logger.error(
                    "Storage operation failed",
                    error=exc,
                    entity=self.entity_name,
                    operation=operation,
                    error_code=error.code.value,
                )
            return Failure(error=error)
