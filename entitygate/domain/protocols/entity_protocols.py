"""Entity access protocols (ports).

One protocol per capability: read, write, create, delete. Infrastructure
stores implement whichever capabilities their entity supports; the
dispatch pipeline is written once against these protocols.

Contract shared by every operation:
    - Request-scoped: takes the caller's exclusive ``AsyncSession``
    - Returns a Result; storage faults are already classified into a
      ModelError by the store (never a raw exception)
    - Never retries internally

Following hexagonal architecture:
- Domain defines the PORTS (these protocols)
- Infrastructure provides ADAPTERS (SqlEntityStore and subclasses)
- Stores do NOT inherit from these protocols (structural typing)

Usage:
    from entitygate.domain.protocols import EntityReader, read_required

    result = await read_required(store, session, entity_id)
"""

from typing import ClassVar, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import ModelError, NotFoundError
from entitygate.core.result import Failure, Result, Success


class Entity(Protocol):
    """Anything the pipeline can dispatch.

    Attributes:
        entity_name: Fixed textual name, used to derive event signals
            (``TodoItem`` -> ``TodoItemCreated``).
        id: Stable, comparable identifier.
    """

    entity_name: ClassVar[str]
    id: int


class EntityReader[E, K](Protocol):
    """Read capability."""

    entity_name: str

    async def read(
        self, session: AsyncSession, entity_id: K
    ) -> Result[E | None, ModelError]:
        """Fetch one entity.

        Args:
            session: Request-scoped database session.
            entity_id: Identifier to look up.

        Returns:
            Success(entity) if found, Success(None) if no row matched,
            Failure(ModelError) on storage fault.
        """
        ...


class EntityWriter[E, K, W](Protocol):
    """Write (update) capability.

    ``W`` is the write payload: a partial view of the entity's mutable
    fields.
    """

    entity_name: str

    async def write(
        self, session: AsyncSession, entity_id: K, payload: W
    ) -> Result[E | None, ModelError]:
        """Update one entity.

        Args:
            session: Request-scoped database session.
            entity_id: Identifier of the entity to update.
            payload: Fields to write.

        Returns:
            Success(entity) with the updated entity, Success(None) if the id
            no longer exists, Failure(ModelError) on storage fault.
        """
        ...


class EntityCreator[E, C](Protocol):
    """Create capability. ``C`` is the create payload."""

    entity_name: str

    async def create(
        self, session: AsyncSession, payload: C
    ) -> Result[E, ModelError]:
        """Insert a new entity and return it as stored."""
        ...


class EntityDeleter[E, K](Protocol):
    """Delete capability."""

    entity_name: str

    async def delete(
        self, session: AsyncSession, entity_id: K
    ) -> Result[E, ModelError]:
        """Delete one entity and return it.

        Returns:
            Success(entity) with the deleted entity, Failure(NotFoundError)
            when nothing matched, Failure(ModelError) on other faults.
        """
        ...


async def read_required[E, K](
    reader: EntityReader[E, K], session: AsyncSession, entity_id: K
) -> Result[E, ModelError]:
    """Read an entity, turning an absent row into NotFoundError."""
    result = await reader.read(session, entity_id)
    match result:
        case Success(value=None):
            return Failure(
                error=NotFoundError.for_entity(reader.entity_name, entity_id)
            )
        case Success(value=entity):
            return Success(value=entity)
        case Failure():
            return result


async def write_required[E, K, W](
    writer: EntityWriter[E, K, W], session: AsyncSession, entity_id: K, payload: W
) -> Result[E, ModelError]:
    """Write an entity, turning an absent row into NotFoundError."""
    result = await writer.write(session, entity_id, payload)
    match result:
        case Success(value=None):
            return Failure(
                error=NotFoundError.for_entity(writer.entity_name, entity_id)
            )
        case Success(value=entity):
            return Success(value=entity)
        case Failure():
            return result


class EntityStore[E, K, W, C](
    EntityReader[E, K],
    EntityWriter[E, K, W],
    EntityCreator[E, C],
    EntityDeleter[E, K],
    Protocol,
):
    """Every access capability for one entity type."""
