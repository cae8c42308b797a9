"""Ownership provider protocol (port).

Per-entity lookup of the owning user for an id, and enumeration of every
entity a user owns. Queried fresh on every authorization check; never
cached.

"No owner recorded" (``Success(None)``) is a valid answer and is distinct
from a storage failure. It does not say whether the entity exists.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import ModelError
from entitygate.core.result import Result


class OwnershipProvider[E, K](Protocol):
    """Protocol for entity ownership lookups."""

    async def owner_of(
        self, session: AsyncSession, entity_id: K
    ) -> Result[int | None, ModelError]:
        """Look up the owner of an entity.

        Args:
            session: Request-scoped database session.
            entity_id: Entity identifier.

        Returns:
            Success(user_id) if an owner is recorded, Success(None) if not,
            Failure(ModelError) on storage fault.
        """
        ...

    async def all_for_owner(
        self, session: AsyncSession, owner_id: int
    ) -> Result[list[E], ModelError]:
        """List every entity owned by a user.

        Args:
            session: Request-scoped database session.
            owner_id: Owning user identifier.

        Returns:
            Success(list) (possibly empty) or Failure(ModelError).
        """
        ...
