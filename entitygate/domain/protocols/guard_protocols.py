"""Authorization guard protocols (ports).

One guard per operation kind. A guard is evaluated before the paired
access operation and against the exact same (id, identity, payload) the
operation will receive. Guards may query the store but must not modify
it.

Implementations:
    - OwnershipGuard: default owner-only policy
    - PublicGuard: permits every operation

Returns:
    Success(None) to allow, Failure(AuthError) to deny.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import AuthError
from entitygate.core.result import Result
from entitygate.domain.identity import CallerIdentity


class ReadGuard[K](Protocol):
    """Guard evaluated before a read."""

    async def can_read(
        self, session: AsyncSession, entity_id: K, identity: CallerIdentity | None
    ) -> Result[None, AuthError]: ...


class WriteGuard[K, W](Protocol):
    """Guard evaluated before a write.

    Receives the payload that will be written so it can reject specific
    field changes.
    """

    async def can_write(
        self,
        session: AsyncSession,
        entity_id: K,
        identity: CallerIdentity | None,
        payload: W,
    ) -> Result[None, AuthError]: ...


class CreateGuard[C](Protocol):
    """Guard evaluated before a create."""

    async def can_create(
        self, session: AsyncSession, identity: CallerIdentity | None, payload: C
    ) -> Result[None, AuthError]: ...


class DeleteGuard[K](Protocol):
    """Guard evaluated before a delete."""

    async def can_delete(
        self, session: AsyncSession, entity_id: K, identity: CallerIdentity | None
    ) -> Result[None, AuthError]: ...


class EntityGuard[K, W, C](
    ReadGuard[K], WriteGuard[K, W], CreateGuard[C], DeleteGuard[K], Protocol
):
    """All four guards for one entity type."""
