"""Default ownership-based authorization.

The policy for read, write and delete:

    1. No identity                 -> UnauthenticatedError
    2. No owner recorded for id    -> UnauthorizedError (never NotFound)
    3. Owner differs from caller   -> UnauthorizedError
    4. Otherwise                   -> allowed

Step 2 deliberately answers "not yours" rather than "not found" so a
caller who does not own an id learns nothing about whether it exists.
A storage fault during the owner lookup is wrapped in GuardFailedError.

The owner lookup and the guarded operation are separate statements in
the request's transaction; no row lock is taken between them. An entity
deleted in that window makes the operation itself report NotFound.

Architecture:
    - Application layer (queries the store through OwnershipProvider only)
    - check_ownership is a plain function so any custom guard can reuse it
    - Guards never mutate

Usage:
    guard = OwnershipGuard(store)
    result = await guard.can_read(session, 7, CallerIdentity(user_id=7))
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import (
    AuthError,
    GuardFailedError,
    UnauthenticatedError,
    UnauthorizedError,
)
from entitygate.core.result import Failure, Result, Success
from entitygate.domain.identity import CallerIdentity
from entitygate.domain.protocols import OwnershipProvider


async def check_ownership[K](
    session: AsyncSession,
    ownership: OwnershipProvider[Any, K],
    entity_id: K,
    identity: CallerIdentity | None,
) -> Result[None, AuthError]:
    """Allow only the recorded owner of ``entity_id``.

    Args:
        session: Request-scoped database session.
        ownership: Owner lookup for the entity type.
        entity_id: Entity the caller wants to access.
        identity: Caller, or None when anonymous.

    Returns:
        Success(None) when the caller owns the entity, otherwise
        Failure(UnauthenticatedError | UnauthorizedError | GuardFailedError).
    """
    if identity is None:
        return Failure(error=UnauthenticatedError())

    match await ownership.owner_of(session, entity_id):
        case Failure(error=cause):
            return Failure(error=GuardFailedError(cause=cause))
        case Success(value=None):
            return Failure(error=UnauthorizedError())
        case Success(value=owner_id) if owner_id != identity.user_id:
            return Failure(error=UnauthorizedError())
        case _:
            return Success(value=None)


class OwnershipGuard[K]:
    """Owner-only guard for every operation kind.

    Read, write and delete go through check_ownership. Create only
    requires an identity, and rejects a payload that names a different
    owner than the caller.
    """

    def __init__(self, ownership: OwnershipProvider[Any, K]) -> None:
        """Initialize guard.

        Args:
            ownership: Owner lookup for the guarded entity type.
        """
        self._ownership = ownership

    async def can_read(
        self, session: AsyncSession, entity_id: K, identity: CallerIdentity | None
    ) -> Result[None, AuthError]:
        return await check_ownership(session, self._ownership, entity_id, identity)

    async def can_write(
        self,
        session: AsyncSession,
        entity_id: K,
        identity: CallerIdentity | None,
        payload: object,
    ) -> Result[None, AuthError]:
        return await check_ownership(session, self._ownership, entity_id, identity)

    async def can_create(
        self, session: AsyncSession, identity: CallerIdentity | None, payload: object
    ) -> Result[None, AuthError]:
        if identity is None:
            return Failure(error=UnauthenticatedError())

        owner_id = getattr(payload, "owner_id", None)
        if owner_id is not None and owner_id != identity.user_id:
            return Failure(error=UnauthorizedError())

        return Success(value=None)

    async def can_delete(
        self, session: AsyncSession, entity_id: K, identity: CallerIdentity | None
    ) -> Result[None, AuthError]:
        return await check_ownership(session, self._ownership, entity_id, identity)


class PublicGuard:
    """Guard that permits every operation, for entities with no access control."""

    async def can_read(
        self, session: AsyncSession, entity_id: object, identity: CallerIdentity | None
    ) -> Result[None, AuthError]:
        return Success(value=None)

    async def can_write(
        self,
        session: AsyncSession,
        entity_id: object,
        identity: CallerIdentity | None,
        payload: object,
    ) -> Result[None, AuthError]:
        return Success(value=None)

    async def can_create(
        self, session: AsyncSession, identity: CallerIdentity | None, payload: object
    ) -> Result[None, AuthError]:
        return Success(value=None)

    async def can_delete(
        self, session: AsyncSession, entity_id: object, identity: CallerIdentity | None
    ) -> Result[None, AuthError]:
        return Success(value=None)
