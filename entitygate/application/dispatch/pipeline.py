"""Authorize-then-act dispatch pipeline.

One pipeline instance serves one entity type. Each operation runs its
steps strictly in order and each step exactly once:

    guard -> access operation -> renderer -> event signal

A failing guard means the access operation never runs. Storage faults
arrive already classified (ModelError) from the store and are passed
through unchanged; renderer failures propagate unchanged as well.

Success values are ``Dispatched(body, signal)``: the renderer's output
plus the event signal for write/create/delete (None for read and list).
The signal is returned, not written onto a response, so the transport
decides how to expose it.

Architecture:
    - Application layer (depends on domain protocols only)
    - Written once against EntityStore / EntityGuard / OwnershipProvider
    - Session is request-scoped and supplied by the caller

Usage:
    pipeline = DispatchPipeline(binding=binding, logger=logger)

    result = await pipeline.write(session, 7, payload, identity, renderer)
    match result:
        case Success(value=Dispatched(body=body, signal=signal)):
            ...
        case Failure(error=error):
            ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import (
    ConflictError,
    DispatchError,
    InternalError,
    ModelError,
    NotFoundError,
    UnauthenticatedError,
)
from entitygate.core.result import Failure, Result, Success
from entitygate.domain.events import EntityOperation, EventSignal, event_signal
from entitygate.domain.identity import CallerIdentity
from entitygate.domain.protocols import (
    EntityGuard,
    EntityStore,
    LoggerProtocol,
    OwnershipProvider,
    read_required,
    write_required,
)

# Turns an entity (or a list of them, or init data) into a response body
type Renderer[T, R] = Callable[
    [AsyncSession, T, CallerIdentity | None], Awaitable[Result[R, DispatchError]]
]


@dataclass(frozen=True, slots=True, kw_only=True)
class Dispatched[R]:
    """Successful pipeline outcome.

    Attributes:
        body: Renderer output.
        signal: Event signal for a completed mutation, None for reads.
    """

    body: R
    signal: EventSignal | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityBinding[E, K, W, C]:
    """Everything the pipeline needs to dispatch one entity type.

    Attributes:
        store: Access operations. Its entity_name also names event signals
            and log entries.
        guard: Per-operation authorization.
        ownership: Owner lookups, required only for list_owned.
    """

    store: EntityStore[E, K, W, C]
    guard: EntityGuard[K, W, C]
    ownership: OwnershipProvider[E, K] | None = None


def _user_id(identity: CallerIdentity | None) -> int | None:
    return identity.user_id if identity is not None else None


class DispatchPipeline[E, K, W, C]:
    """Guard, act, render and signal for one entity type.

    Dependencies (injected via constructor):
        - EntityBinding: store, guard and optional ownership provider
        - LoggerProtocol: structured logging
    """

    def __init__(
        self, binding: EntityBinding[E, K, W, C], logger: LoggerProtocol
    ) -> None:
        """Initialize pipeline.

        Args:
            binding: Entity type wiring.
            logger: Structured logger.
        """
        self._binding = binding
        self._logger = logger

    @property
    def entity_name(self) -> str:
        return self._binding.store.entity_name

    @property
    def supports_listing(self) -> bool:
        """True when the binding has an ownership provider."""
        return self._binding.ownership is not None

    async def read[R](
        self,
        session: AsyncSession,
        entity_id: K,
        identity: CallerIdentity | None,
        renderer: Renderer[E, R],
    ) -> Result[Dispatched[R], DispatchError]:
        """Read one entity the caller is allowed to see.

        Returns:
            Success(Dispatched) with no signal, or Failure with the guard
            error, NotFoundError, a storage error or a renderer error.
        """
        log = self._bind_log("read", entity_id, identity)

        allowed = await self._binding.guard.can_read(session, entity_id, identity)
        if isinstance(allowed, Failure):
            log.info("Guard denied", error_code=allowed.error.code.value)
            return allowed

        result = await read_required(self._binding.store, session, entity_id)
        if isinstance(result, Failure):
            self._log_model_failure(log, result.error)
            return result
        entity = result.value

        return await self._render(log, session, entity, identity, renderer, None)

    async def write[R](
        self,
        session: AsyncSession,
        entity_id: K,
        payload: W,
        identity: CallerIdentity | None,
        renderer: Renderer[E, R],
    ) -> Result[Dispatched[R], DispatchError]:
        """Update one entity and signal ``<EntityName>Updated``.

        The guard and the store receive the same id and payload.
        """
        log = self._bind_log("write", entity_id, identity)

        allowed = await self._binding.guard.can_write(
            session, entity_id, identity, payload
        )
        if isinstance(allowed, Failure):
            log.info("Guard denied", error_code=allowed.error.code.value)
            return allowed

        result = await write_required(self._binding.store, session, entity_id, payload)
        if isinstance(result, Failure):
            self._log_model_failure(log, result.error)
            return result
        entity = result.value

        return await self._render(
            log, session, entity, identity, renderer, EntityOperation.UPDATED
        )

    async def create[R](
        self,
        session: AsyncSession,
        payload: C,
        identity: CallerIdentity | None,
        renderer: Renderer[E, R],
    ) -> Result[Dispatched[R], DispatchError]:
        """Create an entity and signal ``<EntityName>Created``."""
        log = self._bind_log("create", None, identity)

        allowed = await self._binding.guard.can_create(session, identity, payload)
        if isinstance(allowed, Failure):
            log.info("Guard denied", error_code=allowed.error.code.value)
            return allowed

        result = await self._binding.store.create(session, payload)
        if isinstance(result, Failure):
            self._log_model_failure(log, result.error)
            return result
        entity = result.value

        log = log.bind(entity_id=getattr(entity, "id", None))
        return await self._render(
            log, session, entity, identity, renderer, EntityOperation.CREATED
        )

    async def delete[R](
        self,
        session: AsyncSession,
        entity_id: K,
        identity: CallerIdentity | None,
        renderer: Renderer[E, R],
    ) -> Result[Dispatched[R], DispatchError]:
        """Delete an entity and signal ``<EntityName>Deleted``.

        The renderer receives the entity as it was before deletion.
        """
        log = self._bind_log("delete", entity_id, identity)

        allowed = await self._binding.guard.can_delete(session, entity_id, identity)
        if isinstance(allowed, Failure):
            log.info("Guard denied", error_code=allowed.error.code.value)
            return allowed

        result = await self._binding.store.delete(session, entity_id)
        if isinstance(result, Failure):
            self._log_model_failure(log, result.error)
            return result
        entity = result.value

        return await self._render(
            log, session, entity, identity, renderer, EntityOperation.DELETED
        )

    async def list_owned[R](
        self,
        session: AsyncSession,
        identity: CallerIdentity | None,
        renderer: Renderer[list[E], R],
    ) -> Result[Dispatched[R], DispatchError]:
        """Render every entity the caller owns.

        Returns:
            Failure(UnauthenticatedError) for an anonymous caller,
            Failure(InternalError) when the binding has no ownership
            provider, otherwise the rendered list with no signal.
        """
        log = self._bind_log("list", None, identity)

        ownership = self._binding.ownership
        if ownership is None:
            error = InternalError(
                message="Entity does not support listing by owner",
                details={"entity": self.entity_name},
            )
            log.error("Listing not configured", error_code=error.code.value)
            return Failure(error=error)

        if identity is None:
            denied = UnauthenticatedError()
            log.info("Guard denied", error_code=denied.code.value)
            return Failure(error=denied)

        result = await ownership.all_for_owner(session, identity.user_id)
        if isinstance(result, Failure):
            self._log_model_failure(log, result.error)
            return result
        entities = result.value

        return await self._render(log, session, entities, identity, renderer, None)

    async def render_init[T, R](
        self,
        session: AsyncSession,
        payload: T,
        identity: CallerIdentity | None,
        renderer: Renderer[T, R],
    ) -> Result[Dispatched[R], DispatchError]:
        """Render a view straight from decoded request data.

        No guard and no store access; used for forms that are filled in
        before an entity exists.
        """
        rendered = await renderer(session, payload, identity)
        if isinstance(rendered, Failure):
            return rendered
        return Success(value=Dispatched(body=rendered.value))

    def _bind_log(
        self, operation: str, entity_id: Any, identity: CallerIdentity | None
    ) -> LoggerProtocol:
        return self._logger.bind(
            entity=self.entity_name,
            operation=operation,
            entity_id=entity_id,
            user_id=_user_id(identity),
        )

    def _log_model_failure(self, log: LoggerProtocol, error: ModelError) -> None:
        match error:
            case NotFoundError() | ConflictError():
                log.warning("Operation failed", error_code=error.code.value)
            case _:
                log.error("Operation failed", error_code=error.code.value)

    async def _render[T, R](
        self,
        log: LoggerProtocol,
        session: AsyncSession,
        value: T,
        identity: CallerIdentity | None,
        renderer: Renderer[T, R],
        operation: EntityOperation | None,
    ) -> Result[Dispatched[R], DispatchError]:
        rendered = await renderer(session, value, identity)
        if isinstance(rendered, Failure):
            log.warning("Render failed", error_code=rendered.error.code.value)
            return rendered

        if operation is None:
            return Success(value=Dispatched(body=rendered.value))

        match event_signal(self.entity_name, operation):
            case Failure(error=error):
                log.error("Event signal not encodable", error_code=error.code.value)
                return Failure(error=error)
            case Success(value=signal):
                log.info("Entity mutated", signal=signal.name)
                return Success(value=Dispatched(body=rendered.value, signal=signal))
