"""Generic CRUD router over a dispatch pipeline.

Builds the HTTP surface for one entity type. Each endpoint only decodes
the request (path id, caller identity, JSON body) and hands it to the
pipeline; the pipeline result becomes either the rendered body or an
RFC 9457 problem response.

Endpoints:
    GET    ""               List the caller's entities (when configured)
    GET    "/new"           Render a draft from query data (when configured)
    GET    "/{entity_id}"   Read
    PUT    "/{entity_id}"   Write, signals <Name>Updated
    POST   ""               Create (201), signals <Name>Created
    DELETE "/{entity_id}"   Delete, signals <Name>Deleted

The event signal of a mutation is exposed in the configured header
(``settings.event_signal_header``, HX-Trigger by default).

Usage:
    router = build_entity_router(
        get_todo_item_pipeline(),
        JsonRenderer(TodoItemResponse),
        create_schema=TodoItemCreateRequest,
        create_payload=TodoItemCreateRequest.to_payload,
        write_schema=TodoItemUpdateRequest,
        write_payload=TodoItemUpdateRequest.to_payload,
    )
    app.include_router(router, prefix="/api/v1/todo-items")
"""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.application.dispatch import Dispatched, DispatchPipeline, Renderer
from entitygate.core.config import settings
from entitygate.core.container import get_db_session
from entitygate.core.errors import DispatchError
from entitygate.core.result import Failure, Result, Success
from entitygate.domain.identity import CallerIdentity
from entitygate.presentation.errors import ErrorResponseBuilder
from entitygate.presentation.middleware import get_caller_identity, get_trace_id

Session = Annotated[AsyncSession, Depends(get_db_session)]
Identity = Annotated[CallerIdentity | None, Depends(get_caller_identity)]
# Signed 64-bit key range of the id columns; larger ids cannot be bound.
EntityId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def _respond(
    request: Request,
    result: Result[Dispatched[Any], DispatchError],
    signal_header: str,
    success_status: int = status.HTTP_200_OK,
) -> Response:
    match result:
        case Success(value=Dispatched(body=body, signal=signal)):
            headers = {signal_header: signal.name} if signal is not None else None
            return JSONResponse(
                content=body, status_code=success_status, headers=headers
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_dispatch_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


def build_entity_router[E, W, C](
    pipeline: DispatchPipeline[E, int, W, C],
    renderer: Renderer[E, Any],
    *,
    create_schema: type[BaseModel],
    create_payload: Callable[[Any, CallerIdentity | None], C],
    write_schema: type[BaseModel],
    write_payload: Callable[[Any, CallerIdentity | None], W],
    list_renderer: Renderer[list[E], Any] | None = None,
    init_schema: type[BaseModel] | None = None,
    init_renderer: Renderer[Any, Any] | None = None,
    signal_header: str | None = None,
) -> APIRouter:
    """Build the CRUD router for one entity type.

    Args:
        pipeline: Dispatch pipeline for the entity type.
        renderer: Renders a single entity.
        create_schema: Request body model for POST.
        create_payload: (body, identity) -> domain create payload.
        write_schema: Request body model for PUT.
        write_payload: (body, identity) -> domain write payload.
        list_renderer: Renders the caller's entities; enables GET "".
            Ignored when the pipeline has no ownership provider.
        init_schema: Query model for GET "/new".
        init_renderer: Renders GET "/new"; requires init_schema.
        signal_header: Overrides ``settings.event_signal_header``.

    Returns:
        APIRouter to include under the entity's prefix.
    """
    router = APIRouter(tags=[pipeline.entity_name])
    header = signal_header or settings.event_signal_header

    if list_renderer is not None and pipeline.supports_listing:

        @router.get("", summary=f"List own {pipeline.entity_name} entities")
        async def list_entities(
            request: Request, session: Session, identity: Identity
        ) -> Response:
            result = await pipeline.list_owned(session, identity, list_renderer)
            return _respond(request, result, header)

    if init_schema is not None and init_renderer is not None:

        @router.get("/new", summary=f"Draft a {pipeline.entity_name}")
        async def init_entity(
            request: Request,
            session: Session,
            identity: Identity,
            params: Annotated[init_schema, Query()],  # type: ignore[valid-type]
        ) -> Response:
            result = await pipeline.render_init(
                session, params, identity, init_renderer
            )
            return _respond(request, result, header)

    @router.get("/{entity_id}", summary=f"Read a {pipeline.entity_name}")
    async def read_entity(
        request: Request, entity_id: EntityId, session: Session, identity: Identity
    ) -> Response:
        result = await pipeline.read(session, entity_id, identity, renderer)
        return _respond(request, result, header)

    @router.put("/{entity_id}", summary=f"Update a {pipeline.entity_name}")
    async def write_entity(
        request: Request,
        entity_id: EntityId,
        body: write_schema,  # type: ignore[valid-type]
        session: Session,
        identity: Identity,
    ) -> Response:
        payload = write_payload(body, identity)
        result = await pipeline.write(session, entity_id, payload, identity, renderer)
        return _respond(request, result, header)

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {pipeline.entity_name}",
    )
    async def create_entity(
        request: Request,
        body: create_schema,  # type: ignore[valid-type]
        session: Session,
        identity: Identity,
    ) -> Response:
        payload = create_payload(body, identity)
        result = await pipeline.create(session, payload, identity, renderer)
        return _respond(request, result, header, status.HTTP_201_CREATED)

    @router.delete("/{entity_id}", summary=f"Delete a {pipeline.entity_name}")
    async def delete_entity(
        request: Request, entity_id: EntityId, session: Session, identity: Identity
    ) -> Response:
        result = await pipeline.delete(session, entity_id, identity, renderer)
        return _respond(request, result, header)

    return router
