"""JSON renderers backed by pydantic response schemas.

The entity is validated into the schema (``from_attributes``) and dumped
in JSON mode. A value the schema rejects is a programming error and is
returned as InternalError, never raised.

Usage:
    renderer = JsonRenderer(TodoItemResponse)
    result = await pipeline.read(session, 7, identity, renderer)
"""

from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.errors import DispatchError, InternalError
from entitygate.core.result import Failure, Result, Success
from entitygate.domain.identity import CallerIdentity


class JsonRenderer:
    """Render one entity through a response schema."""

    def __init__(self, schema: type[BaseModel]) -> None:
        self._schema = schema

    async def __call__(
        self, session: AsyncSession, entity: object, identity: CallerIdentity | None
    ) -> Result[dict[str, Any], DispatchError]:
        try:
            model = self._schema.model_validate(entity, from_attributes=True)
        except ValidationError as exc:
            return Failure(
                error=InternalError(
                    message="Failed to render response",
                    details={"schema": self._schema.__name__, "errors": exc.errors()},
                )
            )
        return Success(value=model.model_dump(mode="json"))


class JsonListRenderer:
    """Render a list of entities through a response schema."""

    def __init__(self, schema: type[BaseModel]) -> None:
        self._schema = schema
        self._adapter = TypeAdapter(list[schema])  # type: ignore[valid-type]

    async def __call__(
        self,
        session: AsyncSession,
        entities: list[Any],
        identity: CallerIdentity | None,
    ) -> Result[list[dict[str, Any]], DispatchError]:
        try:
            models = self._adapter.validate_python(entities, from_attributes=True)
        except ValidationError as exc:
            return Failure(
                error=InternalError(
                    message="Failed to render response",
                    details={"schema": self._schema.__name__, "errors": exc.errors()},
                )
            )
        return Success(value=self._adapter.dump_python(models, mode="json"))
