"""TodoItem request/response schemas.

Pydantic schemas for the todo item endpoints. The owner is never part of
a request body; it comes from the caller's token.
"""

from pydantic import BaseModel, ConfigDict, Field

from entitygate.domain.entities import TodoItemCreate, TodoItemWrite
from entitygate.domain.identity import CallerIdentity


class TodoItemResponse(BaseModel):
    """Single todo item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Item identifier", examples=[7])
    owner_id: int = Field(..., description="Owning user id", examples=[7])
    description: str = Field(..., description="Item text", examples=["Buy milk"])
    done: bool = Field(..., description="Completion flag", examples=[False])


class TodoItemCreateRequest(BaseModel):
    """Request body for creating a todo item."""

    model_config = ConfigDict(extra="forbid")

    description: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Item text, unique per owner",
        examples=["Buy milk"],
    )

    def to_payload(self, identity: CallerIdentity | None) -> TodoItemCreate:
        """Domain create payload owned by the caller."""
        return TodoItemCreate(
            description=self.description,
            owner_id=identity.user_id if identity is not None else None,
        )


class TodoItemUpdateRequest(BaseModel):
    """Request body for updating a todo item."""

    model_config = ConfigDict(extra="forbid")

    description: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Item text, unique per owner",
        examples=["Buy oat milk"],
    )
    done: bool = Field(default=False, description="Completion flag")

    def to_payload(self, identity: CallerIdentity | None) -> TodoItemWrite:
        """Domain write payload."""
        return TodoItemWrite(description=self.description, done=self.done)


class TodoItemDraftQuery(BaseModel):
    """Query data used to prefill a new todo item form."""

    description: str = Field(default="", max_length=500, description="Prefilled text")
    done: bool = Field(default=False, description="Prefilled completion flag")
