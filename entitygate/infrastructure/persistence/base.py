"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Base class for ALL models (provides integer id, created_at)
- BaseMutableModel: Base for models that can be updated (adds updated_at)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities do NOT inherit from this
- Stores map rows to domain entities

Usage:
    class TodoItemModel(BaseMutableModel):
        __tablename__ = "todo_items"
        description: Mapped[str]
        # Has: id, created_at, updated_at
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# SQLite only autoincrements a column declared exactly INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer(), "sqlite")


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
        - id: Integer primary key assigned by the database
        - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        IdType,
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Base class for models that can be modified after creation."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
