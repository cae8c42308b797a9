"""TodoItem database model.

Architecture:
    - Each item is owned by one user (owner_id); ownership checks read
      this column directly
    - Descriptions are unique per owner
"""

from sqlalchemy import BigInteger, Boolean, Index, String, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column

from entitygate.infrastructure.persistence.base import BaseMutableModel


class TodoItem(BaseMutableModel):
    """Todo item storage.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        owner_id: Owning user id
        description: Item text, unique per owner
        done: Completion flag
    """

    __tablename__ = "todo_items"

    owner_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Owning user id",
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    done: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    __table_args__ = (
        UniqueConstraint(
            "owner_id", "description", name="uq_todo_items_owner_description"
        ),
        Index("idx_todo_items_owner_id", "owner_id"),
    )
