from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey, Index, UniqueConstraint, Enum as SQLEnum, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from datetime import datetime
from typing import Optional
import enum

from ..database import Base


class ItemKind(str, enum.Enum):
    """Kinds of items a workspace can hold."""
    JOB = "job"
    FOLDER = "folder"


class ItemRecord(Base):
    """A job or folder. Insertion order (``id``) is the declaration order."""
    __tablename__ = "items"
    __table_args__ = (
        UniqueConstraint("parent_id", "name", name="uq_items_parent_name"),
        # NULL parent ids never collide in the constraint above
        Index(
            "uq_items_root_name",
            "name",
            unique=True,
            sqlite_where=text("parent_id IS NULL"),
            postgresql_where=text("parent_id IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    parent_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("items.id"), nullable=True, index=True
    )
    kind: Mapped[ItemKind] = mapped_column(SQLEnum(ItemKind), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    display_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    disabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<ItemRecord(id={self.id}, kind={self.kind.value if self.kind else None}, name={self.name})>"
