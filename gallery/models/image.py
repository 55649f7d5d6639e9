"""Image model for externally hosted media."""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gallery.db.base import Base

if TYPE_CHECKING:
    from gallery.models.comment import Comment


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Image(Base):
    """Image database model. Rows are never updated or deleted."""

    __tablename__ = "images"
    # AUTOINCREMENT keeps SQLite from reusing ids
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )

    comments: Mapped[list["Comment"]] = relationship(
        back_populates="image",
        order_by="[desc(Comment.created_at), desc(Comment.id)]",
    )
