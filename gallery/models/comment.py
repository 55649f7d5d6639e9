"""Comment model, owned by exactly one image."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gallery.db.base import Base
from gallery.models.image import utcnow

if TYPE_CHECKING:
    from gallery.models.image import Image


class Comment(Base):
    """Comment database model. Rows are never updated or deleted."""

    __tablename__ = "comments"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
    image_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("images.id"), index=True
    )

    image: Mapped["Image"] = relationship(back_populates="comments")
