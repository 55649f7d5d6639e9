"""Image schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr

from gallery.schemas.comment import CommentDTO


class ImageCreate(BaseModel):
    """Image creation schema.

    ``url`` is the ``secure_url`` returned by the media host after upload.
    It is stored as given, without URI validation.
    """

    url: StrictStr = Field(..., min_length=1)


class ImageDTO(BaseModel):
    """Image response schema with nested comments, newest first."""

    id: int
    url: str
    created_at: datetime = Field(..., alias="createdAt")
    comments: list[CommentDTO] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "from_attributes": True}
