"""Comment schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr


class CommentCreate(BaseModel):
    """Comment creation schema."""

    content: StrictStr = Field(..., min_length=1)


class CommentDTO(BaseModel):
    """Comment response schema."""

    id: int
    content: str
    created_at: datetime = Field(..., alias="createdAt")
    image_id: int = Field(..., alias="imageId")

    model_config = {"populate_by_name": True, "from_attributes": True}
