"""Comment API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from gallery.core.deps import DBSession
from gallery.schemas.comment import CommentCreate, CommentDTO
from gallery.services.comment_service import CommentService

router = APIRouter()

# Largest value a 32-bit INTEGER column holds
MAX_IMAGE_ID = 2**31 - 1

ImageId = Annotated[int, Path(gt=0, le=MAX_IMAGE_ID, description="Image ID")]


@router.get("/{image_id}", response_model=list[CommentDTO])
async def get_comments(image_id: ImageId, db: DBSession) -> list[CommentDTO]:
    """Get comments for an image, newest first."""
    comment_service = CommentService(db)
    return await comment_service.list_comments(image_id)


@router.post(
    "/{image_id}",
    response_model=CommentDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    image_id: ImageId,
    data: CommentCreate,
    db: DBSession,
) -> CommentDTO:
    """
    Add a comment to an image.

    - **image_id**: Image ID (positive integer)
    - **content**: Comment text (required)
    """
    comment_service = CommentService(db)
    return await comment_service.create_comment(image_id, data)
