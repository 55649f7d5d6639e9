"""Image API endpoints."""

from fastapi import APIRouter, status

from gallery.core.deps import DBSession
from gallery.schemas.image import ImageCreate, ImageDTO
from gallery.services.image_service import ImageService

router = APIRouter()


@router.get("", response_model=list[ImageDTO])
async def get_images(db: DBSession) -> list[ImageDTO]:
    """Get all images with their comments, newest first."""
    image_service = ImageService(db)
    return await image_service.list_images()


@router.post("", response_model=ImageDTO, status_code=status.HTTP_201_CREATED)
async def create_image(data: ImageCreate, db: DBSession) -> ImageDTO:
    """
    Register an uploaded image.

    - **url**: Location of the media asset returned by the upload (required)
    """
    image_service = ImageService(db)
    return await image_service.create_image(data)
