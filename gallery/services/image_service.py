"""Image service for uploaded media records."""

from loguru import logger
from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.models.image import Image
from gallery.schemas.comment import CommentDTO
from gallery.schemas.image import ImageCreate, ImageDTO
from gallery.services.base_service import BaseService


class ImageService(BaseService[Image]):
    """Image service for create/list operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Image)

    async def create_image(self, data: ImageCreate) -> ImageDTO:
        """Persist a new image for an already uploaded media URL."""
        try:
            image = await self.create(Image(url=data.url))
        except SQLAlchemyError as e:
            await self.fail("Failed to save image.", e)

        logger.info(f"Image {image.id} created")
        # A new image has no comments yet
        return ImageDTO(id=image.id, url=image.url, created_at=image.created_at, comments=[])

    async def list_images(self) -> list[ImageDTO]:
        """Get all images with their comments, newest first."""
        query = (
            select(Image)
            .options(selectinload(Image.comments))
            .order_by(desc(Image.created_at), desc(Image.id))
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(query)
            images = result.scalars().all()
        except SQLAlchemyError as e:
            await self.fail("Failed to fetch images.", e)

        return [self._to_dto(image) for image in images]

    def _to_dto(self, image: Image) -> ImageDTO:
        """Convert Image model to DTO."""
        return ImageDTO(
            id=image.id,
            url=image.url,
            created_at=image.created_at,
            comments=[
                CommentDTO(
                    id=c.id,
                    content=c.content,
                    created_at=c.created_at,
                    image_id=c.image_id,
                )
                for c in image.comments
            ],
        )
