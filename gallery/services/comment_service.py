"""Comment service for per-image comment threads."""

from loguru import logger
from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.exceptions import NotFoundError
from gallery.models.comment import Comment
from gallery.models.image import Image
from gallery.schemas.comment import CommentCreate, CommentDTO
from gallery.services.base_service import BaseService


class CommentService(BaseService[Comment]):
    """Comment service for create/list operations scoped to one image."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Comment)

    async def create_comment(self, image_id: int, data: CommentCreate) -> CommentDTO:
        """
        Attach a new comment to an image.

        Raises NotFoundError when the image does not exist, including the case
        where the database rejects the foreign key.
        """
        try:
            if await self.db.get(Image, image_id) is None:
                raise NotFoundError("Image not found.")
            comment = await self.create(Comment(content=data.content, image_id=image_id))
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Comment rejected for image {image_id}: {e.orig}")
            raise NotFoundError("Image not found.") from e
        except SQLAlchemyError as e:
            await self.fail("Failed to add comment.", e)

        logger.info(f"Comment {comment.id} added to image {image_id}")
        return self._to_dto(comment)

    async def list_comments(self, image_id: int) -> list[CommentDTO]:
        """Get comments for an image, newest first. Unknown images yield []."""
        query = (
            select(Comment)
            .where(Comment.image_id == image_id)
            .order_by(desc(Comment.created_at), desc(Comment.id))
        )
        try:
            result = await self.db.execute(query)
            comments = result.scalars().all()
        except SQLAlchemyError as e:
            await self.fail("Failed to fetch comments.", e)

        return [self._to_dto(c) for c in comments]

    def _to_dto(self, comment: Comment) -> CommentDTO:
        """Convert Comment model to DTO."""
        return CommentDTO(
            id=comment.id,
            content=comment.content,
            created_at=comment.created_at,
            image_id=comment.image_id,
        )
