"""Base service class with common database operations."""

from typing import Generic, NoReturn, TypeVar

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.exceptions import InternalError
from gallery.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseService(Generic[ModelType]):
    """Base service with the append-only operations shared by all models."""

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    async def create(self, obj: ModelType) -> ModelType:
        """Create new entity."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def fail(self, message: str, exc: Exception) -> NoReturn:
        """Roll back, log the storage error and raise a generic InternalError."""
        try:
            await self.db.rollback()
        except Exception as rollback_exc:
            logger.warning(f"Rollback failed: {rollback_exc}")
        logger.opt(exception=exc).error(f"{self.model.__name__} store error: {message}")
        raise InternalError(message) from exc
