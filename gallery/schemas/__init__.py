"""Pydantic schemas for API request/response validation."""

from gallery.schemas.comment import CommentCreate, CommentDTO
from gallery.schemas.image import ImageCreate, ImageDTO
from gallery.schemas.system import ServiceHealth, SystemHealthResponse, UploadConfig

__all__ = [
    "CommentCreate",
    "CommentDTO",
    "ImageCreate",
    "ImageDTO",
    "ServiceHealth",
    "SystemHealthResponse",
    "UploadConfig",
]
