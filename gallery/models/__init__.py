"""Database models."""

from gallery.models.comment import Comment
from gallery.models.image import Image

__all__ = [
    "Comment",
    "Image",
]
