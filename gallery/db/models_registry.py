"""
Model registry.

Import all models here to ensure they are registered with SQLAlchemy metadata
before ``Base.metadata.create_all`` runs.
"""

from gallery.db.base import Base
from gallery.models.comment import Comment
from gallery.models.image import Image

__all__ = [
    "Base",
    "Comment",
    "Image",
]
