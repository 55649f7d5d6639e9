"""Service layer for business logic."""

from gallery.services.comment_service import CommentService
from gallery.services.image_service import ImageService
