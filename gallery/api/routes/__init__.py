"""API route modules."""

from fastapi import APIRouter

from gallery.api.routes.comments import router as comments_router
from gallery.api.routes.images import router as images_router
from gallery.api.routes.system import router as system_router

router = APIRouter()

router.include_router(images_router, prefix="/images", tags=["Images"])
router.include_router(comments_router, prefix="/comments", tags=["Comments"])
router.include_router(system_router, prefix="/system", tags=["System"])
