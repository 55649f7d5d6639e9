"""API router initialization."""

from fastapi import APIRouter

from gallery.api.routes import router as routes_router
from gallery.core.config import get_settings


def build_router(prefix: str) -> APIRouter:
    """Mount every resource under ``prefix`` ("" serves the bare paths)."""
    router = APIRouter()
    router.include_router(routes_router, prefix=prefix)
    return router


router = build_router(get_settings().api_prefix)
