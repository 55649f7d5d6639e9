"""System API endpoints."""

import time

from fastapi import APIRouter
from loguru import logger
from sqlalchemy import text

from gallery.core.config import get_settings
from gallery.core.deps import DBSession
from gallery.core.exceptions import ServiceUnavailableError
from gallery.schemas.system import ServiceHealth, SystemHealthResponse, UploadConfig

CLOUDINARY_UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"

router = APIRouter()


@router.get("/health", response_model=SystemHealthResponse)
async def get_system_health(db: DBSession) -> SystemHealthResponse:
    """Check that the database answers a trivial query."""
    try:
        start = time.time()
        await db.execute(text("SELECT 1"))
        latency = (time.time() - start) * 1000
        db_health = ServiceHealth(status="connected", latency_ms=round(latency, 2))
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        db_health = ServiceHealth(status="error", message=str(e))

    return SystemHealthResponse(
        healthy=db_health.status == "connected",
        database=db_health,
    )


@router.get("/upload-config", response_model=UploadConfig)
async def get_upload_config() -> UploadConfig:
    """
    Get the public parameters for uploading directly to the media host.

    The client posts ``file`` and ``upload_preset`` to ``uploadUrl`` and sends
    the returned ``secure_url`` to ``POST /images``.
    """
    settings = get_settings()
    if not settings.cloudinary_cloud_name:
        raise ServiceUnavailableError("Media upload is not configured.")

    return UploadConfig(
        cloud_name=settings.cloudinary_cloud_name,
        upload_preset=settings.cloudinary_upload_preset,
        upload_url=CLOUDINARY_UPLOAD_URL.format(
            cloud_name=settings.cloudinary_cloud_name
        ),
    )
