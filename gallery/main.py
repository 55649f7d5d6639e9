"""
Gallery API - FastAPI Application

Images hosted on an external media service, with per-image comment threads.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from gallery.api import router as api_router
from gallery.core.config import get_settings
from gallery.core.exceptions import register_exception_handlers
from gallery.core.logging import configure_logging
from gallery.db.base import Base
from gallery.db import models_registry  # noqa: F401 - Import to register models
from gallery.db.session import dispose_engine, engine

settings = get_settings()
configure_logging(settings)


async def init_database() -> None:
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Gallery API...")
    await init_database()
    logger.info(f"Gallery API started on port {settings.port}")

    yield

    logger.info("Shutting down Gallery API...")
    await dispose_engine()
    logger.info("Gallery API stopped")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Gallery API - image records with threaded comments",
    lifespan=lifespan,
    docs_url="/swagger" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

register_exception_handlers(app)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gallery.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
