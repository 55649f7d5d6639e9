"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.deps import get_db
from gallery.db.base import Base
from gallery.db import models_registry  # noqa: F401 - Import to register models
from gallery.db.session import make_engine, make_session_maker
from gallery.main import app
from gallery.models.comment import Comment
from gallery.models.image import Image

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = make_engine(TEST_DATABASE_URL)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(test_engine):
    """Session factory bound to the test engine."""
    return make_session_maker(test_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with overridden dependencies."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def sample_images(db_session: AsyncSession) -> list[Image]:
    """Create sample images, one hour apart, oldest first."""
    base_time = datetime(2024, 1, 1, 12, 0, 0)
    images = [
        Image(
            url=f"https://res.cloudinary.com/demo/image/upload/sample-{i}.jpg",
            created_at=base_time + timedelta(hours=i),
        )
        for i in range(3)
    ]

    for image in images:
        db_session.add(image)
    await db_session.commit()

    return images


@pytest_asyncio.fixture(scope="function")
async def sample_comments(
    db_session: AsyncSession, sample_images: list[Image]
) -> list[Comment]:
    """Create comments on the first sample image, inserted out of time order."""
    image = sample_images[0]
    offsets = [2, 1, 3]  # minutes after the image was created
    comments = [
        Comment(
            content=f"comment at +{minutes}m",
            image_id=image.id,
            created_at=image.created_at + timedelta(minutes=minutes),
        )
        for minutes in offsets
    ]

    for comment in comments:
        db_session.add(comment)
    await db_session.commit()

    return comments
