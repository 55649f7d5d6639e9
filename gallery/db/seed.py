"""Database seeder for demo data."""

import asyncio
from datetime import datetime, timedelta, timezone

from loguru import logger
from sqlalchemy import func, select

from gallery.db.base import Base
from gallery.db import models_registry  # noqa: F401 - Import to register models
from gallery.db.session import async_session_maker, engine
from gallery.models.comment import Comment
from gallery.models.image import Image

DEMO_IMAGES = [
    {
        "url": "https://res.cloudinary.com/demo/image/upload/sample.jpg",
        "comments": ["Lovely colors", "Where was this taken?"],
    },
    {
        "url": "https://res.cloudinary.com/demo/image/upload/dog.jpg",
        "comments": ["Good dog"],
    },
    {
        "url": "https://res.cloudinary.com/demo/image/upload/lady.jpg",
        "comments": [],
    },
]


async def create_tables():
    """Create all tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created")


async def seed_images():
    """Seed images with comments, skipping if any image already exists."""
    async with async_session_maker() as db:
        count = await db.scalar(select(func.count()).select_from(Image))
        if count:
            logger.info(f"Images already present ({count}), skipping")
            return

        # Spread timestamps so the listing order is visible
        base_time = datetime.now(timezone.utc) - timedelta(hours=len(DEMO_IMAGES))
        for i, entry in enumerate(DEMO_IMAGES):
            created_at = base_time + timedelta(hours=i)
            image = Image(url=entry["url"], created_at=created_at)
            for j, content in enumerate(entry["comments"]):
                image.comments.append(
                    Comment(content=content, created_at=created_at + timedelta(minutes=j + 1))
                )
            db.add(image)
        await db.commit()
    logger.info(f"Seeded {len(DEMO_IMAGES)} images")


async def seed_all():
    """Seed all demo data."""
    logger.info("Starting database seeding...")
    await create_tables()
    await seed_images()
    logger.info("Database seeding completed!")


async def clear_all():
    """Drop and recreate all tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables cleared and recreated")


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "--clear":
        asyncio.run(clear_all())
    else:
        asyncio.run(seed_all())
