"""Database engine and session factory.

One engine (and its connection pool) exists per process. Connections are
opened lazily on first use and released on shutdown via ``dispose_engine``.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from gallery.core.config import get_settings

settings = get_settings()


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with the project's connection settings."""
    engine = create_async_engine(url, echo=echo, future=True, pool_pre_ping=True)
    enable_sqlite_foreign_keys(engine)
    return engine


def make_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to ``bind``."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


engine = make_engine(settings.database_url, echo=settings.db_echo)
async_session_maker = make_session_maker(engine)


async def dispose_engine() -> None:
    """Close all pooled connections."""
    await engine.dispose()
