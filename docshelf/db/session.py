"""
Database Session

Async engine, session factory and the per-request get_db() dependency.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from docshelf.config.settings import settings
from docshelf.core.logging import logger


def create_engine_for_url(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine, enabling foreign keys on SQLite.

    Categories, pages and articles rely on ON DELETE CASCADE / SET NULL,
    which SQLite only honours with PRAGMA foreign_keys=ON.

    Args:
        url: SQLAlchemy database URL
        **kwargs: Extra create_async_engine() arguments

    Returns:
        Configured async engine
    """
    new_engine = create_async_engine(url, **kwargs)

    if new_engine.dialect.name == "sqlite":

        @event.listens_for(new_engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


def _engine_options() -> dict[str, Any]:
    if settings.DATABASE_URL.startswith("sqlite"):
        return {"echo": False}
    return {
        "echo": False,
        "pool_size": settings.DATABASE_POOL_SIZE,
        "max_overflow": settings.DATABASE_MAX_OVERFLOW,
        "pool_pre_ping": True,
    }


engine = create_engine_for_url(settings.DATABASE_URL, **_engine_options())

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


AFTER_COMMIT_KEY = "docshelf.after_commit"


def after_commit(session: AsyncSession, callback: Callable[[], Awaitable[None]]) -> None:
    """Queue ``callback`` to run once the session's transaction has committed.

    Content-cache invalidations are queued here so they happen only once
    the new rows are visible to other sessions.
    A callback queued twice runs once.
    """
    pending = session.info.setdefault(AFTER_COMMIT_KEY, [])
    if callback not in pending:
        pending.append(callback)


def discard_after_commit(session: AsyncSession) -> None:
    session.info.pop(AFTER_COMMIT_KEY, None)


async def commit_session(session: AsyncSession) -> None:
    """Commit, then run the callbacks queued with after_commit() in order."""
    await session.commit()
    for callback in session.info.pop(AFTER_COMMIT_KEY, []):
        await callback()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for one request.

    Commits when the handler returns normally and rolls back when it raises,
    so repository methods only need to flush(). Post-commit callbacks are
    dropped on rollback.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await commit_session(session)
        except Exception:
            discard_after_commit(session)
            await session.rollback()
            raise


async def init_db() -> None:
    """Verify the database is reachable."""
    logger.info("Initializing database connection")
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection established")


async def close_db() -> None:
    """Dispose of the connection pool."""
    logger.info("Closing database connection")
    await engine.dispose()
    logger.info("Database connection closed")
