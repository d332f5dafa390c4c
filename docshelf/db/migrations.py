"""
Database Migration Runner

Brings the schema to Alembic head during application startup.

Several replicas may start at once. On PostgreSQL each one tries a
session-level advisory lock; the holder migrates, the others poll until
the lock frees up and then find nothing left to do. The lock lives on the
connection that took it, so that connection stays checked out for the
whole lock -> upgrade -> unlock sequence. SQLite (local development and
tests) migrates without locking.

Disabled with RUN_MIGRATIONS_ON_STARTUP=false, e.g. when migrations run
as a separate deploy step (``alembic upgrade head``).
"""

import asyncio
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from alembic import command
from alembic.config import Config
from alembic.util.exc import CommandError

from docshelf.config.settings import settings
from docshelf.core.logging import logger
from docshelf.db.session import engine

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Any constant shared by all replicas works
MIGRATION_LOCK_ID = 480_211_907

LOCK_POLL_SECONDS = 1.0
MAX_LOCK_ATTEMPTS = 30


def get_alembic_config() -> Config:
    """Alembic config for the project's alembic.ini, pointed at DATABASE_URL."""
    alembic_ini = PROJECT_ROOT / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    # ConfigParser interpolates %, so escape it
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))
    # Leave the structlog setup alone
    config.attributes["configure_logger"] = False
    return config


async def upgrade_to_head() -> None:
    """Run ``alembic upgrade head`` off the event loop.

    env.py drives its own async engine with asyncio.run(), which cannot
    nest inside the running loop, so the command goes to a worker thread.
    """
    config = get_alembic_config()
    await asyncio.to_thread(command.upgrade, config, "head")


async def _try_lock(conn: AsyncConnection) -> bool:
    acquired = await conn.scalar(
        text("SELECT pg_try_advisory_lock(:lock_id)"), {"lock_id": MIGRATION_LOCK_ID}
    )
    return bool(acquired)


async def _unlock(conn: AsyncConnection) -> None:
    await conn.execute(text("SELECT pg_advisory_unlock(:lock_id)"), {"lock_id": MIGRATION_LOCK_ID})


async def _upgrade_with_lock() -> None:
    async with engine.connect() as conn:
        for attempt in range(1, MAX_LOCK_ATTEMPTS + 1):
            if await _try_lock(conn):
                break
            logger.info(
                "Migration lock held by another instance, waiting",
                attempt=attempt,
                max_attempts=MAX_LOCK_ATTEMPTS,
            )
            await asyncio.sleep(LOCK_POLL_SECONDS)
        else:
            logger.warning(
                "Gave up waiting for the migration lock, "
                "assuming another instance migrated"
            )
            return

        logger.debug("Migration lock acquired")
        try:
            await upgrade_to_head()
        finally:
            await _unlock(conn)
            logger.debug("Migration lock released")


async def run_migrations() -> None:
    """Migrate on startup when RUN_MIGRATIONS_ON_STARTUP is set.

    Raises:
        SQLAlchemyError, CommandError: The upgrade failed; startup aborts
    """
    if not settings.RUN_MIGRATIONS_ON_STARTUP:
        logger.debug("RUN_MIGRATIONS_ON_STARTUP is disabled, skipping migrations")
        return

    logger.info("Running database migrations", locked=settings.is_postgres)
    try:
        if settings.is_postgres:
            await _upgrade_with_lock()
        else:
            await upgrade_to_head()
    except (SQLAlchemyError, CommandError, OSError) as e:
        logger.error("Migration failed", error=str(e))
        raise

    logger.info("Database migrations finished")
