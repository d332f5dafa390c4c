#!/usr/bin/env python3
"""
Database Reset

Drops every table, including Alembic's version table, so the next startup
migrates from scratch. Destructive: development use only.

Run from project root:
    python -m scripts.reset_db
"""

import asyncio

from sqlalchemy import text

from docshelf.config.settings import settings
from docshelf.core.logging import logger
from docshelf.db.session import close_db, engine
from docshelf.models import Base


async def reset_database() -> None:
    """Drop all application tables."""
    if settings.is_production:
        logger.error("Refusing to reset a production database")
        return

    logger.info("Resetting database")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))

    await close_db()
    logger.info("Database reset complete")


if __name__ == "__main__":
    asyncio.run(reset_database())
