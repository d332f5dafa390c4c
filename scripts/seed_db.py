#!/usr/bin/env python3
"""
Database Seeder

Creates initial data for development: an admin account, a documentation
collection with nested pages, and a small knowledge base.
Cleans existing content before inserting fresh data.

Run from project root:
    python -m scripts.seed_db
"""

import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.config.constants import ContentType
from docshelf.core.logging import logger
from docshelf.core.security import hash_password
from docshelf.db.repositories import (
    AdminUserRepository,
    ArticleRepository,
    CategoryRepository,
    CollectionRepository,
    KnowledgeBaseCategoryRepository,
    KnowledgeBaseRepository,
    PageRepository,
)
from docshelf.db.session import AsyncSessionLocal, init_db


async def clean_seed_data(session: AsyncSession) -> None:
    """Remove existing content before reseeding."""
    logger.info("Cleaning existing seed data")

    # Children first; foreign keys would cascade anyway
    tables = [
        "articles",
        "kb_categories",
        "knowledge_bases",
        "pages",
        "categories",
        "collections",
        "admin_users",
    ]

    for table in tables:
        await session.execute(text(f"DELETE FROM {table}"))
        logger.info("Cleared table", table=table)

    await session.commit()


async def seed_collections(session: AsyncSession) -> None:
    collection_repo = CollectionRepository(session)
    category_repo = CategoryRepository(session)
    page_repo = PageRepository(session)

    collection = await collection_repo.create(
        title="Getting Started",
        slug="getting-started",
        description="Install, configure and run the platform",
        order=0,
    )
    basics = await category_repo.create(
        collection_id=collection.id, title="Basics", slug="basics", order=0
    )
    guides = await category_repo.create(
        collection_id=collection.id, title="Guides", slug="guides", order=1
    )

    installation = await page_repo.create(
        collection_id=collection.id,
        category_id=basics.id,
        title="Installation",
        slug="installation",
        content="# Installation\n\n## Requirements\n\nPython 3.11 or newer.\n\n## Install\n",
        content_type=ContentType.MARKDOWN.value,
        order=0,
        published=True,
    )
    await page_repo.create(
        collection_id=collection.id,
        category_id=basics.id,
        parent_id=installation.id,
        title="Upgrading",
        slug="upgrading",
        content="# Upgrading\n\nRun the migrations after every upgrade.\n",
        order=0,
        published=True,
    )
    await page_repo.create(
        collection_id=collection.id,
        category_id=basics.id,
        title="Configuration",
        slug="configuration",
        content="# Configuration\n\nSettings are read from the environment.\n",
        order=1,
        published=True,
    )
    await page_repo.create(
        collection_id=collection.id,
        category_id=guides.id,
        title="Writing Pages",
        slug="writing-pages",
        content="<h1>Writing Pages</h1><p>Use the editor in the admin panel.</p>",
        content_type=ContentType.HTML.value,
        order=0,
        published=True,
    )
    await page_repo.create(
        collection_id=collection.id,
        title="Release Notes",
        slug="release-notes",
        content="# Release Notes\n\nDraft.\n",
        order=0,
        published=False,
    )
    logger.info("Created collection", title=collection.title)


async def seed_knowledge_base(session: AsyncSession) -> None:
    knowledge_base_repo = KnowledgeBaseRepository(session)
    category_repo = KnowledgeBaseCategoryRepository(session)
    article_repo = ArticleRepository(session)

    knowledge_base = await knowledge_base_repo.create(
        name="Help Center",
        slug="help-center",
        description="Answers to common questions",
        order=0,
    )
    account = await category_repo.create(
        knowledge_base_id=knowledge_base.id,
        name="Account",
        slug="account",
        order=0,
    )
    sign_in = await article_repo.create(
        category_id=account.id,
        title="Signing In",
        slug="signing-in",
        content="<h2>Signing in</h2><p>Use the email address you registered with.</p>",
        order=0,
        published=True,
    )
    await article_repo.create(
        category_id=account.id,
        parent_id=sign_in.id,
        title="Resetting Your Password",
        slug="resetting-your-password",
        content="<h2>Reset</h2><p>Follow the link in the reset email.</p>",
        order=0,
        published=True,
    )
    logger.info("Created knowledge base", name=knowledge_base.name)


async def seed_database() -> None:
    """Seed the database with initial data."""
    logger.info("Starting database seeding")

    await init_db()

    async with AsyncSessionLocal() as session:
        await clean_seed_data(session)

        admin = await AdminUserRepository(session).create(
            email="admin@docshelf.local",
            display_name="Admin",
            password_hash=hash_password("admin123"),
        )
        logger.info("Created admin", email=admin.email)

        await seed_collections(session)
        await seed_knowledge_base(session)

        await session.commit()

    logger.info("Database seeding completed")


if __name__ == "__main__":
    asyncio.run(seed_database())
