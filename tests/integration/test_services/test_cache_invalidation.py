"""
Cache Invalidation Integration Tests

Admin writes clear the reader cache only once their transaction commits,
so a reader request in between cannot re-cache the old content.

Fixture Layout (docs_site):
    Basics:  Installation > Upgrading, Configuration, Secrets (draft)
    Guides:  Writing
    (none):  Changelog
"""

from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.admin.services import ArticleService, PageService
from docshelf.db.session import commit_session, discard_after_commit
from docshelf.schemas.knowledge_base import ArticleUpdate
from docshelf.schemas.page import PageCreate, PageUpdate


class RecordingCache:
    """Content cache stand-in that records namespace invalidations."""

    def __init__(self) -> None:
        self.invalidated: list[str] = []

    async def invalidate_collections(self) -> None:
        self.invalidated.append("collection")

    async def invalidate_knowledge_bases(self) -> None:
        self.invalidated.append("kb")


# =============================================================================
# POST-COMMIT INVALIDATION TESTS
# =============================================================================


class TestInvalidationAfterCommit:
    """Tests for cache invalidation queued on the session."""

    async def test_update_waits_for_commit(self, test_db: AsyncSession, docs_site: dict):
        """
        Updating a page does not touch the cache until commit.

        Given: Page Installation
        When: It is renamed, then the session commits
        Then: Nothing is invalidated before commit; the collection namespace after
        """
        cache = RecordingCache()
        service = PageService(test_db, cache)

        await service.update_page(docs_site["installation"].id, PageUpdate(title="Install"))
        assert cache.invalidated == []

        await commit_session(test_db)

        assert cache.invalidated == ["collection"]

    async def test_several_writes_invalidate_once(
        self,
        test_db: AsyncSession,
        test_collection,
    ):
        """
        One transaction clears a namespace once.

        Given: An empty collection
        When: Two pages are created in one transaction and it commits
        Then: The collection namespace is invalidated a single time
        """
        cache = RecordingCache()
        service = PageService(test_db, cache)

        for title in ("First", "Second"):
            await service.create_page(PageCreate(collection_id=test_collection.id, title=title))
        await commit_session(test_db)

        assert cache.invalidated == ["collection"]

    async def test_rolled_back_write_keeps_cache(self, test_db: AsyncSession, docs_site: dict):
        """
        A rolled-back write leaves the cache alone.

        Given: Page Changelog
        When: It is updated, the queued work is discarded and the session rolls back
        Then: A later commit invalidates nothing
        """
        cache = RecordingCache()
        service = PageService(test_db, cache)

        await service.update_page(docs_site["changelog"].id, PageUpdate(order=5))
        discard_after_commit(test_db)
        await test_db.rollback()
        await commit_session(test_db)

        assert cache.invalidated == []

    async def test_article_write_clears_knowledge_bases(
        self,
        test_db: AsyncSession,
        help_center: dict,
    ):
        """
        Article writes invalidate the knowledge-base namespace.

        Given: Article Invoices
        When: It is retitled and the session commits
        Then: Only the knowledge-base namespace is invalidated
        """
        cache = RecordingCache()
        service = ArticleService(test_db, cache)

        await service.update_article(help_center["invoices"].id, ArticleUpdate(title="Bills"))
        await commit_session(test_db)

        assert cache.invalidated == ["kb"]
