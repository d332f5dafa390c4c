"""
Reader API Integration Tests

Tests for the public, unauthenticated collection reader.

Endpoints Tested:
    - GET /api/collections                              - Home page listing
    - GET /api/collections/{slug}                       - Collection navigation
    - GET /api/pages/{collection_slug}/{page_slug}      - Page with neighbours

Fixture Layout (docs_site):
    Basics:  Installation > Upgrading, Configuration, Secrets (draft)
    Guides:  Writing
    (none):  Changelog

    Reading order: Installation, Upgrading, Configuration, Writing, Changelog
"""

from datetime import datetime, timezone

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.db.repositories import CollectionRepository, PageRepository


# =============================================================================
# COLLECTION TESTS
# =============================================================================


class TestReaderCollections:
    """Tests for the collection listing and navigation endpoints."""

    async def test_list_collections_in_order(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        The home page lists collections by order.

        Given: "getting-started" (order 0) and "reference" (order -1)
        When: GET /api/collections
        Then: "reference" comes first
        """
        await client.post(
            "/api/admin/collections",
            json={"title": "Reference", "order": -1},
            headers=admin_headers,
        )

        response = await client.get("/api/collections")

        assert response.status_code == 200
        assert [c["slug"] for c in response.json()] == ["reference", "getting-started"]

    async def test_collection_navigation(self, client: AsyncClient, docs_site: dict):
        """
        The navigation has one published tree per category plus uncategorized.

        Given: The docs_site layout
        When: GET /api/collections/getting-started
        Then: Categories in order, drafts hidden, children nested
        """
        response = await client.get("/api/collections/getting-started")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Getting Started"

        basics, guides = data["categories"]
        assert basics["slug"] == "basics"
        assert [p["slug"] for p in basics["pages"]] == ["installation", "configuration"]
        assert [c["slug"] for c in basics["pages"][0]["children"]] == ["upgrading"]
        assert [p["slug"] for p in guides["pages"]] == ["writing"]
        assert [p["slug"] for p in data["pages"]] == ["changelog"]

    async def test_unpublished_parent_hides_subtree(
        self,
        client: AsyncClient,
        admin_headers: dict,
        docs_site: dict,
    ):
        """
        Unpublishing a parent removes its children from the navigation.

        Given: Installation with published child Upgrading
        When: Installation is unpublished
        Then: Neither appears in Basics
        """
        await client.put(
            f"/api/admin/pages/{docs_site['installation'].id}",
            json={"published": False},
            headers=admin_headers,
        )

        response = await client.get("/api/collections/getting-started")

        basics = response.json()["categories"][0]
        assert [p["slug"] for p in basics["pages"]] == ["configuration"]

    async def test_empty_collection(self, client: AsyncClient, test_collection):
        """
        A collection without pages has empty trees.

        Given: A collection with no categories or pages
        When: GET /api/collections/{slug}
        Then: Returns 200 with empty lists
        """
        response = await client.get("/api/collections/getting-started")

        assert response.status_code == 200
        assert response.json()["categories"] == []
        assert response.json()["pages"] == []

    async def test_equal_order_pages_in_creation_order(
        self,
        client: AsyncClient,
        test_db: AsyncSession,
        test_collection,
    ):
        """
        Siblings sharing an order value keep the order they were created in.

        Given: "Zeta" created on Jan 2 and "Alpha" created on Jan 1, both order 0
        When: GET /api/collections/getting-started
        Then: "alpha" comes before "zeta"
        """
        pages = PageRepository(test_db)
        await pages.create(
            collection_id=test_collection.id,
            title="Zeta",
            slug="zeta",
            order=0,
            published=True,
            created_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
        )
        await pages.create(
            collection_id=test_collection.id,
            title="Alpha",
            slug="alpha",
            order=0,
            published=True,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        await test_db.commit()

        response = await client.get("/api/collections/getting-started")

        assert response.status_code == 200
        assert [p["slug"] for p in response.json()["pages"]] == ["alpha", "zeta"]

    async def test_list_collections_not_truncated(
        self,
        client: AsyncClient,
        test_db: AsyncSession,
    ):
        """
        The home page lists every collection, past the admin page size.

        Given: 101 collections
        When: GET /api/collections
        Then: All 101 are returned
        """
        collections = CollectionRepository(test_db)
        for i in range(101):
            await collections.create(title=f"Collection {i}", slug=f"c-{i}", order=i)
        await test_db.commit()

        response = await client.get("/api/collections")

        assert response.status_code == 200
        assert len(response.json()) == 101
        assert response.json()[-1]["slug"] == "c-100"

    async def test_unknown_collection(self, client: AsyncClient):
        """
        Unknown slugs give 404.

        Given: No collection "nope"
        When: GET /api/collections/nope
        Then: Returns 404
        """
        response = await client.get("/api/collections/nope")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


# =============================================================================
# PAGE DETAIL TESTS
# =============================================================================


class TestReaderPage:
    """Tests for GET /api/pages/{collection_slug}/{page_slug}."""

    async def test_first_page(self, client: AsyncClient, docs_site: dict):
        """
        The first page in reading order has no previous link.

        Given: The docs_site layout
        When: GET /api/pages/getting-started/installation
        Then: previous is null, next is Upgrading, headings are listed
        """
        response = await client.get("/api/pages/getting-started/installation")

        assert response.status_code == 200
        data = response.json()
        assert data["page"]["title"] == "Installation"
        assert data["collection"]["slug"] == "getting-started"
        assert data["category"]["slug"] == "basics"
        assert data["breadcrumbs"] == []
        assert data["previous"] is None
        assert data["next"]["slug"] == "upgrading"
        assert data["headings"] == [
            {"id": "installation-0", "text": "Installation", "level": 1},
            {"id": "requirements-1", "text": "Requirements", "level": 2},
        ]

    async def test_nested_page_breadcrumbs(self, client: AsyncClient, docs_site: dict):
        """
        Nested pages carry their ancestors.

        Given: Upgrading under Installation
        When: GET /api/pages/getting-started/upgrading
        Then: Breadcrumbs list Installation; neighbours follow the tree
        """
        response = await client.get("/api/pages/getting-started/upgrading")

        data = response.json()
        assert data["breadcrumbs"] == [{"title": "Installation", "slug": "installation"}]
        assert data["previous"]["slug"] == "installation"
        assert data["next"]["slug"] == "configuration"

    async def test_neighbours_cross_categories(self, client: AsyncClient, docs_site: dict):
        """
        Reading order runs from one category into the next.

        Given: Configuration is last in Basics, Writing first in Guides
        When: GET the Configuration and Writing pages
        Then: They link to each other, skipping the draft Secrets
        """
        configuration = await client.get("/api/pages/getting-started/configuration")
        writing = await client.get("/api/pages/getting-started/writing")

        assert configuration.json()["next"]["slug"] == "writing"
        assert writing.json()["previous"]["slug"] == "configuration"
        assert writing.json()["next"]["slug"] == "changelog"

    async def test_html_page_headings(self, client: AsyncClient, docs_site: dict):
        """
        HTML bodies get positional heading anchors.

        Given: Writing stored as HTML with an h1 and an h2
        When: GET /api/pages/getting-started/writing
        Then: Headings are heading-0 and heading-1
        """
        response = await client.get("/api/pages/getting-started/writing")

        assert [h["id"] for h in response.json()["headings"]] == [
            "heading-0",
            "heading-1",
        ]

    async def test_uncategorized_last_page(self, client: AsyncClient, docs_site: dict):
        """
        Uncategorized pages come after every category.

        Given: Changelog without a category
        When: GET /api/pages/getting-started/changelog
        Then: category is null, previous is Writing, next is null
        """
        response = await client.get("/api/pages/getting-started/changelog")

        data = response.json()
        assert data["category"] is None
        assert data["previous"]["slug"] == "writing"
        assert data["next"] is None

    async def test_unpublished_page_not_found(self, client: AsyncClient, docs_site: dict):
        """
        Drafts are invisible to readers.

        Given: Secrets is unpublished
        When: GET /api/pages/getting-started/secrets
        Then: Returns 404
        """
        response = await client.get("/api/pages/getting-started/secrets")

        assert response.status_code == 404

    async def test_unknown_page(self, client: AsyncClient, docs_site: dict):
        """
        Unknown slugs give 404.

        Given: No page "nope"
        When: GET /api/pages/getting-started/nope
        Then: Returns 404
        """
        response = await client.get("/api/pages/getting-started/nope")

        assert response.status_code == 404

    async def test_page_of_unknown_collection(self, client: AsyncClient, docs_site: dict):
        """
        The collection slug must match.

        Given: Page "installation" lives in "getting-started"
        When: GET /api/pages/other/installation
        Then: Returns 404
        """
        response = await client.get("/api/pages/other/installation")

        assert response.status_code == 404
