"""
Collection API Integration Tests

Tests for the admin collection and category endpoints.

Endpoints Tested:
    - POST   /api/admin/collections              - Create collection
    - GET    /api/admin/collections              - List collections
    - GET    /api/admin/collections/{id}         - Get collection
    - GET    /api/admin/collections/{id}/tree    - Admin navigation tree
    - PUT    /api/admin/collections/{id}         - Update collection
    - DELETE /api/admin/collections/{id}         - Delete collection
    - POST   /api/admin/categories               - Create category
    - GET    /api/admin/categories               - List categories
    - PUT    /api/admin/categories/{id}          - Update category
    - DELETE /api/admin/categories/{id}          - Delete category

Test Categories:
    1. Success Cases - Happy path scenarios
    2. Validation Errors - Invalid input handling
    3. Authorization - Token required
    4. Not Found - Non-existent resource handling
    5. Edge Cases - Slug conflicts and cascades
"""

from httpx import AsyncClient


# =============================================================================
# CREATE COLLECTION TESTS
# =============================================================================


class TestCreateCollection:
    """
    Tests for POST /api/admin/collections endpoint.

    Request Body:
        - title (str, required): Collection title
        - slug (str, optional): URL slug, derived from title when omitted
        - description (str, optional)
        - icon (str, optional): Icon name, defaults to "FileText"
        - order (int, optional): Position on the home page
    """

    # -------------------------------------------------------------------------
    # Success Cases
    # -------------------------------------------------------------------------

    async def test_create_collection_derives_slug(
        self,
        client: AsyncClient,
        admin_headers: dict,
    ):
        """
        The slug is derived from the title.

        Given: Authenticated as admin
        When: POST /collections with only a title
        Then: Returns 201 with a slugified title and the default icon
        """
        response = await client.post(
            "/api/admin/collections",
            json={"title": "API Reference & Guides"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "API Reference & Guides"
        assert data["slug"] == "api-reference-guides"
        assert data["icon"] == "FileText"
        assert data["order"] == 0
        assert "id" in data
        assert "created_at" in data

    async def test_create_collection_explicit_slug(
        self,
        client: AsyncClient,
        admin_headers: dict,
    ):
        """
        An explicit slug is normalized and kept.

        Given: Authenticated as admin
        When: POST /collections with slug "My Docs"
        Then: Returns 201 with slug "my-docs"
        """
        response = await client.post(
            "/api/admin/collections",
            json={"title": "Docs", "slug": "My Docs", "order": 3},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["slug"] == "my-docs"
        assert response.json()["order"] == 3

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    async def test_create_collection_missing_title(
        self,
        client: AsyncClient,
        admin_headers: dict,
    ):
        """
        Creation fails when title is missing.

        Given: Authenticated as admin
        When: POST /collections without title
        Then: Returns 422 Unprocessable Entity
        """
        response = await client.post(
            "/api/admin/collections",
            json={},
            headers=admin_headers,
        )

        assert response.status_code == 422

    async def test_create_collection_unsluggable_title(
        self,
        client: AsyncClient,
        admin_headers: dict,
    ):
        """
        A title with nothing URL-safe needs an explicit slug.

        Given: Authenticated as admin
        When: POST /collections with title "!!!"
        Then: Returns 400 VALIDATION_ERROR
        """
        response = await client.post(
            "/api/admin/collections",
            json={"title": "!!!"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    # -------------------------------------------------------------------------
    # Edge Cases
    # -------------------------------------------------------------------------

    async def test_create_collection_duplicate_slug(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        Collection slugs are globally unique.

        Given: A collection with slug "getting-started"
        When: POST /collections with the same slug
        Then: Returns 409 CONFLICT
        """
        response = await client.post(
            "/api/admin/collections",
            json={"title": "Getting Started"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    # -------------------------------------------------------------------------
    # Authorization
    # -------------------------------------------------------------------------

    async def test_create_collection_requires_auth(self, client: AsyncClient):
        """
        Anonymous callers are rejected.

        Given: No Authorization header
        When: POST /collections
        Then: Returns 401
        """
        response = await client.post("/api/admin/collections", json={"title": "X"})

        assert response.status_code == 401


# =============================================================================
# READ / UPDATE / DELETE COLLECTION TESTS
# =============================================================================


class TestManageCollection:
    """Tests for GET/PUT/DELETE /api/admin/collections/{id}."""

    async def test_list_collections(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        Listing is paginated.

        Given: One collection
        When: GET /collections
        Then: Returns the collection with pagination metadata
        """
        response = await client.get("/api/admin/collections", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert [c["slug"] for c in data["data"]] == ["getting-started"]
        assert data["pagination"]["total"] == 1
        assert data["pagination"]["page"] == 1

    async def test_get_collection(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        A collection is fetched by id.

        Given: An existing collection
        When: GET /collections/{id}
        Then: Returns 200 with its fields
        """
        response = await client.get(
            f"/api/admin/collections/{test_collection.id}",
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["description"] == "First steps"

    async def test_get_collection_invalid_uuid(
        self,
        client: AsyncClient,
        admin_headers: dict,
    ):
        """
        Malformed ids are rejected before any lookup.

        Given: Authenticated as admin
        When: GET /collections/not-a-uuid
        Then: Returns 400 VALIDATION_ERROR
        """
        response = await client.get(
            "/api/admin/collections/not-a-uuid",
            headers=admin_headers,
        )

        assert response.status_code == 400

    async def test_get_collection_not_found(
        self,
        client: AsyncClient,
        admin_headers: dict,
        make_uuid,
    ):
        """
        Unknown ids give 404.

        Given: No collection with that id
        When: GET /collections/{id}
        Then: Returns 404 NOT_FOUND
        """
        response = await client.get(
            f"/api/admin/collections/{make_uuid()}",
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_update_collection_partial(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        Only provided fields change; explicit null clears description.

        Given: A collection with a description
        When: PUT /collections/{id} with a new title and description null
        Then: Title changes, description is cleared, slug is kept
        """
        response = await client.put(
            f"/api/admin/collections/{test_collection.id}",
            json={"title": "Start Here", "description": None},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Start Here"
        assert data["description"] is None
        assert data["slug"] == "getting-started"

    async def test_update_collection_slug_conflict(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        Renaming onto a taken slug fails.

        Given: Collections "getting-started" and "reference"
        When: PUT the second with slug "getting-started"
        Then: Returns 409
        """
        created = await client.post(
            "/api/admin/collections",
            json={"title": "Reference"},
            headers=admin_headers,
        )

        response = await client.put(
            f"/api/admin/collections/{created.json()['id']}",
            json={"slug": "getting-started"},
            headers=admin_headers,
        )

        assert response.status_code == 409

    async def test_delete_collection_cascades(
        self,
        client: AsyncClient,
        admin_headers: dict,
        docs_site: dict,
    ):
        """
        Deleting a collection removes its categories and pages.

        Given: A collection with categories and pages
        When: DELETE /collections/{id}
        Then: Returns 204; the collection, a category and a page are gone
        """
        collection_id = docs_site["collection"].id
        category_id = docs_site["basics"].id
        page_id = docs_site["installation"].id

        response = await client.delete(
            f"/api/admin/collections/{collection_id}",
            headers=admin_headers,
        )
        assert response.status_code == 204

        for path in (
            f"/api/admin/collections/{collection_id}",
            f"/api/admin/categories/{category_id}",
            f"/api/admin/pages/{page_id}",
        ):
            follow_up = await client.get(path, headers=admin_headers)
            assert follow_up.status_code == 404, path

    async def test_delete_collection_not_found(
        self,
        client: AsyncClient,
        admin_headers: dict,
        make_uuid,
    ):
        """
        Deleting an unknown collection gives 404.

        Given: No collection with that id
        When: DELETE /collections/{id}
        Then: Returns 404
        """
        response = await client.delete(
            f"/api/admin/collections/{make_uuid()}",
            headers=admin_headers,
        )

        assert response.status_code == 404


# =============================================================================
# ADMIN TREE TESTS
# =============================================================================


class TestCollectionTree:
    """Tests for GET /api/admin/collections/{id}/tree."""

    async def test_tree_includes_unpublished(
        self,
        client: AsyncClient,
        admin_headers: dict,
        docs_site: dict,
    ):
        """
        The admin tree shows drafts too.

        Given: A collection with an unpublished page in Basics
        When: GET /collections/{id}/tree
        Then: Basics lists Installation (with Upgrading), Configuration, Secrets
        """
        response = await client.get(
            f"/api/admin/collections/{docs_site['collection'].id}/tree",
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        basics = data["categories"][0]
        assert basics["slug"] == "basics"
        assert [p["slug"] for p in basics["pages"]] == [
            "installation",
            "configuration",
            "secrets",
        ]
        assert [c["slug"] for c in basics["pages"][0]["children"]] == ["upgrading"]
        assert [p["slug"] for p in data["pages"]] == ["changelog"]


# =============================================================================
# CATEGORY TESTS
# =============================================================================


class TestCategories:
    """Tests for /api/admin/categories endpoints."""

    async def test_create_category(
        self,
        client: AsyncClient,
        admin_headers: dict,
        test_collection,
    ):
        """
        A category is created inside a collection.

        Given: An existing collection
        When: POST /categories
        Then: Returns 201 with a derived slug
        """
        response = await client.post(
            "/api/admin/categories",
            json={
                "collection_id": str(test_collection.id),
                "title": "Advanced Topics",
                "order": 2,
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["slug"] == "advanced-topics"
        assert data["collection_id"] == str(test_collection.id)
        assert data["order"] == 2

    async def test_create_category_unknown_collection(
        self,
        client: AsyncClient,
        admin_headers: dict,
        make_uuid,
    ):
        """
        Categories need an existing collection.

        Given: No collection with that id
        When: POST /categories
        Then: Returns 404
        """
        response = await client.post(
            "/api/admin/categories",
            json={"collection_id": make_uuid(), "title": "Orphan"},
            headers=admin_headers,
        )

        assert response.status_code == 404

    async def test_list_categories_of_collection(
        self,
        client: AsyncClient,
        admin_headers: dict,
        docs_site: dict,
    ):
        """
        Listing filters by collection and keeps display order.

        Given: A collection with Basics (0) and Guides (1)
        When: GET /categories?collection_id=...
        Then: Returns both in order
        """
        response = await client.get(
            "/api/admin/categories",
            params={"collection_id": str(docs_site["collection"].id)},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert [c["slug"] for c in response.json()["data"]] == ["basics", "guides"]

    async def test_update_category(
        self,
        client: AsyncClient,
        admin_headers: dict,
        docs_site: dict,
    ):
        """
        Categories can be reordered.

        Given: Category Guides at order 1
        When: PUT /categories/{id} with order -1
        Then: Returns 200 with the new order
        """
        response = await client.put(
            f"/api/admin/categories/{docs_site['guides'].id}",
            json={"order": -1},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["order"] == -1
        assert response.json()["title"] == "Guides"

    async def test_delete_category_keeps_pages(
        self,
        client: AsyncClient,
        admin_headers: dict,
        docs_site: dict,
    ):
        """
        Pages outlive their category.

        Given: Category Guides containing page Writing
        When: DELETE /categories/{id}
        Then: Returns 204 and the page still exists
        """
        category_id = docs_site["guides"].id
        page_id = docs_site["writing"].id

        response = await client.delete(
            f"/api/admin/categories/{category_id}",
            headers=admin_headers,
        )
        assert response.status_code == 204

        category = await client.get(
            f"/api/admin/categories/{category_id}", headers=admin_headers
        )
        page = await client.get(f"/api/admin/pages/{page_id}", headers=admin_headers)

        assert category.status_code == 404
        assert page.status_code == 200
