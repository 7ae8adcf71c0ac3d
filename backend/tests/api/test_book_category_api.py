"""API tests for BookCategory endpoints."""

from typing import Any, Dict

import pytest
from httpx import AsyncClient


class TestBookCategoryAPI:
    """API tests for book category endpoints."""

    @pytest.mark.asyncio
    async def test_create_root_category(self, client: AsyncClient):
        response = await client.post("/api/BookCategories", json={"name": "Fiction"})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Fiction", "parentId": None}
        assert response.headers["location"] == "http://test/api/BookCategories/1"

    @pytest.mark.asyncio
    async def test_create_child_category(self, client: AsyncClient, test_category: Dict[str, Any]):
        response = await client.post("/api/BookCategories", json={"name": "Physics", "parentId": test_category["id"]})

        assert response.status_code == 201
        assert response.json()["parentId"] == test_category["id"]

    @pytest.mark.asyncio
    async def test_create_category_with_missing_parent_fails(self, client: AsyncClient):
        response = await client.post("/api/BookCategories", json={"name": "Orphan", "parentId": 999})

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_get_children(self, client: AsyncClient, test_category: Dict[str, Any]):
        parent_id = test_category["id"]
        physics = await client.post("/api/BookCategories", json={"name": "Physics", "parentId": parent_id})
        chemistry = await client.post("/api/BookCategories", json={"name": "Chemistry", "parentId": parent_id})
        await client.post("/api/BookCategories", json={"name": "Poetry"})

        response = await client.get(f"/api/BookCategories/{parent_id}/children")

        assert response.status_code == 200
        assert [child["id"] for child in response.json()] == [physics.json()["id"], chemistry.json()["id"]]

    @pytest.mark.asyncio
    async def test_get_children_not_found(self, client: AsyncClient):
        response = await client.get("/api/BookCategories/999/children")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_replace_category_clears_parent(self, client: AsyncClient, test_category: Dict[str, Any]):
        """Omitting the parent in a replacement detaches the category."""
        child = await client.post("/api/BookCategories", json={"name": "Physics", "parentId": test_category["id"]})
        child_id = child.json()["id"]

        response = await client.put(f"/api/BookCategories/{child_id}", json={"id": child_id, "name": "Physics"})

        assert response.status_code == 204
        fetched = await client.get(f"/api/BookCategories/{child_id}")
        assert fetched.json() == {"id": child_id, "name": "Physics", "parentId": None}

    @pytest.mark.asyncio
    async def test_replace_category_as_own_parent(self, client: AsyncClient, test_category: Dict[str, Any]):
        category_id = test_category["id"]
        response = await client.put(
            f"/api/BookCategories/{category_id}",
            json={"id": category_id, "name": "Science", "parentId": category_id},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_replace_category_under_descendant(self, client: AsyncClient, test_category: Dict[str, Any]):
        root_id = test_category["id"]
        child = await client.post("/api/BookCategories", json={"name": "Physics", "parentId": root_id})
        grandchild = await client.post("/api/BookCategories", json={"name": "Optics", "parentId": child.json()["id"]})

        response = await client.put(
            f"/api/BookCategories/{root_id}",
            json={"id": root_id, "name": "Science", "parentId": grandchild.json()["id"]},
        )

        assert response.status_code == 400
        fetched = await client.get(f"/api/BookCategories/{root_id}")
        assert fetched.json()["parentId"] is None

    @pytest.mark.asyncio
    async def test_delete_category_with_children_fails(self, client: AsyncClient, test_category: Dict[str, Any]):
        await client.post("/api/BookCategories", json={"name": "Physics", "parentId": test_category["id"]})

        response = await client.delete(f"/api/BookCategories/{test_category['id']}")

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_delete_leaf_category(self, client: AsyncClient, test_category: Dict[str, Any]):
        response = await client.delete(f"/api/BookCategories/{test_category['id']}")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_replace_missing_category_as_own_parent(self, client: AsyncClient):
        """An absent category is reported as missing even when the body names it as its own parent."""
        response = await client.put("/api/BookCategories/42", json={"id": 42, "name": "Ghost", "parentId": 42})

        assert response.status_code == 404
        assert response.json()["detail"] == "BookCategory with ID 42 was not found."
