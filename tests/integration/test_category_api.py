"""Integration tests for Category API endpoints.

Covers:
- CRUD operations via /api/v1/categories/.
- Partial update semantics (presence, null, no-op).
- Error mapping (400, 404).
"""

from __future__ import annotations

from datetime import timedelta

import pytest
import uuid6
from freezegun import freeze_time

from modules.categories.models import Category
from modules.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/v1/categories/"


def _detail_url(pk) -> str:
    return f"{URL}{pk}/"


# ===========================================================================
# Create
# ===========================================================================


class TestCreateCategory:
    def test_create_returns_201(self, api_client):
        response = api_client.post(
            URL, {"name": "Electronics", "description": "desc"}, format="json"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Electronics"
        assert data["description"] == "desc"
        assert set(data) == {"id", "name", "description", "created_at", "updated_at"}
        assert Category.objects.filter(pk=data["id"]).exists()

    def test_description_is_optional(self, api_client):
        response = api_client.post(URL, {"name": "Books"}, format="json")
        assert response.status_code == 201
        assert response.json()["description"] == ""

    def test_timestamps_are_utc(self, api_client):
        with freeze_time("2026-04-05 06:07:08"):
            response = api_client.post(URL, {"name": "Books"}, format="json")
        data = response.json()
        assert data["created_at"] == "2026-04-05T06:07:08Z"
        assert data["updated_at"] == data["created_at"]

    @pytest.mark.parametrize(
        "payload", [{"name": ""}, {"name": "   "}, {}, {"name": "x" * 256}]
    )
    def test_invalid_name_returns_400(self, api_client, payload):
        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert data["errors"][0]["attr"] == "name"
        assert Category.objects.count() == 0

    def test_non_object_body_returns_400(self, api_client):
        response = api_client.post(URL, '["Books"]', content_type="application/json")
        assert response.status_code == 400


# ===========================================================================
# Read
# ===========================================================================


class TestReadCategory:
    def test_list(self, api_client, make_category):
        make_category(name="Books")
        make_category(name="Audio")

        response = api_client.get(URL)

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Audio", "Books"]

    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_retrieve(self, api_client, make_category):
        category = make_category()
        response = api_client.get(_detail_url(category.id))
        assert response.status_code == 200
        assert response.json()["id"] == str(category.id)

    def test_retrieve_unknown_returns_404(self, api_client):
        response = api_client.get(_detail_url(uuid6.uuid7()))
        assert response.status_code == 404
        assert response.json()["type"] == "client_error"

    def test_retrieve_malformed_id_returns_404(self, api_client):
        response = api_client.get(_detail_url("not-a-uuid"))
        assert response.status_code == 404


# ===========================================================================
# Update
# ===========================================================================


class TestUpdateCategory:
    def test_patch_changes_only_supplied_fields(self, api_client, make_category):
        category = make_category(name="Books", description="Old")

        response = api_client.patch(
            _detail_url(category.id), {"description": "New"}, format="json"
        )

        assert response.status_code == 200
        category.refresh_from_db()
        assert category.name == "Books"
        assert category.description == "New"

    def test_patch_refreshes_updated_at(self, api_client):
        with freeze_time("2026-04-05 06:00:00") as frozen:
            category = Category.objects.create(name="Books")
            frozen.tick(timedelta(minutes=1))
            response = api_client.patch(
                _detail_url(category.id), {"name": "Comics"}, format="json"
            )
        data = response.json()
        assert data["created_at"] == "2026-04-05T06:00:00Z"
        assert data["updated_at"] == "2026-04-05T06:01:00Z"

    def test_empty_patch_is_noop(self, api_client):
        with freeze_time("2026-04-05 06:00:00") as frozen:
            category = Category.objects.create(name="Books")
            frozen.tick(timedelta(minutes=1))
            response = api_client.patch(_detail_url(category.id), {}, format="json")
        assert response.status_code == 200
        assert response.json()["updated_at"] == "2026-04-05T06:00:00Z"

    def test_empty_name_returns_400(self, api_client, make_category):
        category = make_category(name="Books")
        response = api_client.patch(_detail_url(category.id), {"name": ""}, format="json")
        assert response.status_code == 400
        category.refresh_from_db()
        assert category.name == "Books"

    def test_null_name_returns_400(self, api_client, make_category):
        category = make_category()
        response = api_client.patch(_detail_url(category.id), {"name": None}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "name"

    def test_unknown_returns_404(self, api_client):
        response = api_client.patch(_detail_url(uuid6.uuid7()), {"name": "X"}, format="json")
        assert response.status_code == 404

    def test_put_not_allowed(self, api_client, make_category):
        category = make_category()
        response = api_client.put(_detail_url(category.id), {"name": "X"}, format="json")
        assert response.status_code == 405


# ===========================================================================
# Delete
# ===========================================================================


class TestDeleteCategory:
    def test_delete_returns_204(self, api_client, make_category):
        category = make_category()
        response = api_client.delete(_detail_url(category.id))
        assert response.status_code == 204
        assert not Category.objects.filter(pk=category.pk).exists()

    def test_delete_twice_returns_404(self, api_client, make_category):
        category = make_category()
        api_client.delete(_detail_url(category.id))
        response = api_client.delete(_detail_url(category.id))
        assert response.status_code == 404

    def test_delete_cascades_to_products(self, api_client, make_category, make_product):
        category = make_category()
        for name in ("A", "B", "C"):
            make_product(category=category, name=name)

        api_client.delete(_detail_url(category.id))

        assert Product.objects.count() == 0
        assert api_client.get("/api/v1/products/").json() == []
