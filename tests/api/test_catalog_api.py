"""
Tests for templates, categories, API keys and health endpoints
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from app.core.errors import ErrorResponse


class TestTemplatesApi:
    """Template catalog routes"""

    def test_list_all(self, client):
        body = client.get("/api/templates").json()

        assert len(body["templates"]) == 17
        assert "category_counts" not in body

    def test_list_by_category_with_counts(self, client):
        body = client.get("/api/templates", params={"category": "footwear", "include_counts": "true"}).json()

        assert {t["category"] for t in body["templates"]} == {"footwear"}
        assert body["category_counts"]["footwear"] == 3

    def test_list_unknown_category(self, client):
        response = client.get("/api/templates", params={"category": "hats"})

        assert response.status_code == 400

    def test_get_template(self, client):
        response = client.get("/api/templates/footwear-mens")

        assert response.status_code == 200
        assert response.json()["id"] == "footwear-mens"

    def test_get_unknown_template(self, client):
        response = client.get("/api/templates/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Template not found"}

    def test_apply(self, client, template_service):
        template_service.apply_template.return_value = {"id": "chart1", "slug": "mens-shoes"}

        response = client.post(
            "/api/templates/footwear-mens/apply",
            json={"subcategory_ids": ["sub1"], "slug": "mens-shoes"},
        )

        assert response.status_code == 201
        template_id, data = template_service.apply_template.call_args[0]
        assert template_id == "footwear-mens"
        assert data.slug == "mens-shoes"

    def test_apply_requires_subcategories(self, client, template_service):
        response = client.post("/api/templates/footwear-mens/apply", json={"subcategory_ids": []})

        assert response.status_code == 400
        template_service.apply_template.assert_not_called()

    def test_apply_rejects_malformed_slug(self, client, template_service):
        response = client.post(
            "/api/templates/footwear-mens/apply",
            json={"subcategory_ids": ["sub1"], "slug": "Mens Shoes"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"
        template_service.apply_template.assert_not_called()

    def test_list_by_tags(self, client):
        body = client.get("/api/templates", params={"tags": "gloves, socks", "include_tags": "true"}).json()

        assert {t["id"] for t in body["templates"]} == {"accessories-gloves", "accessories-socks"}
        assert "gloves" in body["tags"]


class TestCategoriesApi:
    """Category and subcategory routes"""

    def test_delete_category_in_use(self, client, category_service):
        category_service.delete_category.side_effect = ErrorResponse(
            "Cannot delete category with subcategories", status_code=409
        )

        response = client.delete("/api/categories/cat1")

        assert response.status_code == 409

    def test_delete_subcategory(self, client, category_service):
        response = client.delete("/api/categories/subcategories/sub1")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        category_service.delete_subcategory.assert_awaited_once_with("sub1")

    def test_create_category_validation(self, client, category_service):
        response = client.post("/api/categories", json={"name": ""})

        assert response.status_code == 400
        assert "details" in response.json()


class TestApiKeysApi:
    """API key management routes"""

    def test_create_returns_raw_key(self, client, api_key_service):
        now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        api_key_service.create_key.return_value = {
            "id": "key1",
            "name": "Storefront",
            "key": "sc_live_abcdef",
            "key_prefix": "sc_live_abcd",
            "scopes": ["read:size-charts"],
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }

        response = client.post("/api/api-keys", json={"name": "Storefront", "scopes": ["read:size-charts"]})

        assert response.status_code == 201
        body = response.json()
        assert body["key"] == "sc_live_abcdef"
        assert "won't be shown again" in body["message"]

    def test_create_rejects_unknown_scope(self, client, api_key_service):
        response = client.post("/api/api-keys", json={"name": "Storefront", "scopes": ["write:everything"]})

        assert response.status_code == 400
        api_key_service.create_key.assert_not_called()

    def test_list_hides_secret(self, client, api_key_service):
        api_key_service.list_keys.return_value = [{
            "id": "key1",
            "name": "Storefront",
            "key_hash": "deadbeef",
            "key_prefix": "sc_live_abcd",
            "scopes": [],
            "is_active": True,
        }]

        body = client.get("/api/api-keys").json()

        assert body[0]["key_prefix"] == "sc_live_abcd"
        assert "key_hash" not in body[0]


class TestHealthApi:
    """Health and readiness endpoints"""

    def test_health(self, client):
        body = client.get("/api/health").json()

        assert body["status"] == "healthy"

    def test_liveness(self, client):
        response = client.get("/api/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readiness_ok_when_catalog_empty(self, client):
        checks = [
            {"name": "database", "status": "healthy"},
            {"name": "catalog", "status": "degraded", "size_charts": 0},
        ]
        with patch("app.api.health.perform_health_checks", AsyncMock(return_value=checks)):
            response = client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_readiness_fails_without_database(self, client):
        checks = [
            {"name": "database", "status": "unhealthy", "error": "Could not connect to MongoDB"},
            {"name": "catalog", "status": "unhealthy", "error": "Could not connect to MongoDB"},
        ]
        with patch("app.api.health.perform_health_checks", AsyncMock(return_value=checks)):
            response = client.get("/api/health/ready")

        assert response.status_code == 503
        assert response.json()["errors"][0] == "database: Could not connect to MongoDB"
