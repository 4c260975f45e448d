"""
Tests for the admin size chart endpoints
"""

from app.core.config import config
from app.core.errors import ErrorResponse
from app.services.import_export import ExportFile


class TestSizeChartCrud:
    """CRUD routes delegate to SizeChartService"""

    def test_list_passes_filters(self, client, size_chart_service):
        size_chart_service.list_charts.return_value = {
            "data": [],
            "pagination": {"page": 2, "limit": 10, "total": 0, "total_pages": 0},
        }

        response = client.get("/api/size-charts", params={"search": "tops", "page": 2, "limit": 10})

        assert response.status_code == 200
        filters = size_chart_service.list_charts.call_args[0][0]
        assert filters.search == "tops"
        assert filters.page == 2
        assert filters.limit == 10

    def test_list_rejects_large_limit(self, client, size_chart_service):
        response = client.get("/api/size-charts", params={"limit": 500})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    def test_create(self, client, size_chart_service):
        size_chart_service.create_chart.return_value = {"id": "chart1", "slug": "mens-tops"}

        response = client.post(
            "/api/size-charts",
            json={
                "name": "Men's Tops",
                "subcategory_ids": ["sub1"],
                "columns": [{"name": "Chest", "column_type": "MEASUREMENT"}],
            },
        )

        assert response.status_code == 201
        assert response.json()["id"] == "chart1"

    def test_create_requires_subcategory(self, client, size_chart_service):
        response = client.post(
            "/api/size-charts",
            json={"name": "Men's Tops", "subcategory_ids": [], "columns": [{"name": "Chest", "column_type": "MEASUREMENT"}]},
        )

        assert response.status_code == 400
        size_chart_service.create_chart.assert_not_called()

    def test_create_slug_conflict(self, client, size_chart_service):
        size_chart_service.create_chart.side_effect = ErrorResponse("A size chart with this slug already exists", status_code=409)

        response = client.post(
            "/api/size-charts",
            json={"name": "Tops", "subcategory_ids": ["sub1"], "columns": [{"name": "Size", "column_type": "TEXT"}]},
        )

        assert response.status_code == 409
        assert response.json() == {"error": "A size chart with this slug already exists"}

    def test_get_not_found(self, client, size_chart_service):
        size_chart_service.get_chart.side_effect = ErrorResponse("Size chart not found", status_code=404)

        response = client.get("/api/size-charts/missing")

        assert response.status_code == 404

    def test_delete(self, client, size_chart_service):
        size_chart_service.delete_chart.return_value = {"success": True}

        response = client.delete("/api/size-charts/chart1")

        assert response.status_code == 200
        size_chart_service.delete_chart.assert_awaited_once_with("chart1")

    def test_bulk_publish(self, client, size_chart_service):
        size_chart_service.bulk_operation.return_value = {"success": True, "operation": "publish", "affected": 2}

        response = client.post("/api/size-charts/bulk", json={"operation": "publish", "ids": ["a", "b"]})

        assert response.status_code == 200
        assert response.json()["affected"] == 2

    def test_bulk_unknown_operation(self, client, size_chart_service):
        response = client.post("/api/size-charts/bulk", json={"operation": "archive", "ids": ["a"]})

        assert response.status_code == 400

    def test_duplicate(self, client, size_chart_service):
        size_chart_service.duplicate_chart.return_value = {"id": "chart2", "slug": "mens-tops-copy"}

        response = client.post("/api/size-charts/duplicate", json={"id": "chart1"})

        assert response.status_code == 201
        assert response.json()["slug"] == "mens-tops-copy"


class TestStorefrontPreview:
    """Published chart lookup by slugs and the category navigation tree"""

    def test_published_chart_by_slugs(self, client, size_chart_service):
        size_chart_service.get_published_chart.return_value = {
            "id": "chart1",
            "slug": "mens-tops",
            "subcategory": {"id": "sub1", "slug": "tops", "category": {"id": "cat1", "slug": "mens"}},
        }

        response = client.get(
            "/api/size-charts/public",
            params={"category": "mens", "subcategory": "tops", "chart": "mens-tops"},
        )

        assert response.status_code == 200
        assert response.json()["subcategory"]["slug"] == "tops"
        size_chart_service.get_published_chart.assert_awaited_once_with("mens", "tops", "mens-tops")
        size_chart_service.get_chart.assert_not_called()

    def test_published_chart_missing_params(self, client, size_chart_service):
        size_chart_service.get_published_chart.side_effect = ErrorResponse(
            "Missing required parameters: category, subcategory, chart", status_code=400
        )

        response = client.get("/api/size-charts/public", params={"category": "mens"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters: category, subcategory, chart"}
        size_chart_service.get_published_chart.assert_awaited_once_with("mens", None, None)

    def test_published_chart_not_found(self, client, size_chart_service):
        size_chart_service.get_published_chart.side_effect = ErrorResponse("Size chart not found", status_code=404)

        response = client.get(
            "/api/size-charts/public",
            params={"category": "mens", "subcategory": "tops", "chart": "draft"},
        )

        assert response.status_code == 404

    def test_categories_tree(self, client, category_service):
        category_service.navigation_tree.return_value = [
            {"id": "cat1", "slug": "mens", "subcategories": [{"id": "sub1", "slug": "tops", "chart_count": 1}]},
        ]

        response = client.get("/api/size-charts/categories")

        assert response.status_code == 200
        assert response.json()[0]["subcategories"][0]["chart_count"] == 1
        category_service.navigation_tree.assert_awaited_once_with(False)

    def test_categories_tree_with_charts(self, client, category_service):
        category_service.navigation_tree.return_value = [
            {"id": "cat1", "slug": "mens", "subcategories": [{
                "id": "sub1",
                "slug": "tops",
                "chart_count": 1,
                "size_charts": [{"id": "chart1", "name": "Men's Tops", "slug": "mens-tops", "is_published": True}],
            }]},
        ]

        response = client.get("/api/size-charts/categories", params={"includeCharts": "true"})

        assert response.status_code == 200
        assert response.json()[0]["subcategories"][0]["size_charts"][0]["slug"] == "mens-tops"
        category_service.navigation_tree.assert_awaited_once_with(True)

    def test_requires_admin(self, client, category_service):
        config.admin_username = "admin"
        config.admin_password = "secret"

        response = client.get("/api/size-charts/categories")

        assert response.status_code == 401
        category_service.navigation_tree.assert_not_called()


class TestImportExport:
    """Import and export routes"""

    def test_export_json_download(self, client, import_export_service):
        import_export_service.export_charts.return_value = ExportFile(
            '{"charts": []}', "application/json", "size-charts-2024-01-15.json"
        )

        response = client.get("/api/size-charts/export")

        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="size-charts-2024-01-15.json"'
        assert response.json() == {"charts": []}
        import_export_service.export_charts.assert_awaited_once_with(
            chart_id=None, category=None, subcategory=None, export_format="json"
        )

    def test_export_xlsx_bytes(self, client, import_export_service):
        import_export_service.export_charts.return_value = ExportFile(
            b"PK\x03\x04", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "size-charts-2024-01-15.xlsx"
        )

        response = client.get("/api/size-charts/export", params={"format": "xlsx", "category": "mens"})

        assert response.status_code == 200
        assert response.content == b"PK\x03\x04"
        assert import_export_service.export_charts.call_args.kwargs["category"] == "mens"

    def test_export_unknown_format(self, client, import_export_service):
        response = client.get("/api/size-charts/export", params={"format": "pdf"})

        assert response.status_code == 400
        import_export_service.export_charts.assert_not_called()

    def test_import_default_mode(self, client, import_export_service):
        import_export_service.import_charts.return_value = {
            "success": True,
            "summary": {"created": 1, "updated": 0, "skipped": 0, "errors": 0},
            "results": [{"slug": "mens-tops", "status": "created"}],
        }
        payload = {"charts": [{"name": "Men's Tops"}]}

        response = client.post("/api/size-charts/import", json=payload)

        assert response.status_code == 200
        assert response.json()["summary"]["created"] == 1
        import_export_service.import_charts.assert_awaited_once_with(payload, "create")

    def test_import_invalid_mode(self, client, import_export_service):
        response = client.post("/api/size-charts/import", params={"mode": "merge"}, json={"charts": []})

        assert response.status_code == 400
        import_export_service.import_charts.assert_not_called()
