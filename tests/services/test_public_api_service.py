"""Tests for the public v1 API service"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, Mock

from app.core.errors import ErrorResponse
from app.services.public_api import PublicApiService, to_iso, transform_cell, transform_chart


@pytest.fixture
def resolver(sample_refs):
    resolver = AsyncMock()
    resolver.resolve.return_value = sample_refs
    return resolver


@pytest.fixture
def service(chart_repo, category_repo, subcategory_repo, label_repo, resolver):
    chart_repo.build_filter_query = Mock(return_value={"is_published": True})
    return PublicApiService(chart_repo, category_repo, subcategory_repo, label_repo, resolver)


class TestTransform:
    def test_to_iso(self):
        assert to_iso(None) is None
        assert to_iso(datetime(2024, 1, 15, 12, 0)) == "2024-01-15T12:00:00Z"

    def test_chart_shape(self, sample_chart, sample_refs):
        chart = transform_chart(sample_chart, sample_refs)

        assert chart["isPublished"] is True
        assert chart["categories"] == [{
            "category": "mens", "categoryName": "Men's", "subcategory": "tops", "subcategoryName": "Tops",
        }]
        assert chart["measurementInstructions"][0]["key"] == "chest"
        assert [c["name"] for c in chart["columns"]] == ["Size", "Chest", "Fit"]
        assert chart["meta"]["createdAt"] == "2024-01-15T12:00:00Z"

    def test_cells_follow_column_order(self, sample_chart, sample_refs):
        rows = transform_chart(sample_chart, sample_refs)["rows"]

        first = rows[0]["cells"]
        assert first[0] == {"columnId": "col-size", "type": "label", "key": "SIZE_SM", "value": "SM", "labelType": "ALPHA_SIZE"}
        assert first[1] == {
            "columnId": "col-chest", "type": "range",
            "inches": {"min": 34.0, "max": 36.0}, "cm": {"min": 86.4, "max": 91.4},
        }
        assert first[2] == {"columnId": "col-fit", "type": "text", "value": "Regular"}

        second = rows[1]["cells"]
        assert second[0]["type"] == "text"
        assert second[1] == {"columnId": "col-chest", "type": "single", "inches": 38.5, "cm": 97.8}
        # Missing cell still occupies its column
        assert second[2] == {"columnId": "col-fit", "value": None}

    def test_label_cell_with_unknown_label_falls_back_to_text(self, sample_refs):
        column = {"id": "c", "column_type": "SIZE_LABEL"}
        cell = {"column_id": "c", "label_id": "gone", "value_text": None}

        assert transform_cell(column, cell, sample_refs) == {"columnId": "c", "type": "text", "value": None}


class TestCharts:
    @pytest.mark.asyncio
    async def test_unpublished_chart_hidden(self, service, chart_repo, sample_chart):
        chart_repo.find_by_slug.return_value = {**sample_chart, "is_published": False}

        with pytest.raises(ErrorResponse) as exc_info:
            await service.get_chart_by_slug("mens-tops")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_unpublished_chart_on_request(self, service, chart_repo, sample_chart):
        chart_repo.find_by_id.return_value = {**sample_chart, "is_published": False}

        chart = await service.get_chart_by_id("chart1", include_unpublished=True)

        assert chart["isPublished"] is False

    @pytest.mark.asyncio
    async def test_unknown_category_yields_empty_list(self, service, chart_repo, category_repo):
        category_repo.find_by_slug.return_value = None

        assert await service.list_charts(category="nope") == []
        chart_repo.find_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_category_and_subcategory_filter(self, service, chart_repo, category_repo, subcategory_repo, sample_chart):
        category_repo.find_by_slug.return_value = {"id": "cat1"}
        subcategory_repo.find_by_slug.return_value = {"id": "sub1"}
        chart_repo.find_many.return_value = [sample_chart]

        charts = await service.list_charts(category="mens", subcategory="tops")

        subcategory_repo.find_by_slug.assert_awaited_once_with("cat1", "tops")
        chart_repo.build_filter_query.assert_called_once_with(subcategory_ids=["sub1"], is_published=True)
        assert charts[0]["slug"] == "mens-tops"

    @pytest.mark.asyncio
    async def test_subcategory_alone_matches_every_category(self, service, chart_repo, subcategory_repo):
        subcategory_repo.find_all_by_slug.return_value = [{"id": "sub1"}, {"id": "sub7"}]
        chart_repo.find_many.return_value = []

        await service.list_charts(subcategory="tops", include_unpublished=True)

        chart_repo.build_filter_query.assert_called_once_with(subcategory_ids=["sub1", "sub7"], is_published=None)


class TestCategoriesAndLabels:
    @pytest.mark.asyncio
    async def test_categories_only_list_subcategories_with_published_charts(
        self, service, chart_repo, category_repo, subcategory_repo
    ):
        category_repo.list_ordered.return_value = [
            {"id": "cat1", "slug": "mens", "name": "Men's"},
            {"id": "cat2", "slug": "womens", "name": "Women's"},
        ]
        subcategory_repo.list_ordered.return_value = [
            {"id": "sub1", "category_id": "cat1", "slug": "tops", "name": "Tops"},
            {"id": "sub2", "category_id": "cat1", "slug": "socks", "name": "Socks"},
        ]
        chart_repo.chart_counts_by_subcategory.return_value = {"sub1": 1}

        categories = await service.list_categories()

        chart_repo.chart_counts_by_subcategory.assert_awaited_once_with(published_only=True)
        assert categories == [
            {"slug": "mens", "name": "Men's", "subcategories": [{"slug": "tops", "name": "Tops", "chartCount": 1}]},
            {"slug": "womens", "name": "Women's", "subcategories": []},
        ]

    @pytest.mark.asyncio
    async def test_labels_grouped_by_type(self, service, label_repo):
        label_repo.list_filtered.return_value = [
            {"key": "SIZE_XS", "display_value": "XS", "label_type": "ALPHA_SIZE", "sort_order": 2},
            {"key": "SIZE_SM", "display_value": "SM", "label_type": "ALPHA_SIZE", "sort_order": 3},
            {"key": "CUP_A", "display_value": "A", "label_type": "CUP_SIZE", "sort_order": 0, "description": None},
        ]

        grouped = await service.list_labels()

        assert list(grouped) == ["ALPHA_SIZE", "CUP_SIZE"]
        assert grouped["ALPHA_SIZE"][1] == {"key": "SIZE_SM", "value": "SM", "sortOrder": 3, "description": None}
