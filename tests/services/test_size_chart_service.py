"""Tests for SizeChartService"""
import pytest
from unittest.mock import AsyncMock, Mock

from app.core.errors import ErrorResponse
from app.schemas.size_chart import (
    BulkOperation,
    DuplicateSizeChart,
    SizeChartCreate,
    SizeChartFilters,
    SizeChartUpdate,
)
from app.services.chart_resolver import ChartReferences
from app.services.size_chart import SizeChartService, chart_graph, chart_summary


@pytest.fixture
def resolver():
    resolver = AsyncMock()
    resolver.resolve.return_value = ChartReferences()
    return resolver


@pytest.fixture
def service(chart_repo, subcategory_repo, label_repo, instruction_repo, resolver):
    chart_repo.insert.side_effect = lambda doc: {"id": "new-chart", **doc}
    chart_repo.slug_exists.return_value = False
    subcategory_repo.find_by_ids.side_effect = lambda ids: [{"id": i} for i in ids]
    instruction_repo.find_by_ids.side_effect = lambda ids: [{"id": i} for i in ids]
    label_repo.find_by_ids.side_effect = lambda ids: [{"id": i} for i in ids]
    return SizeChartService(chart_repo, subcategory_repo, label_repo, instruction_repo, resolver)


def create_payload(**overrides):
    payload = {
        "name": "Men's Tops",
        "subcategory_ids": ["sub1"],
        "columns": [
            {"name": "Size", "column_type": "SIZE_LABEL", "label_type": "ALPHA_SIZE"},
            {"name": "Chest", "column_type": "MEASUREMENT"},
        ],
        "rows": [
            {"cells": [
                {"column_index": 0, "label_id": "label-sm"},
                {"column_index": 1, "value_min_inches": 34, "value_max_inches": 36, "value_min_cm": 1},
            ]},
        ],
    }
    payload.update(overrides)
    return SizeChartCreate(**payload)


class TestChartViews:
    def test_graph_resolves_references(self, sample_chart, sample_refs):
        graph = chart_graph(sample_chart, sample_refs)

        assert graph["subcategories"][0]["subcategory"]["category"]["slug"] == "mens"
        assert graph["measurement_instructions"][0]["instruction"]["key"] == "chest"
        assert graph["rows"][0]["cells"][0]["label"]["display_value"] == "SM"
        assert graph["rows"][1]["cells"][0]["label"] is None

    def test_summary_counts(self, sample_chart, sample_refs):
        summary = chart_summary(sample_chart, sample_refs)

        assert summary["column_count"] == 3
        assert summary["row_count"] == 2
        assert summary["subcategories"][0]["slug"] == "tops"


class TestListCharts:
    @pytest.mark.asyncio
    async def test_category_filter_expands_to_subcategories(self, service, chart_repo, subcategory_repo):
        subcategory_repo.find_by_category.return_value = [{"id": "sub1"}, {"id": "sub2"}]
        chart_repo.build_filter_query = Mock(return_value={"q": 1})
        chart_repo.search.return_value = ([], 41)

        result = await service.list_charts(SizeChartFilters(category_id="cat1", limit=20))

        chart_repo.build_filter_query.assert_called_once_with(
            subcategory_ids=["sub1", "sub2"], search=None, is_published=None
        )
        assert result["pagination"] == {"page": 1, "limit": 20, "total": 41, "total_pages": 3}

    @pytest.mark.asyncio
    async def test_subcategory_outside_category_matches_nothing(self, service, chart_repo, subcategory_repo):
        subcategory_repo.find_by_category.return_value = [{"id": "sub1"}]
        chart_repo.build_filter_query = Mock(return_value={})
        chart_repo.search.return_value = ([], 0)

        await service.list_charts(SizeChartFilters(category_id="cat1", subcategory_id="sub9"))

        assert chart_repo.build_filter_query.call_args.kwargs["subcategory_ids"] == []


class TestGetPublishedChart:
    @pytest.mark.asyncio
    async def test_returns_graph_with_matching_subcategory(self, service, chart_repo, resolver, sample_chart, sample_refs):
        chart_repo.find_by_slug.return_value = sample_chart
        resolver.resolve.return_value = sample_refs

        chart = await service.get_published_chart("mens", "tops", "mens-tops")

        chart_repo.find_by_slug.assert_awaited_once_with("mens-tops")
        assert chart["id"] == "chart1"
        assert chart["subcategory"]["slug"] == "tops"
        assert chart["subcategory"]["category"]["slug"] == "mens"
        assert chart["rows"][0]["cells"][0]["label"]["display_value"] == "SM"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slugs", [(None, "tops", "mens-tops"), ("mens", "", "mens-tops"), ("mens", "tops", None)])
    async def test_all_slugs_required(self, service, chart_repo, slugs):
        with pytest.raises(ErrorResponse) as exc_info:
            await service.get_published_chart(*slugs)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Missing required parameters: category, subcategory, chart"
        chart_repo.find_by_slug.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unpublished_chart_not_found(self, service, chart_repo, sample_chart):
        chart_repo.find_by_slug.return_value = {**sample_chart, "is_published": False}

        with pytest.raises(ErrorResponse) as exc_info:
            await service.get_published_chart("mens", "tops", "mens-tops")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_slug_not_found(self, service, chart_repo):
        chart_repo.find_by_slug.return_value = None

        with pytest.raises(ErrorResponse) as exc_info:
            await service.get_published_chart("mens", "tops", "missing")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category, subcategory", [("womens", "tops"), ("mens", "bottoms")])
    async def test_chart_outside_requested_subcategory(
        self, service, chart_repo, resolver, sample_chart, sample_refs, category, subcategory
    ):
        chart_repo.find_by_slug.return_value = sample_chart
        resolver.resolve.return_value = sample_refs

        with pytest.raises(ErrorResponse) as exc_info:
            await service.get_published_chart(category, subcategory, "mens-tops")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Size chart not found"


class TestCreateChart:
    @pytest.mark.asyncio
    async def test_create_derives_cm_and_slug(self, service, chart_repo):
        await service.create_chart(create_payload())

        stored = chart_repo.insert.await_args.args[0]
        assert stored["slug"] == "mens-tops"
        assert stored["subcategories"] == [{"subcategory_id": "sub1", "display_order": 0}]
        size_column, chest_column = stored["columns"]
        cells = stored["rows"][0]["cells"]
        assert cells[0]["column_id"] == size_column["id"]
        assert cells[0]["label_id"] == "label-sm"
        assert cells[1]["column_id"] == chest_column["id"]
        # Client supplied cm is ignored
        assert cells[1]["value_min_cm"] == 86.4
        assert cells[1]["value_max_cm"] == 91.4

    @pytest.mark.asyncio
    async def test_slug_conflict(self, service, chart_repo):
        chart_repo.slug_exists.return_value = True

        with pytest.raises(ErrorResponse) as exc_info:
            await service.create_chart(create_payload())

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_unknown_subcategory(self, service, subcategory_repo):
        subcategory_repo.find_by_ids.side_effect = None
        subcategory_repo.find_by_ids.return_value = []

        with pytest.raises(ErrorResponse) as exc_info:
            await service.create_chart(create_payload())

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_label(self, service, label_repo):
        label_repo.find_by_ids.side_effect = None
        label_repo.find_by_ids.return_value = []

        with pytest.raises(ErrorResponse) as exc_info:
            await service.create_chart(create_payload())

        assert exc_info.value.message == "One or more labels not found"

    @pytest.mark.asyncio
    async def test_cell_with_bad_column_index(self, service):
        payload = create_payload(rows=[{"cells": [{"column_index": 5, "value_text": "x"}]}])

        with pytest.raises(ErrorResponse) as exc_info:
            await service.create_chart(payload)

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_one_cell_per_column(self, service, chart_repo):
        payload = create_payload(rows=[{"cells": [
            {"column_index": 1, "value_inches": 34},
            {"column_index": 1, "value_inches": 35},
        ]}])

        await service.create_chart(payload)

        cells = chart_repo.insert.await_args.args[0]["rows"][0]["cells"]
        assert len(cells) == 1
        assert cells[0]["value_inches"] == 35


class TestUpdateChart:
    @pytest.mark.asyncio
    async def test_not_found(self, service, chart_repo):
        chart_repo.find_by_id.return_value = None

        with pytest.raises(ErrorResponse) as exc_info:
            await service.update_chart("missing", SizeChartUpdate(name="X"))

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_demo_slug_locked(self, service, chart_repo, sample_chart, demo_mode):
        chart_repo.find_by_id.return_value = sample_chart

        with pytest.raises(ErrorResponse) as exc_info:
            await service.update_chart("chart1", SizeChartUpdate(slug="mens-shirts"))

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_removing_column_drops_its_cells(self, service, chart_repo, sample_chart):
        chart_repo.find_by_id.return_value = sample_chart
        chart_repo.update_by_id.return_value = sample_chart

        await service.update_chart("chart1", SizeChartUpdate(columns=[
            {"id": "col-size", "name": "Size", "column_type": "SIZE_LABEL"},
            {"id": "col-chest", "name": "Chest", "column_type": "MEASUREMENT"},
        ]))

        fields = chart_repo.update_by_id.await_args.args[1]
        assert [c["id"] for c in fields["columns"]] == ["col-size", "col-chest"]
        remaining = {cell["column_id"] for row in fields["rows"] for cell in row["cells"]}
        assert "col-fit" not in remaining

    @pytest.mark.asyncio
    async def test_rows_replaced_keep_known_ids(self, service, chart_repo, sample_chart):
        chart_repo.find_by_id.return_value = sample_chart
        chart_repo.update_by_id.return_value = sample_chart

        await service.update_chart("chart1", SizeChartUpdate(rows=[
            {"id": "row1", "cells": [{"column_id": "col-chest", "value_inches": 40}]},
            {"id": "not-a-row", "cells": []},
        ]))

        rows = chart_repo.update_by_id.await_args.args[1]["rows"]
        assert rows[0]["id"] == "row1"
        assert rows[0]["cells"][0]["value_cm"] == 101.6
        assert rows[1]["id"] != "not-a-row"

    @pytest.mark.asyncio
    async def test_description_can_be_cleared(self, service, chart_repo, sample_chart):
        chart_repo.find_by_id.return_value = sample_chart
        chart_repo.update_by_id.return_value = sample_chart

        await service.update_chart("chart1", SizeChartUpdate(description=None))

        assert chart_repo.update_by_id.await_args.args[1] == {"description": None}


class TestDuplicateAndBulk:
    @pytest.mark.asyncio
    async def test_duplicate_remaps_ids(self, service, chart_repo, sample_chart):
        chart_repo.find_by_id.return_value = sample_chart
        chart_repo.slug_exists.side_effect = [True, False]

        await service.duplicate_chart(DuplicateSizeChart(id="chart1"))

        copy = chart_repo.insert.await_args.args[0]
        assert copy["name"] == "Men's Tops (Copy)"
        assert copy["slug"] == "mens-tops-copy-1"
        assert copy["is_published"] is False
        column_ids = {c["id"] for c in copy["columns"]}
        assert column_ids.isdisjoint({"col-size", "col-chest", "col-fit"})
        for row in copy["rows"]:
            for cell in row["cells"]:
                assert cell["column_id"] in column_ids
        assert copy["rows"][0]["cells"][0]["label_id"] == "label-sm"

    @pytest.mark.asyncio
    async def test_duplicate_missing(self, service, chart_repo):
        chart_repo.find_by_id.return_value = None

        with pytest.raises(ErrorResponse):
            await service.duplicate_chart(DuplicateSizeChart(id="missing"))

    @pytest.mark.asyncio
    async def test_bulk_publish(self, service, chart_repo):
        chart_repo.set_published.return_value = 2

        result = await service.bulk_operation(BulkOperation(operation="publish", ids=["a", "b"]))

        chart_repo.set_published.assert_awaited_once_with(["a", "b"], True)
        assert result == {"success": True, "operation": "publish", "affected": 2}

    @pytest.mark.asyncio
    async def test_bulk_delete(self, service, chart_repo):
        chart_repo.delete_many_by_ids.return_value = 1

        result = await service.bulk_operation(BulkOperation(operation="delete", ids=["a"]))

        assert result["affected"] == 1
