"""
Public v1 API service.

Builds the published, camelCase view of charts, categories and labels that
storefronts and the embed widget consume.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from app.core.errors import ErrorResponse
from app.models.size_chart import ColumnType
from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import SizeLabelRepository
from app.services.chart_resolver import (
    ChartReferenceResolver,
    ChartReferences,
    sorted_columns,
    sorted_links,
    sorted_rows,
)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def transform_cell(column: Dict[str, Any], cell: Optional[Dict[str, Any]], refs: ChartReferences) -> Dict[str, Any]:
    """
    Public representation of one cell. Measurement columns always carry
    both units; label cells carry the label key and display value.
    """
    column_id = column["id"]
    if cell is None:
        return {"columnId": column_id, "value": None}

    if column.get("column_type") == ColumnType.MEASUREMENT.value:
        if cell.get("value_min_inches") is not None or cell.get("value_max_inches") is not None:
            return {
                "columnId": column_id,
                "type": "range",
                "inches": {"min": cell.get("value_min_inches"), "max": cell.get("value_max_inches")},
                "cm": {"min": cell.get("value_min_cm"), "max": cell.get("value_max_cm")},
            }
        return {
            "columnId": column_id,
            "type": "single",
            "inches": cell.get("value_inches"),
            "cm": cell.get("value_cm"),
        }

    label = refs.labels.get(cell.get("label_id")) if cell.get("label_id") else None
    if label:
        return {
            "columnId": column_id,
            "type": "label",
            "key": label["key"],
            "value": label["display_value"],
            "labelType": label["label_type"],
        }

    return {"columnId": column_id, "type": "text", "value": cell.get("value_text")}


def transform_chart(chart: Dict[str, Any], refs: ChartReferences) -> Dict[str, Any]:
    """Public representation of a chart; cells follow column order"""
    columns = sorted_columns(chart)

    categories = []
    for link in sorted_links(chart.get("subcategories", [])):
        subcategory = refs.subcategories.get(link["subcategory_id"])
        if not subcategory:
            continue
        category = refs.category_for(subcategory)
        categories.append({
            "category": category.get("slug"),
            "categoryName": category.get("name"),
            "subcategory": subcategory["slug"],
            "subcategoryName": subcategory["name"],
        })

    instructions = []
    for link in sorted_links(chart.get("measurement_instructions", [])):
        instruction = refs.instructions.get(link["instruction_id"])
        if instruction:
            instructions.append({
                "key": instruction["key"],
                "name": instruction["name"],
                "instruction": instruction["instruction"],
            })

    rows = []
    for row in sorted_rows(chart):
        cells_by_column = {cell["column_id"]: cell for cell in row.get("cells", [])}
        rows.append({
            "id": row["id"],
            "cells": [transform_cell(column, cells_by_column.get(column["id"]), refs) for column in columns],
        })

    return {
        "id": chart["id"],
        "name": chart["name"],
        "slug": chart["slug"],
        "description": chart.get("description"),
        "isPublished": chart.get("is_published", False),
        "categories": categories,
        "measurementInstructions": instructions,
        "columns": [{"id": c["id"], "name": c["name"], "type": c["column_type"]} for c in columns],
        "rows": rows,
        "meta": {
            "createdAt": to_iso(chart.get("created_at")),
            "updatedAt": to_iso(chart.get("updated_at")),
        },
    }


class PublicApiService:
    """Read-only queries behind /api/v1"""

    def __init__(
        self,
        chart_repo: SizeChartRepository,
        category_repo: CategoryRepository,
        subcategory_repo: SubcategoryRepository,
        label_repo: SizeLabelRepository,
        resolver: ChartReferenceResolver,
    ):
        self.chart_repo = chart_repo
        self.category_repo = category_repo
        self.subcategory_repo = subcategory_repo
        self.label_repo = label_repo
        self.resolver = resolver

    async def _single(self, chart: Optional[Dict[str, Any]], include_unpublished: bool) -> Dict[str, Any]:
        if not chart or (not include_unpublished and not chart.get("is_published")):
            raise ErrorResponse("Size chart not found", status_code=404)
        refs = await self.resolver.resolve([chart])
        return transform_chart(chart, refs)

    async def get_chart_by_id(self, chart_id: str, include_unpublished: bool = False) -> Dict[str, Any]:
        return await self._single(await self.chart_repo.find_by_id(chart_id), include_unpublished)

    async def get_chart_by_slug(self, slug: str, include_unpublished: bool = False) -> Dict[str, Any]:
        return await self._single(await self.chart_repo.find_by_slug(slug), include_unpublished)

    async def _subcategory_ids_for(self, category: Optional[str], subcategory: Optional[str]) -> Optional[List[str]]:
        """Resolve slug filters to subcategory ids; an empty list means nothing matches"""
        if category:
            found = await self.category_repo.find_by_slug(category)
            if not found:
                return []
            if subcategory:
                sub = await self.subcategory_repo.find_by_slug(found["id"], subcategory)
                return [sub["id"]] if sub else []
            return [sub["id"] for sub in await self.subcategory_repo.find_by_category(found["id"])]
        if subcategory:
            return [sub["id"] for sub in await self.subcategory_repo.find_all_by_slug(subcategory)]
        return None

    async def list_charts(
        self,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        include_unpublished: bool = False,
    ) -> List[Dict[str, Any]]:
        subcategory_ids = await self._subcategory_ids_for(category, subcategory)
        if subcategory_ids is not None and not subcategory_ids:
            return []

        query = self.chart_repo.build_filter_query(
            subcategory_ids=subcategory_ids,
            is_published=None if include_unpublished else True,
        )
        charts = await self.chart_repo.find_many(query, sort=[("name", ASCENDING)])
        refs = await self.resolver.resolve(charts)
        return [transform_chart(chart, refs) for chart in charts]

    async def list_categories(self) -> List[Dict[str, Any]]:
        """Categories with the subcategories that hold published charts"""
        categories = await self.category_repo.list_ordered()
        subcategories = await self.subcategory_repo.list_ordered()
        counts = await self.chart_repo.chart_counts_by_subcategory(published_only=True)

        result = []
        for category in categories:
            subs = [
                {"slug": sub["slug"], "name": sub["name"], "chartCount": counts[sub["id"]]}
                for sub in subcategories
                if sub["category_id"] == category["id"] and counts.get(sub["id"], 0) > 0
            ]
            result.append({"slug": category["slug"], "name": category["name"], "subcategories": subs})
        return result

    async def list_labels(self, label_type: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
        """Labels grouped by label type, each group in sort order"""
        labels = await self.label_repo.list_filtered(label_type=label_type)
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for label in labels:
            grouped.setdefault(label["label_type"], []).append({
                "key": label["key"],
                "value": label["display_value"],
                "sortOrder": label.get("sort_order", 0),
                "description": label.get("description"),
            })
        return grouped
