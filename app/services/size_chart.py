"""
Size chart service containing business logic for chart CRUD,
duplication and bulk operations.

A chart's columns, rows and cells are rebuilt in memory and written back
as one document, so an update never leaves a half-replaced chart.
"""

import math
from typing import Any, Dict, List, Optional

from app.core.config import config
from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.size_chart import (
    InstructionLink,
    SizeChartCell,
    SizeChartColumn,
    SizeChartDocument,
    SizeChartRow,
    SubcategoryLink,
    new_id,
)
from app.repositories.category import SubcategoryRepository
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import SizeLabelRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.schemas.size_chart import (
    BulkOperation,
    CellInput,
    ColumnInput,
    DuplicateSizeChart,
    RowInput,
    SizeChartCreate,
    SizeChartFilters,
    SizeChartUpdate,
)
from app.services.chart_resolver import (
    ChartReferenceResolver,
    ChartReferences,
    sorted_columns,
    sorted_links,
    sorted_rows,
)
from app.utils.demo_slugs import is_demo_size_chart_slug
from app.utils.slugs import generate_slug


def _category_view(category: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    if not category:
        return None
    return {"id": category["id"], "name": category["name"], "slug": category["slug"]}


def _subcategory_view(subcategory: Dict[str, Any], refs: ChartReferences) -> Dict[str, Any]:
    return {
        "id": subcategory["id"],
        "name": subcategory["name"],
        "slug": subcategory["slug"],
        "category_id": subcategory["category_id"],
        "category": _category_view(refs.category_for(subcategory)),
    }


def _label_view(label: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not label:
        return None
    return {
        "id": label["id"],
        "key": label["key"],
        "display_value": label["display_value"],
        "label_type": label["label_type"],
    }


def chart_graph(chart: Dict[str, Any], refs: ChartReferences) -> Dict[str, Any]:
    """Full admin view of a chart with references resolved"""
    subcategories = []
    for link in sorted_links(chart.get("subcategories", [])):
        subcategory = refs.subcategories.get(link["subcategory_id"])
        subcategories.append({
            "subcategory_id": link["subcategory_id"],
            "display_order": link.get("display_order", 0),
            "subcategory": _subcategory_view(subcategory, refs) if subcategory else None,
        })

    instructions = []
    for link in sorted_links(chart.get("measurement_instructions", [])):
        instruction = refs.instructions.get(link["instruction_id"])
        if instruction:
            instructions.append({
                "instruction_id": link["instruction_id"],
                "display_order": link.get("display_order", 0),
                "instruction": {
                    "id": instruction["id"],
                    "key": instruction["key"],
                    "name": instruction["name"],
                    "instruction": instruction["instruction"],
                },
            })

    rows = []
    for row in sorted_rows(chart):
        cells = []
        for cell in row.get("cells", []):
            cells.append({**cell, "label": _label_view(refs.labels.get(cell.get("label_id")))})
        rows.append({"id": row["id"], "display_order": row.get("display_order", 0), "cells": cells})

    return {
        "id": chart["id"],
        "name": chart["name"],
        "slug": chart["slug"],
        "description": chart.get("description"),
        "is_published": chart.get("is_published", False),
        "subcategories": subcategories,
        "measurement_instructions": instructions,
        "columns": sorted_columns(chart),
        "rows": rows,
        "created_at": chart.get("created_at"),
        "updated_at": chart.get("updated_at"),
    }


def chart_summary(chart: Dict[str, Any], refs: ChartReferences) -> Dict[str, Any]:
    """List view of a chart: links resolved, structure reduced to counts"""
    subcategories = []
    for link in sorted_links(chart.get("subcategories", [])):
        subcategory = refs.subcategories.get(link["subcategory_id"])
        if subcategory:
            subcategories.append(_subcategory_view(subcategory, refs))
    return {
        "id": chart["id"],
        "name": chart["name"],
        "slug": chart["slug"],
        "description": chart.get("description"),
        "is_published": chart.get("is_published", False),
        "subcategories": subcategories,
        "column_count": len(chart.get("columns", [])),
        "row_count": len(chart.get("rows", [])),
        "created_at": chart.get("created_at"),
        "updated_at": chart.get("updated_at"),
    }


class SizeChartService:
    """Service layer for size charts"""

    def __init__(
        self,
        chart_repo: SizeChartRepository,
        subcategory_repo: SubcategoryRepository,
        label_repo: SizeLabelRepository,
        instruction_repo: MeasurementInstructionRepository,
        resolver: ChartReferenceResolver,
    ):
        self.chart_repo = chart_repo
        self.subcategory_repo = subcategory_repo
        self.label_repo = label_repo
        self.instruction_repo = instruction_repo
        self.resolver = resolver

    async def list_charts(self, filters: SizeChartFilters) -> Dict[str, Any]:
        """Paginated chart list sorted by name"""
        subcategory_ids = None
        if filters.category_id:
            subcategories = await self.subcategory_repo.find_by_category(filters.category_id)
            subcategory_ids = [sub["id"] for sub in subcategories]
            if filters.subcategory_id:
                subcategory_ids = [s for s in subcategory_ids if s == filters.subcategory_id]
        elif filters.subcategory_id:
            subcategory_ids = [filters.subcategory_id]

        query = self.chart_repo.build_filter_query(
            subcategory_ids=subcategory_ids,
            search=filters.search,
            is_published=filters.is_published,
        )
        charts, total = await self.chart_repo.search(query, page=filters.page, limit=filters.limit)
        refs = await self.resolver.resolve(charts)

        return {
            "data": [chart_summary(chart, refs) for chart in charts],
            "pagination": {
                "page": filters.page,
                "limit": filters.limit,
                "total": total,
                "total_pages": math.ceil(total / filters.limit),
            },
        }

    async def get_chart(self, chart_id: str) -> Dict[str, Any]:
        chart = await self.chart_repo.find_by_id(chart_id)
        if not chart:
            raise ErrorResponse("Size chart not found", status_code=404)
        return await self._graph(chart)

    async def get_published_chart(
        self,
        category_slug: Optional[str],
        subcategory_slug: Optional[str],
        chart_slug: Optional[str],
    ) -> Dict[str, Any]:
        """
        Published chart addressed by its category, subcategory and chart slugs.

        The chart must be linked to a subcategory with that slug inside the
        named category. The matching subcategory is returned as "subcategory".
        """
        if not category_slug or not subcategory_slug or not chart_slug:
            raise ErrorResponse("Missing required parameters: category, subcategory, chart", status_code=400)

        chart = await self.chart_repo.find_by_slug(chart_slug)
        if not chart or not chart.get("is_published", False):
            raise ErrorResponse("Size chart not found", status_code=404)

        graph = await self._graph(chart)
        for link in graph["subcategories"]:
            subcategory = link["subcategory"]
            if not subcategory or subcategory["slug"] != subcategory_slug:
                continue
            category = subcategory["category"]
            if category and category["slug"] == category_slug:
                graph["subcategory"] = subcategory
                return graph
        raise ErrorResponse("Size chart not found", status_code=404)

    async def _graph(self, chart: Dict[str, Any]) -> Dict[str, Any]:
        refs = await self.resolver.resolve([chart])
        return chart_graph(chart, refs)

    async def _subcategory_links(self, subcategory_ids: List[str]) -> List[SubcategoryLink]:
        unique_ids = list(dict.fromkeys(subcategory_ids))
        found = await self.subcategory_repo.find_by_ids(unique_ids)
        if len(found) != len(unique_ids):
            raise ErrorResponse("One or more subcategories not found", status_code=400)
        return [SubcategoryLink(subcategory_id=sub_id, display_order=i) for i, sub_id in enumerate(unique_ids)]

    async def _instruction_links(self, instruction_ids: List[str]) -> List[InstructionLink]:
        unique_ids = list(dict.fromkeys(instruction_ids))
        if not unique_ids:
            return []
        found = await self.instruction_repo.find_by_ids(unique_ids)
        if len(found) != len(unique_ids):
            raise ErrorResponse("One or more measurement instructions not found", status_code=400)
        return [InstructionLink(instruction_id=inst_id, display_order=i) for i, inst_id in enumerate(unique_ids)]

    async def _check_labels(self, rows: List[SizeChartRow]) -> None:
        label_ids = {cell.label_id for row in rows for cell in row.cells if cell.label_id}
        if not label_ids:
            return
        found = await self.label_repo.find_by_ids(label_ids)
        if len(found) != len(label_ids):
            raise ErrorResponse("One or more labels not found", status_code=400)

    @staticmethod
    def _build_columns(
        inputs: List[ColumnInput], existing: Optional[List[Dict[str, Any]]] = None
    ) -> List[SizeChartColumn]:
        """Listed columns with a known id keep it; others get a new id"""
        existing_ids = {column["id"] for column in existing or []}
        columns = []
        for index, column in enumerate(inputs):
            kwargs = {
                "name": column.name,
                "column_type": column.column_type,
                "label_type": column.label_type,
                "display_order": column.display_order if column.display_order is not None else index,
            }
            if column.id and column.id in existing_ids:
                kwargs["id"] = column.id
            columns.append(SizeChartColumn(**kwargs))
        return columns

    @staticmethod
    def _build_cell(cell: CellInput, columns: List[SizeChartColumn]) -> SizeChartCell:
        column_ids = {column.id for column in columns}
        if cell.column_id is not None:
            if cell.column_id not in column_ids:
                raise ErrorResponse("Cell references an unknown column", status_code=400)
            column_id = cell.column_id
        elif cell.column_index is not None:
            if cell.column_index >= len(columns):
                raise ErrorResponse("Cell references an unknown column", status_code=400)
            column_id = columns[cell.column_index].id
        else:
            raise ErrorResponse("Each cell needs a column_id or column_index", status_code=400)

        return SizeChartCell.build(
            column_id,
            text=cell.value_text,
            inches=cell.value_inches,
            min_inches=cell.value_min_inches,
            max_inches=cell.value_max_inches,
            label_id=cell.label_id,
        )

    def _build_rows(
        self,
        inputs: List[RowInput],
        columns: List[SizeChartColumn],
        existing: Optional[List[Dict[str, Any]]] = None,
    ) -> List[SizeChartRow]:
        """Listed rows with a known id keep it and get their cells replaced"""
        existing_ids = {row["id"] for row in existing or []}
        rows = []
        for index, row in enumerate(inputs):
            cells: Dict[str, SizeChartCell] = {}
            for cell_input in row.cells:
                cell = self._build_cell(cell_input, columns)
                # One cell per column; a later entry for the same column wins
                cells[cell.column_id] = cell
            kwargs = {
                "display_order": row.display_order if row.display_order is not None else index,
                "cells": list(cells.values()),
            }
            if row.id and row.id in existing_ids:
                kwargs["id"] = row.id
            rows.append(SizeChartRow(**kwargs))
        return rows

    async def create_chart(self, data: SizeChartCreate) -> Dict[str, Any]:
        slug = data.slug or generate_slug(data.name)
        if not slug:
            raise ErrorResponse("A slug could not be generated from this name", status_code=400)
        if await self.chart_repo.slug_exists(slug):
            raise ErrorResponse("A size chart with this slug already exists", status_code=409)

        subcategory_links = await self._subcategory_links(data.subcategory_ids)
        instruction_links = await self._instruction_links(data.measurement_instruction_ids)
        columns = self._build_columns(data.columns)
        rows = self._build_rows(data.rows, columns)
        await self._check_labels(rows)

        document = SizeChartDocument(
            name=data.name,
            slug=slug,
            description=data.description,
            is_published=data.is_published,
            subcategories=subcategory_links,
            measurement_instructions=instruction_links,
            columns=columns,
            rows=rows,
        )
        chart = await self.chart_repo.insert(document.to_mongo())
        logger.info(
            f"Created size chart {chart['id']}",
            metadata={"event": "create_size_chart", "size_chart_id": chart["id"], "slug": slug}
        )
        return await self._graph(chart)

    async def update_chart(self, chart_id: str, data: SizeChartUpdate) -> Dict[str, Any]:
        existing = await self.chart_repo.find_by_id(chart_id)
        if not existing:
            raise ErrorResponse("Size chart not found", status_code=404)

        fields: Dict[str, Any] = {}
        provided = data.model_fields_set

        if data.name is not None:
            fields["name"] = data.name
        if "description" in provided:
            fields["description"] = data.description
        if data.is_published is not None:
            fields["is_published"] = data.is_published

        if data.slug is not None and data.slug != existing["slug"]:
            if config.demo_mode and is_demo_size_chart_slug(existing["slug"]):
                raise ErrorResponse("Cannot change slug of demo size chart in demo mode", status_code=403)
            if await self.chart_repo.slug_exists(data.slug, exclude_id=chart_id):
                raise ErrorResponse("A size chart with this slug already exists", status_code=409)
            fields["slug"] = data.slug

        if data.subcategory_ids is not None:
            links = await self._subcategory_links(data.subcategory_ids)
            fields["subcategories"] = [link.model_dump() for link in links]
        if data.measurement_instruction_ids is not None:
            links = await self._instruction_links(data.measurement_instruction_ids)
            fields["measurement_instructions"] = [link.model_dump() for link in links]

        if data.columns is not None:
            columns = self._build_columns(data.columns, existing.get("columns", []))
        else:
            columns = [SizeChartColumn(**column) for column in existing.get("columns", [])]

        if data.rows is not None:
            rows = self._build_rows(data.rows, columns, existing.get("rows", []))
            await self._check_labels(rows)
            fields["rows"] = [row.model_dump() for row in rows]
        elif data.columns is not None:
            # Drop cells that belonged to removed columns
            kept = {column.id for column in columns}
            fields["rows"] = [
                {**row, "cells": [cell for cell in row.get("cells", []) if cell["column_id"] in kept]}
                for row in existing.get("rows", [])
            ]

        if data.columns is not None:
            fields["columns"] = [column.model_dump() for column in columns]

        chart = await self.chart_repo.update_by_id(chart_id, fields)
        if not chart:
            raise ErrorResponse("Size chart not found", status_code=404)
        logger.info(
            f"Updated size chart {chart_id}",
            metadata={"event": "update_size_chart", "size_chart_id": chart_id, "fields": sorted(fields)}
        )
        return await self._graph(chart)

    async def delete_chart(self, chart_id: str) -> Dict[str, Any]:
        if not await self.chart_repo.delete_by_id(chart_id):
            raise ErrorResponse("Size chart not found", status_code=404)
        logger.info(
            f"Deleted size chart {chart_id}",
            metadata={"event": "delete_size_chart", "size_chart_id": chart_id}
        )
        return {"success": True}

    async def _unique_slug(self, base: str) -> str:
        slug = base
        counter = 1
        while await self.chart_repo.slug_exists(slug):
            slug = f"{base}-{counter}"
            counter += 1
        return slug

    async def duplicate_chart(self, data: DuplicateSizeChart) -> Dict[str, Any]:
        """Copy a chart under a new name and slug; the copy starts unpublished"""
        original = await self.chart_repo.find_by_id(data.id)
        if not original:
            raise ErrorResponse("Size chart not found", status_code=404)

        name = data.name or f"{original['name']} (Copy)"
        slug = await self._unique_slug(generate_slug(name) or original["slug"])

        column_ids = {column["id"]: new_id() for column in original.get("columns", [])}
        columns = [{**column, "id": column_ids[column["id"]]} for column in original.get("columns", [])]
        rows = []
        for row in original.get("rows", []):
            cells = [
                {**cell, "id": new_id(), "column_id": column_ids[cell["column_id"]]}
                for cell in row.get("cells", [])
                if cell.get("column_id") in column_ids
            ]
            rows.append({**row, "id": new_id(), "cells": cells})

        document = SizeChartDocument(
            name=name,
            slug=slug,
            description=original.get("description"),
            is_published=False,
            subcategories=original.get("subcategories", []),
            measurement_instructions=original.get("measurement_instructions", []),
            columns=columns,
            rows=rows,
        )
        chart = await self.chart_repo.insert(document.to_mongo())
        logger.info(
            f"Duplicated size chart {data.id} as {chart['id']}",
            metadata={"event": "duplicate_size_chart", "source_id": data.id, "size_chart_id": chart["id"]}
        )
        return await self._graph(chart)

    async def bulk_operation(self, data: BulkOperation) -> Dict[str, Any]:
        if data.operation == "delete":
            affected = await self.chart_repo.delete_many_by_ids(data.ids)
        else:
            affected = await self.chart_repo.set_published(data.ids, data.operation == "publish")

        logger.info(
            f"Bulk {data.operation} affected {affected} size chart(s)",
            metadata={"event": "bulk_size_charts", "operation": data.operation, "affected": affected}
        )
        return {"success": True, "operation": data.operation, "affected": affected}
