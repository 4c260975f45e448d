"""
Import/export service for size charts.

The JSON document format is shared by import and export so an export can
be imported back. CSV and XLSX exports are read-only renderings.
"""

import csv
import io
import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from pydantic import ValidationError
from pymongo import ASCENDING

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.size_chart import InstructionLink, SizeChartDocument, SubcategoryLink
from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import SizeLabelRepository
from app.schemas.import_export import EXPORT_FORMAT_VERSION, ImportChart, ImportDocument
from app.services.chart_builder import build_columns, build_rows
from app.services.chart_resolver import (
    ChartReferenceResolver,
    ChartReferences,
    sorted_columns,
    sorted_links,
    sorted_rows,
)
from app.services.public_api import to_iso
from app.utils.conversions import format_number

IMPORT_MODES = ("create", "skip", "upsert")
EXPORT_FORMATS = ("json", "csv", "xlsx")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
_SHEET_TITLE_INVALID = re.compile(r"[\[\]:*?/\\]")


@dataclass
class ExportFile:
    content: Union[str, bytes]
    media_type: str
    filename: str


def _cells_by_column(row: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    return {cell["column_id"]: cell for cell in row.get("cells", [])}


def export_cell_value(cell: Optional[Dict[str, Any]], refs: ChartReferences) -> Any:
    """Import-format value of a cell"""
    if cell is None:
        return None
    label = refs.labels.get(cell.get("label_id")) if cell.get("label_id") else None
    if label:
        return {"labelKey": label["key"]}
    if cell.get("value_min_inches") is not None or cell.get("value_max_inches") is not None:
        return {"min": cell.get("value_min_inches"), "max": cell.get("value_max_inches")}
    if cell.get("value_inches") is not None:
        return cell["value_inches"]
    return cell.get("value_text")


def display_cell_value(cell: Optional[Dict[str, Any]], refs: ChartReferences) -> str:
    """Flat text of a cell for CSV and spreadsheets"""
    if cell is None:
        return ""
    label = refs.labels.get(cell.get("label_id")) if cell.get("label_id") else None
    if label:
        return label["display_value"]
    min_inches = cell.get("value_min_inches")
    max_inches = cell.get("value_max_inches")
    if min_inches is not None or max_inches is not None:
        low = format_number(min_inches) if min_inches is not None else ""
        high = format_number(max_inches) if max_inches is not None else ""
        return f"{low}-{high}"
    if cell.get("value_inches") is not None:
        return format_number(cell["value_inches"])
    return cell.get("value_text") or ""


def chart_to_export(chart: Dict[str, Any], refs: ChartReferences) -> Dict[str, Any]:
    columns = sorted_columns(chart)

    categories = []
    for link in sorted_links(chart.get("subcategories", [])):
        subcategory = refs.subcategories.get(link["subcategory_id"])
        if subcategory:
            categories.append({
                "category": refs.category_for(subcategory).get("slug"),
                "subcategory": subcategory["slug"],
            })

    instructions = [
        refs.instructions[link["instruction_id"]]["key"]
        for link in sorted_links(chart.get("measurement_instructions", []))
        if link["instruction_id"] in refs.instructions
    ]

    rows = []
    for row in sorted_rows(chart):
        cells = _cells_by_column(row)
        rows.append({column["name"]: export_cell_value(cells.get(column["id"]), refs) for column in columns})

    return {
        "name": chart["name"],
        "slug": chart["slug"],
        "description": chart.get("description"),
        "isPublished": chart.get("is_published", False),
        "categories": categories,
        "measurementInstructions": instructions,
        "columns": [{"name": column["name"], "type": column["column_type"]} for column in columns],
        "rows": rows,
    }


def charts_to_csv(charts: List[Dict[str, Any]], refs: ChartReferences) -> str:
    """One block per chart: a '# Name (slug)' line, a header row and data rows"""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    for chart in charts:
        columns = sorted_columns(chart)
        output.write(f"# {chart['name']} ({chart['slug']})\n")
        writer.writerow([column["name"] for column in columns])
        for row in sorted_rows(chart):
            cells = _cells_by_column(row)
            writer.writerow([display_cell_value(cells.get(column["id"]), refs) for column in columns])
        output.write("\n")
    return output.getvalue()


def _sheet_title(name: str, used: set) -> str:
    base = _SHEET_TITLE_INVALID.sub("-", name).strip() or "Chart"
    base = base[:31]
    title = base
    counter = 2
    while title in used:
        suffix = f" ({counter})"
        title = f"{base[:31 - len(suffix)]}{suffix}"
        counter += 1
    used.add(title)
    return title


def charts_to_xlsx(charts: List[Dict[str, Any]], refs: ChartReferences) -> bytes:
    """Workbook with one worksheet per chart"""
    wb = Workbook()
    wb.remove(wb.active)
    used_titles: set = set()

    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")

    if not charts:
        wb.create_sheet("Size Charts")

    for chart in charts:
        ws = wb.create_sheet(_sheet_title(chart["name"], used_titles))
        columns = sorted_columns(chart)

        for col_idx, column in enumerate(columns, start=1):
            cell = ws.cell(row=1, column=col_idx, value=column["name"])
            cell.font = header_font
            cell.fill = header_fill
            ws.column_dimensions[get_column_letter(col_idx)].width = max(12, len(column["name"]) + 4)

        for row_idx, row in enumerate(sorted_rows(chart), start=2):
            cells = _cells_by_column(row)
            for col_idx, column in enumerate(columns, start=1):
                cell = cells.get(column["id"])
                value: Any = display_cell_value(cell, refs)
                if cell is not None and cell.get("value_inches") is not None and not cell.get("label_id"):
                    value = cell["value_inches"]
                ws.cell(row=row_idx, column=col_idx, value=value)

    output = io.BytesIO()
    wb.save(output)
    return output.getvalue()


class ImportExportService:
    """Service layer for chart import and export"""

    def __init__(
        self,
        chart_repo: SizeChartRepository,
        category_repo: CategoryRepository,
        subcategory_repo: SubcategoryRepository,
        instruction_repo: MeasurementInstructionRepository,
        label_repo: SizeLabelRepository,
        resolver: ChartReferenceResolver,
    ):
        self.chart_repo = chart_repo
        self.category_repo = category_repo
        self.subcategory_repo = subcategory_repo
        self.instruction_repo = instruction_repo
        self.label_repo = label_repo
        self.resolver = resolver

    async def _resolve_subcategories(self, chart: ImportChart) -> List[str]:
        subcategory_ids: List[str] = []
        for ref in chart.categories:
            category = await self.category_repo.find_by_slug(ref.category)
            if not category:
                continue
            subcategory = await self.subcategory_repo.find_by_slug(category["id"], ref.subcategory)
            if subcategory and subcategory["id"] not in subcategory_ids:
                subcategory_ids.append(subcategory["id"])
        return subcategory_ids

    async def _build_document(self, chart: ImportChart, subcategory_ids: List[str]) -> SizeChartDocument:
        instructions = await self.instruction_repo.find_by_keys(chart.measurement_instructions)
        instruction_ids = {inst["key"]: inst["id"] for inst in instructions}
        ordered_instruction_ids = [
            instruction_ids[key] for key in dict.fromkeys(chart.measurement_instructions) if key in instruction_ids
        ]

        label_keys = {
            str(value["labelKey"])
            for row in chart.rows
            for value in row.values()
            if isinstance(value, dict) and "labelKey" in value
        }
        labels = await self.label_repo.find_by_keys(sorted(label_keys))

        columns = build_columns([column.model_dump() for column in chart.columns])
        rows = build_rows(columns, chart.rows, label_ids_by_key={label["key"]: label["id"] for label in labels})

        return SizeChartDocument(
            name=chart.name,
            slug=chart.slug,
            description=chart.description,
            is_published=chart.is_published,
            subcategories=[SubcategoryLink(subcategory_id=sub_id, display_order=i) for i, sub_id in enumerate(subcategory_ids)],
            measurement_instructions=[
                InstructionLink(instruction_id=inst_id, display_order=i) for i, inst_id in enumerate(ordered_instruction_ids)
            ],
            columns=columns,
            rows=rows,
        )

    async def _import_chart(self, chart: ImportChart, mode: str) -> Tuple[str, Optional[str]]:
        """Import one chart, returning its status and error message"""
        existing = await self.chart_repo.find_by_slug(chart.slug)
        if existing and mode == "create":
            return "error", "Chart already exists"
        if existing and mode == "skip":
            return "skipped", None

        subcategory_ids = await self._resolve_subcategories(chart)
        if not subcategory_ids:
            return "error", "No valid categories found"

        document = await self._build_document(chart, subcategory_ids)
        if existing:
            replacement = document.to_mongo()
            replacement["created_at"] = existing.get("created_at", replacement["created_at"])
            await self.chart_repo.replace_by_id(existing["id"], replacement)
            return "updated", None

        await self.chart_repo.insert(document.to_mongo())
        return "created", None

    async def import_charts(self, payload: Any, mode: str = "create") -> Dict[str, Any]:
        if mode not in IMPORT_MODES:
            raise ErrorResponse(f"Invalid import mode. Use one of: {', '.join(IMPORT_MODES)}", status_code=400)
        try:
            document = ImportDocument.model_validate(payload)
        except ValidationError as e:
            raise ErrorResponse(
                "Invalid import format",
                status_code=400,
                details=json.loads(e.json(include_url=False)),
            )

        summary = {"created": 0, "updated": 0, "skipped": 0, "errors": 0}
        results = []
        for chart in document.charts:
            try:
                status, error = await self._import_chart(chart, mode)
            except (ErrorResponse, ValueError, TypeError) as e:
                logger.warning(
                    f"Failed to import size chart {chart.slug}: {e}",
                    metadata={"event": "import_chart_failed", "slug": chart.slug}
                )
                status, error = "error", str(e)

            summary["errors" if status == "error" else status] += 1
            result = {"slug": chart.slug, "status": status}
            if error:
                result["error"] = error
            results.append(result)

        logger.info(
            f"Imported {len(document.charts)} size chart(s)",
            metadata={"event": "import_size_charts", "mode": mode, **summary}
        )
        return {"success": summary["errors"] == 0, "summary": summary, "results": results}

    async def _charts_for_export(
        self, chart_id: Optional[str], category: Optional[str], subcategory: Optional[str]
    ) -> List[Dict[str, Any]]:
        if chart_id:
            chart = await self.chart_repo.find_by_id(chart_id)
            return [chart] if chart else []

        query: Dict[str, Any] = {}
        if category:
            found = await self.category_repo.find_by_slug(category)
            if not found:
                raise ErrorResponse("Category not found", status_code=404)
            if subcategory:
                sub = await self.subcategory_repo.find_by_slug(found["id"], subcategory)
                if not sub:
                    raise ErrorResponse("Subcategory not found", status_code=404)
                subcategory_ids = [sub["id"]]
            else:
                subcategory_ids = [s["id"] for s in await self.subcategory_repo.find_by_category(found["id"])]
            query = self.chart_repo.build_filter_query(subcategory_ids=subcategory_ids)
        elif subcategory:
            subs = await self.subcategory_repo.find_all_by_slug(subcategory)
            if not subs:
                raise ErrorResponse("Subcategory not found", status_code=404)
            query = self.chart_repo.build_filter_query(subcategory_ids=[s["id"] for s in subs])

        return await self.chart_repo.find_many(query, sort=[("name", ASCENDING)])

    async def export_charts(
        self,
        chart_id: Optional[str] = None,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        export_format: str = "json",
    ) -> ExportFile:
        if export_format not in EXPORT_FORMATS:
            raise ErrorResponse(f"Invalid export format. Use one of: {', '.join(EXPORT_FORMATS)}", status_code=400)

        charts = await self._charts_for_export(chart_id, category, subcategory)
        refs = await self.resolver.resolve(charts)
        now = datetime.now(timezone.utc)
        filename = f"size-charts-{now.strftime('%Y-%m-%d')}.{export_format}"

        logger.info(
            f"Exporting {len(charts)} size chart(s) as {export_format}",
            metadata={"event": "export_size_charts", "format": export_format, "chart_count": len(charts)}
        )

        if export_format == "csv":
            return ExportFile(charts_to_csv(charts, refs), "text/csv", filename)
        if export_format == "xlsx":
            return ExportFile(charts_to_xlsx(charts, refs), XLSX_MEDIA_TYPE, filename)

        export_data = {
            "exportedAt": to_iso(now),
            "version": EXPORT_FORMAT_VERSION,
            "chartCount": len(charts),
            "charts": [chart_to_export(chart, refs) for chart in charts],
        }
        return ExportFile(json.dumps(export_data, indent=2), "application/json", filename)
