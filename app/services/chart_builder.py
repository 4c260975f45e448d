"""
Builders that turn column-name keyed row data (import documents and
templates) into embedded chart columns and rows.
"""

from numbers import Number
from typing import Any, Dict, List, Optional

from app.models.size_chart import ColumnType, SizeChartCell, SizeChartColumn, SizeChartRow


def to_column_type(value: str) -> ColumnType:
    """Map a free-form column type name, falling back to TEXT"""
    try:
        return ColumnType(value)
    except ValueError:
        return ColumnType.TEXT


def build_columns(columns: List[Dict[str, Any]]) -> List[SizeChartColumn]:
    """Columns from [{"name", "type"}] definitions, in the given order"""
    return [
        SizeChartColumn(name=column["name"], column_type=to_column_type(column["type"]), display_order=index)
        for index, column in enumerate(columns)
    ]


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def template_cell(column_id: str, value: Any) -> Optional[SizeChartCell]:
    """
    Template values: a string is text, {"min", "max"} an inch range and
    {"value"} a single inch measurement. Anything else leaves the cell empty.
    """
    if isinstance(value, str):
        return SizeChartCell.build(column_id, text=value)
    if isinstance(value, dict):
        if "min" in value and "max" in value:
            return SizeChartCell.build(column_id, min_inches=value["min"], max_inches=value["max"])
        if "value" in value and _is_number(value["value"]):
            return SizeChartCell.build(column_id, inches=value["value"])
    return None


def import_cell(column_id: str, value: Any, label_ids_by_key: Dict[str, str]) -> Optional[SizeChartCell]:
    """
    Import values: a number is a single inch measurement, a string is text,
    {"labelKey"} references a label (unknown keys are kept as text) and
    {"min", "max"} is an inch range.
    """
    if value is None:
        return None
    if _is_number(value):
        return SizeChartCell.build(column_id, inches=float(value))
    if isinstance(value, str):
        return SizeChartCell.build(column_id, text=value)
    if isinstance(value, dict):
        if "labelKey" in value:
            label_key = str(value["labelKey"])
            label_id = label_ids_by_key.get(label_key)
            if label_id:
                return SizeChartCell.build(column_id, label_id=label_id)
            return SizeChartCell.build(column_id, text=label_key)
        if "min" in value or "max" in value:
            min_value = value.get("min")
            max_value = value.get("max")
            return SizeChartCell.build(
                column_id,
                min_inches=float(min_value) if _is_number(min_value) else None,
                max_inches=float(max_value) if _is_number(max_value) else None,
            )
    return SizeChartCell.build(column_id, text=str(value))


def build_rows(
    columns: List[SizeChartColumn],
    rows: List[Dict[str, Any]],
    label_ids_by_key: Optional[Dict[str, str]] = None,
    from_template: bool = False,
) -> List[SizeChartRow]:
    """Rows from {column name: value} mappings, one cell per populated column"""
    built = []
    for index, row_data in enumerate(rows):
        cells = []
        for column in columns:
            value = row_data.get(column.name)
            if from_template:
                cell = template_cell(column.id, value)
            else:
                cell = import_cell(column.id, value, label_ids_by_key or {})
            if cell is not None and not cell.is_empty():
                cells.append(cell)
        built.append(SizeChartRow(display_order=index, cells=cells))
    return built
