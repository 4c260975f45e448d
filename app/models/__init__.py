"""
Models module initialization
"""

from .api_key import ApiScope, DEFAULT_SCOPES
from .size_chart import (
    ColumnType,
    LabelType,
    SizeChartCell,
    SizeChartColumn,
    SizeChartDocument,
    SizeChartRow,
)

__all__ = [
    "ApiScope",
    "DEFAULT_SCOPES",
    "ColumnType",
    "LabelType",
    "SizeChartCell",
    "SizeChartColumn",
    "SizeChartDocument",
    "SizeChartRow",
]
