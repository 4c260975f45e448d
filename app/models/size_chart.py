"""
Size chart domain models.

A chart is stored as one MongoDB document that embeds its columns, its rows
and each row's cells, plus the links to subcategories and measurement
instructions. Every cell holds at most one value representation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from app.utils.conversions import optional_cm


def utc_now():
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Identifier for embedded columns, rows and cells"""
    return str(ObjectId())


class ColumnType(str, Enum):
    """Semantic kind of a chart column"""
    MEASUREMENT = "MEASUREMENT"
    SIZE_LABEL = "SIZE_LABEL"
    REGIONAL_SIZE = "REGIONAL_SIZE"
    BAND_SIZE = "BAND_SIZE"
    CUP_SIZE = "CUP_SIZE"
    SHOE_SIZE = "SHOE_SIZE"
    TEXT = "TEXT"


class LabelType(str, Enum):
    """Kinds of reusable size labels"""
    ALPHA_SIZE = "ALPHA_SIZE"
    NUMERIC_SIZE = "NUMERIC_SIZE"
    YOUTH_SIZE = "YOUTH_SIZE"
    TODDLER_SIZE = "TODDLER_SIZE"
    INFANT_SIZE = "INFANT_SIZE"
    BAND_SIZE = "BAND_SIZE"
    CUP_SIZE = "CUP_SIZE"
    SHOE_SIZE_US = "SHOE_SIZE_US"
    SHOE_SIZE_EU = "SHOE_SIZE_EU"
    SHOE_SIZE_UK = "SHOE_SIZE_UK"
    REGIONAL = "REGIONAL"
    CUSTOM = "CUSTOM"


# Default display names for label types, overridable per deployment
LABEL_TYPE_DEFAULTS: Dict[LabelType, Dict[str, str]] = {
    LabelType.ALPHA_SIZE: {"label": "Alpha Size", "description": "Letter sizes such as XS, SM, MD, LG"},
    LabelType.NUMERIC_SIZE: {"label": "Numeric Size", "description": "Number sizes such as 4, 6, 8"},
    LabelType.YOUTH_SIZE: {"label": "Youth Size", "description": "Youth sizes such as YSM, YMD"},
    LabelType.TODDLER_SIZE: {"label": "Toddler Size", "description": "Toddler sizes such as 2T, 3T"},
    LabelType.INFANT_SIZE: {"label": "Infant Size", "description": "Infant sizes by age in months"},
    LabelType.BAND_SIZE: {"label": "Band Size", "description": "Bra band sizes"},
    LabelType.CUP_SIZE: {"label": "Cup Size", "description": "Bra cup sizes"},
    LabelType.SHOE_SIZE_US: {"label": "US Shoe Size", "description": "United States shoe sizes"},
    LabelType.SHOE_SIZE_EU: {"label": "EU Shoe Size", "description": "European shoe sizes"},
    LabelType.SHOE_SIZE_UK: {"label": "UK Shoe Size", "description": "United Kingdom shoe sizes"},
    LabelType.REGIONAL: {"label": "Regional", "description": "Region-specific size names"},
    LabelType.CUSTOM: {"label": "Custom", "description": "Any other size identifier"},
}


class SizeChartColumn(BaseModel):
    """Column definition embedded in a chart document"""
    id: str = Field(default_factory=new_id)
    name: str
    column_type: ColumnType = ColumnType.TEXT
    label_type: Optional[LabelType] = None
    display_order: int = 0

    class Config:
        use_enum_values = True


class SizeChartCell(BaseModel):
    """
    One cell value. At most one representation is populated:
    label_id, a min/max range, a single measurement, or text.
    cm fields are always derived from the inch fields.
    """
    id: str = Field(default_factory=new_id)
    column_id: str
    value_text: Optional[str] = None
    value_inches: Optional[float] = None
    value_cm: Optional[float] = None
    value_min_inches: Optional[float] = None
    value_max_inches: Optional[float] = None
    value_min_cm: Optional[float] = None
    value_max_cm: Optional[float] = None
    label_id: Optional[str] = None

    @classmethod
    def build(
        cls,
        column_id: str,
        text: Optional[str] = None,
        inches: Optional[float] = None,
        min_inches: Optional[float] = None,
        max_inches: Optional[float] = None,
        label_id: Optional[str] = None,
        cell_id: Optional[str] = None,
    ) -> "SizeChartCell":
        """
        Create a cell keeping a single representation.
        Precedence is label, then range, then single measurement, then text.
        """
        kwargs: Dict[str, Any] = {"column_id": column_id}
        if cell_id:
            kwargs["id"] = cell_id

        if label_id:
            kwargs["label_id"] = label_id
        elif min_inches is not None or max_inches is not None:
            kwargs.update(
                value_min_inches=min_inches,
                value_max_inches=max_inches,
                value_min_cm=optional_cm(min_inches),
                value_max_cm=optional_cm(max_inches),
            )
        elif inches is not None:
            kwargs.update(value_inches=inches, value_cm=optional_cm(inches))
        elif text is not None:
            kwargs["value_text"] = text

        return cls(**kwargs)

    def is_empty(self) -> bool:
        return (
            self.label_id is None
            and self.value_text is None
            and self.value_inches is None
            and self.value_min_inches is None
            and self.value_max_inches is None
        )


class SizeChartRow(BaseModel):
    """Row embedded in a chart document"""
    id: str = Field(default_factory=new_id)
    display_order: int = 0
    cells: List[SizeChartCell] = Field(default_factory=list)


class SubcategoryLink(BaseModel):
    """Chart to subcategory association"""
    subcategory_id: str
    display_order: int = 0


class InstructionLink(BaseModel):
    """Chart to measurement instruction association"""
    instruction_id: str
    display_order: int = 0


class SizeChartDocument(BaseModel):
    """Full stored shape of a size chart (without _id)"""
    name: str
    slug: str
    description: Optional[str] = None
    is_published: bool = False
    subcategories: List[SubcategoryLink] = Field(default_factory=list)
    measurement_instructions: List[InstructionLink] = Field(default_factory=list)
    columns: List[SizeChartColumn] = Field(default_factory=list)
    rows: List[SizeChartRow] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def to_mongo(self) -> Dict[str, Any]:
        return self.model_dump(mode="python")
