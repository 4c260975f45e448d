"""
API schemas for size chart endpoints
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from app.models.size_chart import ColumnType, LabelType
from app.utils.slugs import SLUG_MAX_LENGTH, SLUG_PATTERN


class ColumnInput(BaseModel):
    """Column definition; an id marks an existing column on update"""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=100)
    column_type: ColumnType
    label_type: Optional[LabelType] = None
    display_order: Optional[int] = Field(None, ge=0)

    class Config:
        use_enum_values = True


class CellInput(BaseModel):
    """
    Cell value addressed by column_id or by column_index into the chart's
    column list. cm fields are accepted for compatibility but ignored;
    centimetres are always derived from inches.
    """
    id: Optional[str] = None
    column_id: Optional[str] = None
    column_index: Optional[int] = Field(None, ge=0)
    value_inches: Optional[float] = None
    value_cm: Optional[float] = None
    value_text: Optional[str] = None
    value_min_inches: Optional[float] = None
    value_max_inches: Optional[float] = None
    value_min_cm: Optional[float] = None
    value_max_cm: Optional[float] = None
    label_id: Optional[str] = None


class RowInput(BaseModel):
    """Row of cells; an id marks an existing row on update"""
    id: Optional[str] = None
    display_order: Optional[int] = Field(None, ge=0)
    cells: List[CellInput] = []


class SizeChartCreate(BaseModel):
    """Schema for creating a size chart"""
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=500)
    subcategory_ids: List[str] = Field(..., min_length=1)
    measurement_instruction_ids: List[str] = []
    is_published: bool = False
    columns: List[ColumnInput] = Field(..., min_length=1)
    rows: List[RowInput] = []


class SizeChartUpdate(BaseModel):
    """Schema for updating a size chart; omitted fields are unchanged"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=500)
    is_published: Optional[bool] = None
    subcategory_ids: Optional[List[str]] = None
    measurement_instruction_ids: Optional[List[str]] = None
    columns: Optional[List[ColumnInput]] = None
    rows: Optional[List[RowInput]] = None


class SizeChartFilters(BaseModel):
    """Admin list filters"""
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    search: Optional[str] = None
    is_published: Optional[bool] = None
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)


class BulkOperation(BaseModel):
    operation: Literal["delete", "publish", "unpublish"]
    ids: List[str] = Field(..., min_length=1)


class BulkOperationResponse(BaseModel):
    success: bool
    operation: str
    affected: int


class DuplicateSizeChart(BaseModel):
    id: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
