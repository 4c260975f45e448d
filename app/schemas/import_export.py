"""
Schemas for the JSON import/export document.

The document is an external format shared with exports and hand-written
files, so its fields are camelCase on the wire.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.models.size_chart import ColumnType

IMPORT_SLUG_PATTERN = r"^[a-z0-9-]+$"
EXPORT_FORMAT_VERSION = "1.0"


class ImportCategoryRef(BaseModel):
    category: str
    subcategory: str


class ImportColumn(BaseModel):
    name: str
    type: ColumnType

    class Config:
        use_enum_values = True


class ImportChart(BaseModel):
    """One chart in the import document; rows map column names to values"""
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=IMPORT_SLUG_PATTERN)
    description: Optional[str] = None
    is_published: bool = Field(False, alias="isPublished")
    categories: List[ImportCategoryRef] = Field(..., min_length=1)
    measurement_instructions: List[str] = Field([], alias="measurementInstructions")
    columns: List[ImportColumn] = Field(..., min_length=1)
    rows: List[Dict[str, Any]] = Field(..., min_length=1)

    class Config:
        populate_by_name = True


class ImportDocument(BaseModel):
    version: Optional[str] = None
    charts: List[ImportChart]


class ImportResult(BaseModel):
    slug: str
    status: str
    error: Optional[str] = None


class ImportSummary(BaseModel):
    created: int = 0
    updated: int = 0
    skipped: int = 0
    errors: int = 0


class ImportResponse(BaseModel):
    success: bool
    summary: ImportSummary
    results: List[ImportResult]
