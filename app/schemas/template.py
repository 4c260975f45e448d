"""
Schemas for the template catalog and template application
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.utils.slugs import SLUG_MAX_LENGTH, SLUG_PATTERN


class TemplateColumn(BaseModel):
    name: str
    type: str


class TemplateVariant(BaseModel):
    name: str
    description: Optional[str] = None
    rows: List[Dict[str, Any]]


class SizeChartTemplate(BaseModel):
    """
    A pre-built chart layout. Row values are a string (text),
    {"min", "max"} (inch range) or {"value"} (single inch value).
    """
    id: str
    name: str
    description: str
    category: str
    tags: List[str] = []
    suggested_categories: List[str] = []
    measurement_instructions: List[str] = []
    columns: List[TemplateColumn]
    rows: List[Dict[str, Any]] = []
    variants: Optional[Dict[str, TemplateVariant]] = None


class ApplyTemplateRequest(BaseModel):
    """Create a chart from a template; name and slug default from the template"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=SLUG_MAX_LENGTH, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=500)
    subcategory_ids: List[str] = Field(..., min_length=1)
    variant_key: Optional[str] = None
    is_published: bool = False
