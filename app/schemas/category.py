"""
API schemas for category and subcategory endpoints
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Schema for creating a category"""
    name: str = Field(..., min_length=1, max_length=50)
    slug: Optional[str] = Field(None, min_length=1, max_length=50)
    display_order: Optional[int] = Field(None, ge=0)


class CategoryUpdate(BaseModel):
    """Schema for updating a category"""
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    slug: Optional[str] = Field(None, min_length=1, max_length=50)
    display_order: Optional[int] = Field(None, ge=0)


class SubcategoryCreate(BaseModel):
    """Schema for creating a subcategory inside a category"""
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: str = Field(..., min_length=1)
    display_order: Optional[int] = Field(None, ge=0)


class SubcategoryUpdate(BaseModel):
    """Schema for updating a subcategory"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: Optional[str] = Field(None, min_length=1)
    display_order: Optional[int] = Field(None, ge=0)


class SubcategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    display_order: int = 0
    category_id: str
    chart_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    display_order: int = 0
    subcategories: List[SubcategoryResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
