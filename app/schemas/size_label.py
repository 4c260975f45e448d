"""
API schemas for size labels and label type overrides
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.size_chart import LabelType

LABEL_KEY_PATTERN = r"^[A-Z0-9_]+$"


class SizeLabelCreate(BaseModel):
    """Schema for creating a size label"""
    key: str = Field(..., min_length=1, max_length=50, pattern=LABEL_KEY_PATTERN)
    display_value: str = Field(..., min_length=1, max_length=50)
    label_type: LabelType
    sort_order: Optional[int] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=200)

    class Config:
        use_enum_values = True


class SizeLabelUpdate(BaseModel):
    """Schema for updating a size label"""
    key: Optional[str] = Field(None, min_length=1, max_length=50, pattern=LABEL_KEY_PATTERN)
    display_value: Optional[str] = Field(None, min_length=1, max_length=50)
    label_type: Optional[LabelType] = None
    sort_order: Optional[int] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=200)

    class Config:
        use_enum_values = True


class SizeLabelResponse(BaseModel):
    id: str
    key: str
    display_value: str
    label_type: str
    sort_order: int = 0
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LabelTypeConfigUpdate(BaseModel):
    """Override of a label type's display name; label_type is checked by the service"""
    label_type: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class LabelTypeConfigResponse(BaseModel):
    id: Optional[str] = None
    label_type: str
    display_name: str
    description: Optional[str] = None
    is_customized: bool = False
