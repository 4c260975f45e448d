"""
API schemas for API key management
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.api_key import ApiScope


class ApiKeyCreate(BaseModel):
    """Schema for issuing a new API key; scopes default to all"""
    name: str = Field(..., min_length=1, max_length=100)
    scopes: Optional[List[ApiScope]] = None
    expires_at: Optional[datetime] = None

    class Config:
        use_enum_values = True


class ApiKeyUpdate(BaseModel):
    """Fields left out are unchanged; expires_at may be set to null to clear it"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    scopes: Optional[List[ApiScope]] = None
    is_active: Optional[bool] = None
    expires_at: Optional[datetime] = None

    class Config:
        use_enum_values = True


class ApiKeyResponse(BaseModel):
    """API key metadata; the secret is never returned after creation"""
    id: str
    name: str
    key_prefix: str
    scopes: List[str]
    is_active: bool
    last_used_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ApiKeyCreatedResponse(ApiKeyResponse):
    key: str
    message: str = "Save this API key - it won't be shown again"
