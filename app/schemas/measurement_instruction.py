"""
API schemas for measurement instruction endpoints
"""

from typing import Optional

from pydantic import BaseModel, Field

INSTRUCTION_KEY_PATTERN = r"^[a-z][a-z0-9_]*$"


class MeasurementInstructionCreate(BaseModel):
    key: str = Field(..., min_length=1, max_length=50, pattern=INSTRUCTION_KEY_PATTERN)
    name: str = Field(..., min_length=1, max_length=100)
    instruction: str = Field(..., min_length=1, max_length=500)
    sort_order: Optional[int] = Field(None, ge=0)


class MeasurementInstructionUpdate(BaseModel):
    key: Optional[str] = Field(None, min_length=1, max_length=50, pattern=INSTRUCTION_KEY_PATTERN)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    instruction: Optional[str] = Field(None, min_length=1, max_length=500)
    sort_order: Optional[int] = Field(None, ge=0)
