"""
Unit conversion helpers.

Inches are the stored source of truth; centimetre values are always
derived from them when a cell is written.
"""

import math
from typing import Optional, Union

CM_PER_INCH = 2.54

Number = Union[int, float]


def inches_to_cm(inches: Number) -> float:
    """Convert inches to centimetres: round(inches * 2.54 * 10) / 10"""
    return math.floor(inches * CM_PER_INCH * 10 + 0.5) / 10


def optional_cm(inches: Optional[Number]) -> Optional[float]:
    """Derive cm for a nullable inch value"""
    if inches is None:
        return None
    return inches_to_cm(inches)


def format_number(value: Number) -> str:
    """Render 34.0 as "34" and 34.5 as "34.5" """
    if float(value).is_integer():
        return str(int(value))
    return str(value)
