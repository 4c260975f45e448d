"""
Shorthand for template cell values (all measurements in inches)
"""


def rng(low: float, high: float) -> dict:
    return {"min": low, "max": high}


def val(value: float) -> dict:
    return {"value": value}
