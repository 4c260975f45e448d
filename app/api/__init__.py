"""
API module initialization
"""

from . import (
    admin,
    api_keys,
    categories,
    embed,
    health,
    labels,
    measurement_instructions,
    size_charts,
    templates,
    v1,
)

__all__ = [
    "admin",
    "api_keys",
    "categories",
    "embed",
    "health",
    "labels",
    "measurement_instructions",
    "size_charts",
    "templates",
    "v1",
]
