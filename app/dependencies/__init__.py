"""
Dependencies module initialization
"""

from .api_key import require_scope
from .auth import require_admin

__all__ = [
    "require_admin",
    "require_scope",
]
