"""
API key model and scope definitions for the public API
"""

from enum import Enum
from typing import Dict, List


class ApiScope(str, Enum):
    """Permissions grantable to an API key"""
    READ_SIZE_CHARTS = "read:size-charts"
    READ_CATEGORIES = "read:categories"
    READ_LABELS = "read:labels"
    READ_INSTRUCTIONS = "read:instructions"


API_SCOPE_DESCRIPTIONS: Dict[ApiScope, str] = {
    ApiScope.READ_SIZE_CHARTS: "Read size charts",
    ApiScope.READ_CATEGORIES: "Read categories",
    ApiScope.READ_LABELS: "Read labels",
    ApiScope.READ_INSTRUCTIONS: "Read measurement instructions",
}

DEFAULT_SCOPES: List[str] = [scope.value for scope in ApiScope]

# Raw key format: sc_live_ followed by 32 url-safe characters
API_KEY_PREFIX = "sc_live_"
API_KEY_RANDOM_LENGTH = 32
API_KEY_DISPLAY_PREFIX_LENGTH = 12
