"""
Slug helpers shared by categories, subcategories and size charts
"""

import re
import unicodedata

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
SLUG_MAX_LENGTH = 100

_slug_re = re.compile(SLUG_PATTERN)


def generate_slug(text: str) -> str:
    """
    Build a URL slug from free text.

    "Men's Tops & Tees" -> "mens-tops-tees"
    """
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower().replace("'", "")
    slug = re.sub(r"[^a-z0-9]+", "-", normalized).strip("-")
    return slug[:SLUG_MAX_LENGTH].rstrip("-")


def is_valid_slug(value: str) -> bool:
    return bool(value) and len(value) <= SLUG_MAX_LENGTH and bool(_slug_re.match(value))
