"""
Slugs of the demo dataset.

In demo mode these slugs cannot be changed through the API, and the demo
reset upserts them back to factory content. Content under other slugs is
left alone.
"""

from typing import Dict, List

DEMO_CATEGORY_SLUGS: List[str] = ["mens", "womens", "boys", "girls"]

# Subcategory slugs are unique within a category, not globally
DEMO_SUBCATEGORY_SLUGS: Dict[str, List[str]] = {
    "mens": ["tops", "bottoms", "footwear", "gloves", "headwear", "socks"],
    "womens": ["tops", "bras", "bottoms", "footwear", "gloves", "headwear", "socks", "plus-sizes"],
    "boys": ["tops", "bottoms", "footwear", "gloves", "headwear", "socks"],
    "girls": ["tops", "bottoms", "footwear", "gloves", "headwear", "socks"],
}

DEMO_SIZE_CHART_SLUGS: List[str] = [
    # Men's
    "mens-tops",
    "mens-bottoms",
    "mens-footwear",
    "mens-gloves",
    "mens-headwear",
    "mens-socks",
    # Women's
    "womens-tops",
    "womens-sports-bras",
    "womens-bottoms",
    "womens-plus-sizes",
    "womens-footwear",
    "womens-gloves",
    "womens-headwear",
    "womens-socks",
    # Youth, shared by boys and girls
    "youth-big-kids-tops",
    "youth-big-kids-bottoms",
    "youth-little-kids",
    "youth-toddler",
    "youth-infant",
    "youth-footwear",
    "youth-gloves",
    "youth-headwear",
    "youth-socks",
]


def is_demo_category_slug(slug: str) -> bool:
    return slug in DEMO_CATEGORY_SLUGS


def is_demo_subcategory_slug(category_slug: str, subcategory_slug: str) -> bool:
    return subcategory_slug in DEMO_SUBCATEGORY_SLUGS.get(category_slug, [])


def is_demo_size_chart_slug(slug: str) -> bool:
    return slug in DEMO_SIZE_CHART_SLUGS


def all_demo_subcategory_slugs() -> List[str]:
    """Every subcategory slug across demo categories, duplicates included"""
    return [slug for slugs in DEMO_SUBCATEGORY_SLUGS.values() for slug in slugs]
