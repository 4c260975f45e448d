"""
Static size chart template catalog.

Templates are validated into SizeChartTemplate models on first use and
cached for the life of the process.
"""

from typing import Dict, List, Optional

from app.schemas.template import SizeChartTemplate
from app.templates import accessories, apparel, footwear, youth

TEMPLATE_CATEGORIES = ["apparel", "youth", "footwear", "accessories"]

_CATALOG_MODULES = {
    "apparel": apparel,
    "youth": youth,
    "footwear": footwear,
    "accessories": accessories,
}

_template_cache: Optional[List[SizeChartTemplate]] = None


def _load_all_templates() -> List[SizeChartTemplate]:
    templates = []
    for category in TEMPLATE_CATEGORIES:
        templates.extend(SizeChartTemplate(**data) for data in _CATALOG_MODULES[category].TEMPLATES)
    return templates


def get_all_templates() -> List[SizeChartTemplate]:
    """All templates, cached after the first call"""
    global _template_cache
    if _template_cache is None:
        _template_cache = _load_all_templates()
    return _template_cache


def get_template_by_id(template_id: str) -> Optional[SizeChartTemplate]:
    return next((t for t in get_all_templates() if t.id == template_id), None)


def get_templates_by_category(category: str) -> List[SizeChartTemplate]:
    return [t for t in get_all_templates() if t.category == category]


def get_templates_by_tags(tags: List[str]) -> List[SizeChartTemplate]:
    """Templates carrying any of the given tags"""
    return [t for t in get_all_templates() if any(tag in tags for tag in t.tags)]


def search_templates(query: str) -> List[SizeChartTemplate]:
    """Case-insensitive match on name or description"""
    needle = query.lower()
    return [
        t for t in get_all_templates()
        if needle in t.name.lower() or needle in t.description.lower()
    ]


def get_template_category_counts() -> Dict[str, int]:
    counts = {category: 0 for category in TEMPLATE_CATEGORIES}
    for template in get_all_templates():
        if template.category in counts:
            counts[template.category] += 1
    return counts


def get_all_template_tags() -> List[str]:
    return sorted({tag for template in get_all_templates() for tag in template.tags})
