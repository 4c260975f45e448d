"""
Youth templates from infant through big kids
"""

from app.templates.values import rng, val

BIG_KIDS_TOPS = {
    "id": "youth-big-kids-tops",
    "name": "Big Kids' Tops",
    "description": "Big kids' (8-20) shirt and top sizing by chest, waist and height.",
    "category": "youth",
    "tags": ["youth", "big-kids", "tops", "shirts", "boys", "girls"],
    "suggested_categories": ["boys/tops", "girls/tops"],
    "measurement_instructions": ["chest", "waist", "height"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Numeric Size", "type": "TEXT"},
        {"name": "Chest", "type": "MEASUREMENT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Height", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "YSM", "Numeric Size": "8", "Chest": rng(26, 27), "Waist": rng(23.5, 24), "Height": rng(50, 54)},
        {"Size": "YMD", "Numeric Size": "10-12", "Chest": rng(28, 29.5), "Waist": rng(24.5, 25.5), "Height": rng(54, 59)},
        {"Size": "YLG", "Numeric Size": "14-16", "Chest": rng(30.5, 32), "Waist": rng(26, 27.5), "Height": rng(59, 63)},
        {"Size": "YXL", "Numeric Size": "18-20", "Chest": rng(33, 35), "Waist": rng(28, 29.5), "Height": rng(63, 67)},
    ],
}

BIG_KIDS_BOTTOMS = {
    "id": "youth-big-kids-bottoms",
    "name": "Big Kids' Bottoms",
    "description": "Big kids' (8-20) pants and shorts sizing by waist, hip and inseam.",
    "category": "youth",
    "tags": ["youth", "big-kids", "bottoms", "pants", "boys", "girls"],
    "suggested_categories": ["boys/bottoms", "girls/bottoms"],
    "measurement_instructions": ["waist", "hip", "inseam"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Numeric Size", "type": "TEXT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Hip", "type": "MEASUREMENT"},
        {"name": "Inseam", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "YSM", "Numeric Size": "8", "Waist": rng(23.5, 24), "Hip": rng(27, 28.5), "Inseam": val(24)},
        {"Size": "YMD", "Numeric Size": "10-12", "Waist": rng(24.5, 25.5), "Hip": rng(29, 31), "Inseam": val(26)},
        {"Size": "YLG", "Numeric Size": "14-16", "Waist": rng(26, 27.5), "Hip": rng(31.5, 33.5), "Inseam": val(28)},
        {"Size": "YXL", "Numeric Size": "18-20", "Waist": rng(28, 29.5), "Hip": rng(34, 36), "Inseam": val(30)},
    ],
}

LITTLE_KIDS = {
    "id": "youth-little-kids",
    "name": "Little Kids",
    "description": "Little kids' (4-7) tops and bottoms sizing by chest, waist and height.",
    "category": "youth",
    "tags": ["youth", "little-kids", "tops", "bottoms", "boys", "girls"],
    "suggested_categories": ["boys/tops", "girls/tops", "boys/bottoms", "girls/bottoms"],
    "measurement_instructions": ["chest", "waist", "height"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Chest", "type": "MEASUREMENT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Height", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "4", "Chest": rng(23, 23.5), "Waist": rng(21, 21.5), "Height": rng(39, 42)},
        {"Size": "5", "Chest": rng(23.5, 24), "Waist": rng(21.5, 22), "Height": rng(42, 45)},
        {"Size": "6", "Chest": rng(24, 25), "Waist": rng(22, 22.5), "Height": rng(45, 48)},
        {"Size": "7", "Chest": rng(25, 26), "Waist": rng(22.5, 23), "Height": rng(48, 50)},
    ],
}

TODDLER = {
    "id": "youth-toddler",
    "name": "Toddler",
    "description": "Toddler (2T-4T) sizing by chest, waist, height and weight.",
    "category": "youth",
    "tags": ["youth", "toddler", "tops", "bottoms", "boys", "girls"],
    "suggested_categories": ["boys/tops", "girls/tops", "boys/bottoms", "girls/bottoms"],
    "measurement_instructions": ["chest", "waist", "height"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Chest", "type": "MEASUREMENT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Height", "type": "MEASUREMENT"},
        {"name": "Weight", "type": "TEXT"},
    ],
    "rows": [
        {"Size": "2T", "Chest": val(21), "Waist": val(20), "Height": rng(33, 35), "Weight": "27-29 lb"},
        {"Size": "3T", "Chest": val(22), "Waist": val(20.5), "Height": rng(36, 38), "Weight": "30-33 lb"},
        {"Size": "4T", "Chest": val(23), "Waist": val(21), "Height": rng(39, 41), "Weight": "34-37 lb"},
    ],
}

INFANT = {
    "id": "youth-infant",
    "name": "Infant",
    "description": "Infant (0-24 months) sizing by height and weight.",
    "category": "youth",
    "tags": ["youth", "infant", "baby", "boys", "girls"],
    "suggested_categories": ["boys/tops", "girls/tops", "boys/bottoms", "girls/bottoms"],
    "measurement_instructions": ["height"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Height", "type": "MEASUREMENT"},
        {"name": "Weight", "type": "TEXT"},
    ],
    "rows": [
        {"Size": "0-3M", "Height": rng(21.5, 24), "Weight": "8-12 lb"},
        {"Size": "3-6M", "Height": rng(24, 26.5), "Weight": "12-16 lb"},
        {"Size": "6-9M", "Height": rng(26.5, 28.5), "Weight": "16-20 lb"},
        {"Size": "12M", "Height": rng(28.5, 30.5), "Weight": "20-24 lb"},
        {"Size": "18M", "Height": rng(30.5, 32.5), "Weight": "24-27 lb"},
        {"Size": "24M", "Height": rng(32.5, 34), "Weight": "27-30 lb"},
    ],
}

TEMPLATES = [BIG_KIDS_TOPS, BIG_KIDS_BOTTOMS, LITTLE_KIDS, TODDLER, INFANT]
