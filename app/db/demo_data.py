"""
Factory dataset for demo mode and local seeding.

Charts reference templates from the catalog by id; subcategories are
addressed as (category slug, subcategory slug) pairs.
"""

from typing import Any, Dict, List, Tuple

from app.models.size_chart import LabelType

MEASUREMENT_INSTRUCTIONS: List[Dict[str, Any]] = [
    {"key": "chest", "name": "Chest/Bust",
     "instruction": "Measure around the fullest part of your chest, keeping the tape parallel to the floor."},
    {"key": "waist", "name": "Waist",
     "instruction": "Measure around the narrowest part of your natural waistline, typically just above the belly button."},
    {"key": "hip", "name": "Hip",
     "instruction": "Measure around the fullest part of your hips, about 8 inches below your waist."},
    {"key": "inseam", "name": "Inseam",
     "instruction": "Measure from the crotch seam to the bottom of the leg along the inner leg."},
    {"key": "height", "name": "Height",
     "instruction": "Measure from the top of your head to the floor while standing straight without shoes."},
    {"key": "foot_length", "name": "Foot Length",
     "instruction": "Stand on a piece of paper and trace your foot. Measure from heel to longest toe."},
    {"key": "hand_circumference", "name": "Hand Circumference",
     "instruction": "Measure around your palm at the widest point, excluding the thumb."},
    {"key": "hand_length", "name": "Hand Length",
     "instruction": "Measure from the base of your palm to the tip of your middle finger."},
    {"key": "head_circumference", "name": "Head Circumference",
     "instruction": "Measure around the largest part of your head, about 1 inch above your eyebrows."},
    {"key": "band_size", "name": "Band Size",
     "instruction": "Measure snugly around your ribcage, directly under your bust. Round to nearest even number."},
    {"key": "cup_size", "name": "Cup Size",
     "instruction": "Measure around the fullest part of your bust. Subtract band size to determine cup."},
]


LABEL_DESCRIPTIONS = {"SIZE_OSFM": "One Size Fits Most"}


def _labels(label_type: LabelType, pairs: List[Tuple[str, str]]) -> List[Dict[str, Any]]:
    return [
        {
            "key": key,
            "display_value": value,
            "label_type": label_type.value,
            "sort_order": i,
            "description": LABEL_DESCRIPTIONS.get(key),
        }
        for i, (key, value) in enumerate(pairs)
    ]


SIZE_LABELS: List[Dict[str, Any]] = (
    _labels(LabelType.ALPHA_SIZE, [
        ("SIZE_XXS", "XXS"), ("SIZE_XS", "XS"), ("SIZE_SM", "SM"), ("SIZE_MD", "MD"),
        ("SIZE_LG", "LG"), ("SIZE_XL", "XL"), ("SIZE_XXL", "XXL"), ("SIZE_3XL", "3XL"),
        ("SIZE_4XL", "4XL"), ("SIZE_5XL", "5XL"), ("SIZE_1X", "1X"), ("SIZE_2X", "2X"),
        ("SIZE_3X", "3X"),
    ])
    + _labels(LabelType.YOUTH_SIZE, [
        ("SIZE_YXS", "YXS"), ("SIZE_YSM", "YSM"), ("SIZE_YMD", "YMD"), ("SIZE_YLG", "YLG"), ("SIZE_YXL", "YXL"),
    ])
    + _labels(LabelType.TODDLER_SIZE, [("SIZE_2T", "2T"), ("SIZE_3T", "3T"), ("SIZE_4T", "4T")])
    + _labels(LabelType.INFANT_SIZE, [
        ("SIZE_0_3M", "0-3M"), ("SIZE_3_6M", "3-6M"), ("SIZE_6_9M", "6-9M"),
        ("SIZE_12M", "12M"), ("SIZE_18M", "18M"), ("SIZE_24M", "24M"),
    ])
    + _labels(LabelType.NUMERIC_SIZE, [(f"SIZE_{n}", str(n)) for n in (4, 5, 6, 7, 8, 10, 12, 14, 16, 18, 20)])
    + _labels(LabelType.CUSTOM, [
        ("SIZE_OSFM", "OSFM"), ("SIZE_S_M", "S/M"), ("SIZE_M_L", "M/L"), ("SIZE_L_XL", "L/XL"), ("SIZE_XL_XXL", "XL/XXL"),
    ])
    + _labels(LabelType.CUP_SIZE, [
        ("CUP_A", "A"), ("CUP_B", "B"), ("CUP_C", "C"), ("CUP_D", "D"), ("CUP_DD", "DD"), ("CUP_DDD", "DDD"),
    ])
    + _labels(LabelType.BAND_SIZE, [(f"BAND_{n}", str(n)) for n in (30, 32, 34, 36, 38, 40, 42, 44, 46)])
)

CATEGORIES: List[Dict[str, Any]] = [
    {"name": "Men's", "slug": "mens", "display_order": 0},
    {"name": "Women's", "slug": "womens", "display_order": 1},
    {"name": "Boys", "slug": "boys", "display_order": 2},
    {"name": "Girls", "slug": "girls", "display_order": 3},
]

_SUBCATEGORY_NAMES = {
    "tops": "Tops",
    "bottoms": "Bottoms",
    "bras": "Bras",
    "footwear": "Footwear",
    "gloves": "Gloves",
    "headwear": "Headwear",
    "socks": "Socks",
    "plus-sizes": "Plus Sizes",
}


def subcategory_name(slug: str) -> str:
    return _SUBCATEGORY_NAMES.get(slug, slug.replace("-", " ").title())


BOTH_YOUTH = ("boys", "girls")

# slug, name, template id, variant key, [(category slug, subcategory slug)]
SIZE_CHARTS: List[Dict[str, Any]] = [
    {"slug": "mens-tops", "name": "Tops", "template": "apparel-mens-tops", "placements": [("mens", "tops")]},
    {"slug": "mens-bottoms", "name": "Bottoms", "template": "apparel-mens-bottoms", "placements": [("mens", "bottoms")]},
    {"slug": "mens-footwear", "name": "Footwear", "template": "footwear-mens", "placements": [("mens", "footwear")]},
    {"slug": "mens-gloves", "name": "Gloves", "template": "accessories-gloves", "variant": "mens",
     "placements": [("mens", "gloves")]},
    {"slug": "mens-headwear", "name": "Headwear", "template": "accessories-headwear", "variant": "mens",
     "placements": [("mens", "headwear")]},
    {"slug": "mens-socks", "name": "Socks", "template": "accessories-socks", "variant": "mens",
     "placements": [("mens", "socks")]},
    {"slug": "womens-tops", "name": "Tops", "template": "apparel-womens-tops", "placements": [("womens", "tops")]},
    {"slug": "womens-sports-bras", "name": "Sports Bras", "template": "apparel-womens-sports-bras",
     "placements": [("womens", "bras")]},
    {"slug": "womens-bottoms", "name": "Bottoms", "template": "apparel-womens-bottoms",
     "placements": [("womens", "bottoms")]},
    {"slug": "womens-plus-sizes", "name": "Plus Sizes", "template": "apparel-womens-plus-sizes",
     "placements": [("womens", "plus-sizes")]},
    {"slug": "womens-footwear", "name": "Footwear", "template": "footwear-womens",
     "placements": [("womens", "footwear")]},
    {"slug": "womens-gloves", "name": "Gloves", "template": "accessories-gloves", "variant": "womens",
     "placements": [("womens", "gloves")]},
    {"slug": "womens-headwear", "name": "Headwear", "template": "accessories-headwear", "variant": "womens",
     "placements": [("womens", "headwear")]},
    {"slug": "womens-socks", "name": "Socks", "template": "accessories-socks", "variant": "womens",
     "placements": [("womens", "socks")]},
    {"slug": "youth-big-kids-tops", "name": "Big Kids (8-20)", "template": "youth-big-kids-tops",
     "placements": [(c, "tops") for c in BOTH_YOUTH]},
    {"slug": "youth-big-kids-bottoms", "name": "Big Kids (8-20)", "template": "youth-big-kids-bottoms",
     "placements": [(c, "bottoms") for c in BOTH_YOUTH]},
    {"slug": "youth-little-kids", "name": "Little Kids (4-7)", "template": "youth-little-kids",
     "placements": [(c, s) for s in ("tops", "bottoms") for c in BOTH_YOUTH]},
    {"slug": "youth-toddler", "name": "Toddler (2T-4T)", "template": "youth-toddler",
     "placements": [(c, s) for s in ("tops", "bottoms") for c in BOTH_YOUTH]},
    {"slug": "youth-infant", "name": "Infant (0-24M)", "template": "youth-infant",
     "placements": [(c, s) for s in ("tops", "bottoms") for c in BOTH_YOUTH]},
    {"slug": "youth-footwear", "name": "Youth Footwear", "template": "footwear-kids",
     "placements": [(c, "footwear") for c in BOTH_YOUTH]},
    {"slug": "youth-gloves", "name": "Youth Gloves", "template": "accessories-gloves", "variant": "youth",
     "placements": [(c, "gloves") for c in BOTH_YOUTH]},
    {"slug": "youth-headwear", "name": "Youth Headwear", "template": "accessories-headwear", "variant": "youth",
     "placements": [(c, "headwear") for c in BOTH_YOUTH]},
    {"slug": "youth-socks", "name": "Youth Socks", "template": "accessories-socks", "variant": "youth",
     "placements": [(c, "socks") for c in BOTH_YOUTH]},
]
