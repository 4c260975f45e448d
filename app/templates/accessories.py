"""
Accessory templates. Each has men's, women's and youth variants; the
default rows are the men's variant.
"""

from app.templates.values import rng

_GLOVES_MENS = [
    {"Size": "S", "Hand Circumference": rng(7, 7.5), "Hand Length": rng(6.9, 7.2)},
    {"Size": "M", "Hand Circumference": rng(8, 8.5), "Hand Length": rng(7.3, 7.6)},
    {"Size": "L", "Hand Circumference": rng(9, 9.5), "Hand Length": rng(7.7, 8.0)},
    {"Size": "XL", "Hand Circumference": rng(10, 10.5), "Hand Length": rng(8.1, 8.4)},
    {"Size": "XXL", "Hand Circumference": rng(11, 11.5), "Hand Length": rng(8.5, 8.8)},
]

GLOVES = {
    "id": "accessories-gloves",
    "name": "Gloves",
    "description": "Glove sizing by hand circumference and hand length.",
    "category": "accessories",
    "tags": ["accessories", "gloves", "mens", "womens", "youth"],
    "suggested_categories": ["mens/gloves", "womens/gloves", "boys/gloves", "girls/gloves"],
    "measurement_instructions": ["hand_circumference", "hand_length"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Hand Circumference", "type": "MEASUREMENT"},
        {"name": "Hand Length", "type": "MEASUREMENT"},
    ],
    "rows": _GLOVES_MENS,
    "variants": {
        "mens": {"name": "Men's", "description": "Men's glove sizes", "rows": _GLOVES_MENS},
        "womens": {
            "name": "Women's",
            "description": "Women's glove sizes",
            "rows": [
                {"Size": "XS", "Hand Circumference": rng(6, 6.5), "Hand Length": rng(6.2, 6.5)},
                {"Size": "S", "Hand Circumference": rng(6.5, 7), "Hand Length": rng(6.6, 6.9)},
                {"Size": "M", "Hand Circumference": rng(7, 7.5), "Hand Length": rng(7.0, 7.3)},
                {"Size": "L", "Hand Circumference": rng(7.5, 8), "Hand Length": rng(7.4, 7.7)},
                {"Size": "XL", "Hand Circumference": rng(8, 8.5), "Hand Length": rng(7.8, 8.1)},
            ],
        },
        "youth": {
            "name": "Youth",
            "description": "Youth glove sizes",
            "rows": [
                {"Size": "YSM", "Hand Circumference": rng(5, 5.5), "Hand Length": rng(5.3, 5.7)},
                {"Size": "YMD", "Hand Circumference": rng(5.5, 6), "Hand Length": rng(5.8, 6.1)},
                {"Size": "YLG", "Hand Circumference": rng(6, 6.5), "Hand Length": rng(6.2, 6.5)},
                {"Size": "YXL", "Hand Circumference": rng(6.5, 7), "Hand Length": rng(6.6, 6.9)},
            ],
        },
    },
}

_HEADWEAR_MENS = [
    {"Size": "S", "Head Circumference": rng(21.25, 21.75), "Hat Size": "6 3/4 - 6 7/8"},
    {"Size": "M", "Head Circumference": rng(21.75, 22.5), "Hat Size": "7 - 7 1/8"},
    {"Size": "L", "Head Circumference": rng(22.5, 23.25), "Hat Size": "7 1/4 - 7 3/8"},
    {"Size": "XL", "Head Circumference": rng(23.25, 24), "Hat Size": "7 1/2 - 7 5/8"},
]

HEADWEAR = {
    "id": "accessories-headwear",
    "name": "Headwear",
    "description": "Hat and cap sizing by head circumference with fitted hat sizes.",
    "category": "accessories",
    "tags": ["accessories", "headwear", "hats", "caps", "mens", "womens", "youth"],
    "suggested_categories": ["mens/headwear", "womens/headwear", "boys/headwear", "girls/headwear"],
    "measurement_instructions": ["head_circumference"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Head Circumference", "type": "MEASUREMENT"},
        {"name": "Hat Size", "type": "TEXT"},
    ],
    "rows": _HEADWEAR_MENS,
    "variants": {
        "mens": {"name": "Men's", "description": "Men's headwear sizes", "rows": _HEADWEAR_MENS},
        "womens": {
            "name": "Women's",
            "description": "Women's headwear sizes",
            "rows": [
                {"Size": "S", "Head Circumference": rng(20.75, 21.25), "Hat Size": "6 5/8 - 6 3/4"},
                {"Size": "M", "Head Circumference": rng(21.25, 22), "Hat Size": "6 7/8 - 7"},
                {"Size": "L", "Head Circumference": rng(22, 22.75), "Hat Size": "7 1/8 - 7 1/4"},
            ],
        },
        "youth": {
            "name": "Youth",
            "description": "Youth headwear sizes",
            "rows": [
                {"Size": "YSM", "Head Circumference": rng(19.5, 20.25), "Hat Size": "6 1/4 - 6 3/8"},
                {"Size": "YMD", "Head Circumference": rng(20.25, 20.75), "Hat Size": "6 1/2 - 6 5/8"},
                {"Size": "YLG", "Head Circumference": rng(20.75, 21.25), "Hat Size": "6 5/8 - 6 3/4"},
            ],
        },
    },
}

_SOCKS_MENS = [
    {"Size": "M", "Shoe Size": "6-8.5", "Foot Length": rng(9.25, 10)},
    {"Size": "L", "Shoe Size": "9-12", "Foot Length": rng(10, 11)},
    {"Size": "XL", "Shoe Size": "12.5-15", "Foot Length": rng(11, 12)},
]

SOCKS = {
    "id": "accessories-socks",
    "name": "Socks",
    "description": "Sock sizing by US shoe size and foot length.",
    "category": "accessories",
    "tags": ["accessories", "socks", "mens", "womens", "youth"],
    "suggested_categories": ["mens/socks", "womens/socks", "boys/socks", "girls/socks"],
    "measurement_instructions": ["foot_length"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Shoe Size", "type": "TEXT"},
        {"name": "Foot Length", "type": "MEASUREMENT"},
    ],
    "rows": _SOCKS_MENS,
    "variants": {
        "mens": {"name": "Men's", "description": "Men's sock sizes", "rows": _SOCKS_MENS},
        "womens": {
            "name": "Women's",
            "description": "Women's sock sizes",
            "rows": [
                {"Size": "S", "Shoe Size": "4-5.5", "Foot Length": rng(8.5, 9.25)},
                {"Size": "M", "Shoe Size": "6-8.5", "Foot Length": rng(9.25, 10)},
                {"Size": "L", "Shoe Size": "9-11", "Foot Length": rng(10, 10.75)},
            ],
        },
        "youth": {
            "name": "Youth",
            "description": "Youth sock sizes",
            "rows": [
                {"Size": "YSM", "Shoe Size": "10C-13C", "Foot Length": rng(6.5, 7.5)},
                {"Size": "YMD", "Shoe Size": "1Y-3Y", "Foot Length": rng(7.5, 8.5)},
                {"Size": "YLG", "Shoe Size": "4Y-6Y", "Foot Length": rng(8.5, 9.5)},
            ],
        },
    },
}

TEMPLATES = [GLOVES, HEADWEAR, SOCKS]
