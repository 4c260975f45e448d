"""
Adult apparel templates
"""

from app.templates.values import rng, val

MENS_TOPS = {
    "id": "apparel-mens-tops",
    "name": "Men's Tops",
    "description": "Standard men's shirt, t-shirt and sweater sizing by chest and waist.",
    "category": "apparel",
    "tags": ["mens", "tops", "shirts", "t-shirts", "apparel"],
    "suggested_categories": ["mens/tops"],
    "measurement_instructions": ["chest", "waist"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Chest", "type": "MEASUREMENT"},
        {"name": "Waist", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "XS", "Chest": rng(32, 34), "Waist": rng(26, 28)},
        {"Size": "S", "Chest": rng(35, 37), "Waist": rng(29, 31)},
        {"Size": "M", "Chest": rng(38, 40), "Waist": rng(32, 34)},
        {"Size": "L", "Chest": rng(41, 43), "Waist": rng(35, 37)},
        {"Size": "XL", "Chest": rng(44, 46), "Waist": rng(38, 40)},
        {"Size": "XXL", "Chest": rng(47, 49), "Waist": rng(41, 43)},
        {"Size": "3XL", "Chest": rng(50, 52), "Waist": rng(44, 46)},
    ],
}

MENS_BOTTOMS = {
    "id": "apparel-mens-bottoms",
    "name": "Men's Bottoms",
    "description": "Men's pants, shorts and jeans sizing by waist, hip and inseam.",
    "category": "apparel",
    "tags": ["mens", "bottoms", "pants", "shorts", "apparel"],
    "suggested_categories": ["mens/bottoms"],
    "measurement_instructions": ["waist", "hip", "inseam"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Hip", "type": "MEASUREMENT"},
        {"name": "Inseam", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "XS", "Waist": rng(26, 28), "Hip": rng(32, 34), "Inseam": val(30)},
        {"Size": "S", "Waist": rng(29, 31), "Hip": rng(35, 37), "Inseam": val(30)},
        {"Size": "M", "Waist": rng(32, 34), "Hip": rng(38, 40), "Inseam": val(32)},
        {"Size": "L", "Waist": rng(35, 37), "Hip": rng(41, 43), "Inseam": val(32)},
        {"Size": "XL", "Waist": rng(38, 40), "Hip": rng(44, 46), "Inseam": val(32)},
        {"Size": "XXL", "Waist": rng(41, 43), "Hip": rng(47, 49), "Inseam": val(32)},
    ],
}

WOMENS_TOPS = {
    "id": "apparel-womens-tops",
    "name": "Women's Tops",
    "description": "Women's blouse, shirt and knit top sizing with numeric equivalents.",
    "category": "apparel",
    "tags": ["womens", "tops", "shirts", "blouses", "apparel"],
    "suggested_categories": ["womens/tops"],
    "measurement_instructions": ["chest", "waist", "hip"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Numeric Size", "type": "TEXT"},
        {"name": "Bust", "type": "MEASUREMENT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Hip", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "XS", "Numeric Size": "0-2", "Bust": rng(31, 32), "Waist": rng(24, 25), "Hip": rng(34, 35)},
        {"Size": "S", "Numeric Size": "4-6", "Bust": rng(33, 34), "Waist": rng(26, 27), "Hip": rng(36, 37)},
        {"Size": "M", "Numeric Size": "8-10", "Bust": rng(35, 36), "Waist": rng(28, 29), "Hip": rng(38, 39)},
        {"Size": "L", "Numeric Size": "12-14", "Bust": rng(37.5, 39), "Waist": rng(30.5, 32), "Hip": rng(40.5, 42)},
        {"Size": "XL", "Numeric Size": "16-18", "Bust": rng(40.5, 42), "Waist": rng(33.5, 35), "Hip": rng(43.5, 45)},
        {"Size": "XXL", "Numeric Size": "20", "Bust": rng(43.5, 45), "Waist": rng(36.5, 38), "Hip": rng(46.5, 48)},
    ],
}

WOMENS_SPORTS_BRAS = {
    "id": "apparel-womens-sports-bras",
    "name": "Women's Sports Bras",
    "description": "Sports bra sizing by band and cup with bust and underband ranges.",
    "category": "apparel",
    "tags": ["womens", "bras", "sports-bras", "activewear", "apparel"],
    "suggested_categories": ["womens/bras"],
    "measurement_instructions": ["band_size", "cup_size", "chest"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Band Size", "type": "BAND_SIZE"},
        {"name": "Cup Size", "type": "CUP_SIZE"},
        {"name": "Bust", "type": "MEASUREMENT"},
        {"name": "Underband", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "XS", "Band Size": "30-32", "Cup Size": "A-B", "Bust": rng(30, 32), "Underband": rng(26, 28)},
        {"Size": "S", "Band Size": "32-34", "Cup Size": "A-C", "Bust": rng(32, 34), "Underband": rng(28, 30)},
        {"Size": "M", "Band Size": "34-36", "Cup Size": "B-D", "Bust": rng(35, 37), "Underband": rng(30, 32)},
        {"Size": "L", "Band Size": "36-38", "Cup Size": "C-DD", "Bust": rng(38, 40), "Underband": rng(32, 34)},
        {"Size": "XL", "Band Size": "38-40", "Cup Size": "C-DD", "Bust": rng(41, 43), "Underband": rng(34, 36)},
    ],
}

WOMENS_BOTTOMS = {
    "id": "apparel-womens-bottoms",
    "name": "Women's Bottoms",
    "description": "Women's pants, leggings and skirts sizing by waist, hip and inseam.",
    "category": "apparel",
    "tags": ["womens", "bottoms", "pants", "leggings", "apparel"],
    "suggested_categories": ["womens/bottoms"],
    "measurement_instructions": ["waist", "hip", "inseam"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Numeric Size", "type": "TEXT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Hip", "type": "MEASUREMENT"},
        {"name": "Inseam", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "XS", "Numeric Size": "0-2", "Waist": rng(24, 25), "Hip": rng(34, 35), "Inseam": val(30)},
        {"Size": "S", "Numeric Size": "4-6", "Waist": rng(26, 27), "Hip": rng(36, 37), "Inseam": val(30)},
        {"Size": "M", "Numeric Size": "8-10", "Waist": rng(28, 29), "Hip": rng(38, 39), "Inseam": val(30.5)},
        {"Size": "L", "Numeric Size": "12-14", "Waist": rng(30.5, 32), "Hip": rng(40.5, 42), "Inseam": val(31)},
        {"Size": "XL", "Numeric Size": "16-18", "Waist": rng(33.5, 35), "Hip": rng(43.5, 45), "Inseam": val(31)},
        {"Size": "XXL", "Numeric Size": "20", "Waist": rng(36.5, 38), "Hip": rng(46.5, 48), "Inseam": val(31)},
    ],
}

WOMENS_PLUS_SIZES = {
    "id": "apparel-womens-plus-sizes",
    "name": "Women's Plus Sizes",
    "description": "Women's plus size tops, dresses and bottoms from 1X to 4X.",
    "category": "apparel",
    "tags": ["womens", "plus-size", "tops", "bottoms", "apparel"],
    "suggested_categories": ["womens/plus-sizes"],
    "measurement_instructions": ["chest", "waist", "hip"],
    "columns": [
        {"name": "Size", "type": "SIZE_LABEL"},
        {"name": "Numeric Size", "type": "TEXT"},
        {"name": "Bust", "type": "MEASUREMENT"},
        {"name": "Waist", "type": "MEASUREMENT"},
        {"name": "Hip", "type": "MEASUREMENT"},
    ],
    "rows": [
        {"Size": "1X", "Numeric Size": "14-16", "Bust": rng(42, 44), "Waist": rng(35, 37), "Hip": rng(45, 47)},
        {"Size": "2X", "Numeric Size": "18-20", "Bust": rng(45, 47), "Waist": rng(38, 40), "Hip": rng(48, 50)},
        {"Size": "3X", "Numeric Size": "22-24", "Bust": rng(48, 50), "Waist": rng(41, 43), "Hip": rng(51, 53)},
        {"Size": "4X", "Numeric Size": "26-28", "Bust": rng(51, 53), "Waist": rng(44, 46), "Hip": rng(54, 56)},
    ],
}

TEMPLATES = [
    MENS_TOPS,
    MENS_BOTTOMS,
    WOMENS_TOPS,
    WOMENS_SPORTS_BRAS,
    WOMENS_BOTTOMS,
    WOMENS_PLUS_SIZES,
]
