"""
Footwear templates: US/UK/EU conversions with foot length
"""

from app.templates.values import val

_SHOE_COLUMNS = [
    {"name": "US", "type": "SHOE_SIZE"},
    {"name": "UK", "type": "SHOE_SIZE"},
    {"name": "EU", "type": "SHOE_SIZE"},
    {"name": "Foot Length", "type": "MEASUREMENT"},
]


def _shoe_rows(sizes):
    return [{"US": us, "UK": uk, "EU": eu, "Foot Length": val(length)} for us, uk, eu, length in sizes]


MENS = {
    "id": "footwear-mens",
    "name": "Men's Footwear",
    "description": "Men's shoe size conversion between US, UK and EU with foot length.",
    "category": "footwear",
    "tags": ["mens", "footwear", "shoes"],
    "suggested_categories": ["mens/footwear"],
    "measurement_instructions": ["foot_length"],
    "columns": _SHOE_COLUMNS,
    "rows": _shoe_rows([
        ("7", "6", "40", 9.63),
        ("8", "7", "41", 9.94),
        ("9", "8", "42", 10.25),
        ("10", "9", "43", 10.56),
        ("11", "10", "44", 10.94),
        ("12", "11", "45", 11.25),
        ("13", "12", "46", 11.56),
    ]),
}

WOMENS = {
    "id": "footwear-womens",
    "name": "Women's Footwear",
    "description": "Women's shoe size conversion between US, UK and EU with foot length.",
    "category": "footwear",
    "tags": ["womens", "footwear", "shoes"],
    "suggested_categories": ["womens/footwear"],
    "measurement_instructions": ["foot_length"],
    "columns": _SHOE_COLUMNS,
    "rows": _shoe_rows([
        ("5", "3", "35", 8.75),
        ("6", "4", "36", 9.06),
        ("7", "5", "38", 9.38),
        ("8", "6", "39", 9.69),
        ("9", "7", "40", 10.0),
        ("10", "8", "41", 10.31),
        ("11", "9", "42", 10.69),
    ]),
}

KIDS = {
    "id": "footwear-kids",
    "name": "Kids' Footwear",
    "description": "Little kid (C) and big kid (Y) shoe sizes with EU conversion and foot length.",
    "category": "footwear",
    "tags": ["youth", "kids", "footwear", "shoes"],
    "suggested_categories": ["boys/footwear", "girls/footwear"],
    "measurement_instructions": ["foot_length"],
    "columns": _SHOE_COLUMNS,
    "rows": _shoe_rows([
        ("10C", "9.5", "27", 6.5),
        ("11C", "10.5", "28", 6.75),
        ("12C", "11.5", "30", 7.13),
        ("13C", "12.5", "31", 7.5),
        ("1Y", "13.5", "32", 7.88),
        ("2Y", "1.5", "33", 8.13),
        ("3Y", "2.5", "34", 8.5),
        ("4Y", "3.5", "36", 8.88),
        ("5Y", "4.5", "37", 9.13),
        ("6Y", "5.5", "38", 9.5),
    ]),
}

TEMPLATES = [MENS, WOMENS, KIDS]
