"""Canonical taxonomy definitions for catalogued garments.

This module centralises the garment categories, the outfit slots they fill,
and the fixed option lists used when an outfit has to suggest a purchase.
Helper functions keep validation logic consistent across the store, the
generator and the HTTP layer.
"""

from datetime import timedelta
from typing import Dict, List

UPPER = "Upper"
LOWER = "Lower"
OUTER = "Outer"
SHOES = "Shoes"

CATEGORIES: List[str] = [UPPER, LOWER, OUTER, SHOES]

# Slot names as exposed in an outfit and a lock set.
TOP_SLOT = "top"
BOTTOM_SLOT = "bottom"
SHOES_SLOT = "shoes"
OUTER_SLOT = "outer"

SLOT_CATEGORIES: Dict[str, str] = {
    TOP_SLOT: UPPER,
    BOTTOM_SLOT: LOWER,
    SHOES_SLOT: SHOES,
    OUTER_SLOT: OUTER,
}

# Resolution order of the generator; bottom is the anchor.
SLOT_ORDER: List[str] = [BOTTOM_SLOT, TOP_SLOT, SHOES_SLOT, OUTER_SLOT]

WARM_TOP_SUB_TYPES: List[str] = ["Sweater", "Hoodie"]
LIGHT_TOP_SUB_TYPES: List[str] = ["T-Shirt", "Shirt"]

GHOST_BOTTOM_COLORS: List[str] = ["Black", "Blue", "Beige", "Grey", "Navy"]
GHOST_TOP_COLORS: List[str] = ["White", "Black", "Grey", "Beige", "Navy"]
GHOST_SHOE_COLORS: List[str] = ["White", "Black"]
GHOST_OUTER_COLORS: List[str] = ["Black", "Navy", "Camel", "Grey"]

GHOST_BOTTOM_SUB_TYPE = "Jeans"
GHOST_SHOE_SUB_TYPE = "Sneakers"
GHOST_RAIN_OUTER_SUB_TYPE = "Raincoat"
GHOST_OUTER_SUB_TYPES: List[str] = ["Jacket", "Coat"]

DEFAULT_COLOR_CODE = "#000000"

LAUNDRY_COOLDOWN = timedelta(days=3)


def validate_category(value: str) -> str:
    """Validate a category label and return its canonical spelling.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    key = str(value or "").strip().lower()
    for category in CATEGORIES:
        if category.lower() == key:
            return category
    raise ValueError(f"Unsupported category '{value}'. Allowed: {CATEGORIES}")


def validate_slot(value: str) -> str:
    """Validate an outfit slot name."""

    key = str(value or "").strip().lower()
    if key not in SLOT_CATEGORIES:
        raise ValueError(f"Unsupported slot '{value}'. Allowed: {SLOT_ORDER}")
    return key


def category_for_slot(slot: str) -> str:
    return SLOT_CATEGORIES[validate_slot(slot)]


__all__ = [
    "UPPER",
    "LOWER",
    "OUTER",
    "SHOES",
    "CATEGORIES",
    "TOP_SLOT",
    "BOTTOM_SLOT",
    "SHOES_SLOT",
    "OUTER_SLOT",
    "SLOT_CATEGORIES",
    "SLOT_ORDER",
    "WARM_TOP_SUB_TYPES",
    "LIGHT_TOP_SUB_TYPES",
    "GHOST_BOTTOM_COLORS",
    "GHOST_TOP_COLORS",
    "GHOST_SHOE_COLORS",
    "GHOST_OUTER_COLORS",
    "GHOST_BOTTOM_SUB_TYPE",
    "GHOST_SHOE_SUB_TYPE",
    "GHOST_RAIN_OUTER_SUB_TYPE",
    "GHOST_OUTER_SUB_TYPES",
    "DEFAULT_COLOR_CODE",
    "LAUNDRY_COOLDOWN",
    "validate_category",
    "validate_slot",
    "category_for_slot",
]
