"""
Domain enums for QuickBite application.
Fixed label sets for menu items and the lookup tables that map them to
their wire-format strings.
"""

import enum
from typing import Dict, Optional


class MenuCategory(str, enum.Enum):
    """Menu sections. Values are the stored (lowercase) form."""

    APPETIZERS = "appetizers"
    MAINS = "mains"
    DESSERTS = "desserts"
    BEVERAGES = "beverages"


class DietaryTag(str, enum.Enum):
    """Dietary labels. Values are the kebab-case wire form."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    NUT_FREE = "nut-free"
    HALAL = "halal"
    KOSHER = "kosher"
    LOW_CARB = "low-carb"
    KETO = "keto"
    SPICY = "spicy"


CATEGORY_VALUES = tuple(c.value for c in MenuCategory)

# PascalCase label <-> wire value. Kept as a literal table so adding a tag
# without a label is caught by tests rather than derived at runtime.
DIETARY_TAG_NAMES: Dict[str, DietaryTag] = {
    "Vegetarian": DietaryTag.VEGETARIAN,
    "Vegan": DietaryTag.VEGAN,
    "GlutenFree": DietaryTag.GLUTEN_FREE,
    "DairyFree": DietaryTag.DAIRY_FREE,
    "NutFree": DietaryTag.NUT_FREE,
    "Halal": DietaryTag.HALAL,
    "Kosher": DietaryTag.KOSHER,
    "LowCarb": DietaryTag.LOW_CARB,
    "Keto": DietaryTag.KETO,
    "Spicy": DietaryTag.SPICY,
}

DIETARY_TAG_LABELS: Dict[DietaryTag, str] = {
    tag: name for name, tag in DIETARY_TAG_NAMES.items()
}

_DIETARY_TAG_LOOKUP: Dict[str, DietaryTag] = {
    **{tag.value: tag for tag in DietaryTag},
    **{name.lower(): tag for name, tag in DIETARY_TAG_NAMES.items()},
}


def parse_dietary_tag(value: str) -> Optional[DietaryTag]:
    """Resolve a wire value ("gluten-free") or label ("GlutenFree"), ignoring case."""
    if not isinstance(value, str):
        return None
    return _DIETARY_TAG_LOOKUP.get(value.strip().lower())


def parse_category(value: str) -> Optional[MenuCategory]:
    if not isinstance(value, str):
        return None
    try:
        return MenuCategory(value.strip().lower())
    except ValueError:
        return None
