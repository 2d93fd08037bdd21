"""
Explicit validation and normalization rules for menu items.

``validate_menu_item`` reports shape problems (lengths, blank name, price
precision) as a list of field errors. Membership in the fixed category and
dietary tag sets is checked separately by the ``normalize_*`` helpers, which
raise ``InvalidArgumentError`` instead.
"""

from dataclasses import dataclass, asdict
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from app.exceptions import InvalidArgumentError
from domain.enums import CATEGORY_VALUES, DietaryTag, parse_category, parse_dietary_tag
from domain.models.menu_item import (
    NAME_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    CATEGORY_MAX_LENGTH,
)

# 15 significant digits: SQLite keeps NUMERIC as a REAL and the wire carries
# price as a JSON number, so anything wider would not come back unchanged
PRICE_MAX = Decimal("9999999999999.99")


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: str

    def to_dict(self) -> dict:
        return asdict(self)


def validate_menu_item(
    name: Optional[str],
    description: Optional[str],
    price: Optional[Decimal],
    category: Optional[str],
) -> List[FieldError]:
    """Return every rule the given values break; an empty list means valid."""
    errors: List[FieldError] = []

    if name is None or not name.strip():
        errors.append(FieldError("name", "Name is required"))
    elif len(name.strip()) > NAME_MAX_LENGTH:
        errors.append(
            FieldError("name", f"Name must be at most {NAME_MAX_LENGTH} characters")
        )

    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                "description",
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            )
        )

    errors.extend(_price_errors(price))

    if category is None or not category.strip():
        errors.append(FieldError("category", "Category is required"))
    elif len(category.strip()) > CATEGORY_MAX_LENGTH:
        errors.append(
            FieldError(
                "category", f"Category must be at most {CATEGORY_MAX_LENGTH} characters"
            )
        )

    return errors


def _price_errors(price: Optional[Decimal]) -> List[FieldError]:
    if price is None:
        return [FieldError("price", "Price is required")]
    try:
        price = Decimal(price)
    except (InvalidOperation, TypeError, ValueError):
        return [FieldError("price", "Price must be a number")]
    if not price.is_finite():
        return [FieldError("price", "Price must be a number")]
    if price <= 0:
        return [FieldError("price", "Price must be greater than 0")]
    if price > PRICE_MAX:
        return [FieldError("price", f"Price must be at most {PRICE_MAX}")]
    if price != price.quantize(Decimal("0.01")):
        return [FieldError("price", "Price must have at most 2 decimal places")]
    return []


def normalize_category(category: str) -> str:
    """Trim and lowercase a category, rejecting anything outside the fixed set."""
    parsed = parse_category(category)
    if parsed is None:
        raise InvalidArgumentError(
            f"Invalid category '{category}'. Valid categories are: {', '.join(CATEGORY_VALUES)}",
            details=[FieldError("category", "Unknown category").to_dict()],
        )
    return parsed.value


def normalize_dietary_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """Map each tag to its wire value, keeping order and duplicates."""
    normalized: List[str] = []
    invalid: List[str] = []
    for tag in tags or []:
        parsed = parse_dietary_tag(tag)
        if parsed is None:
            invalid.append(tag)
        else:
            normalized.append(parsed.value)

    if invalid:
        valid = ", ".join(t.value for t in DietaryTag)
        raise InvalidArgumentError(
            f"Invalid dietary tags: {', '.join(map(str, invalid))}. Valid tags are: {valid}",
            details=[FieldError("dietaryTags", f"Unknown tag '{t}'").to_dict() for t in invalid],
        )
    return normalized
