"""
Menu item model - the catalog's only table.
"""

import json
import uuid

from sqlalchemy import (
    Column,
    String,
    Text,
    Numeric,
    DateTime,
    Uuid,
    CheckConstraint,
    Index,
    func,
)
from sqlalchemy.types import TypeDecorator

from domain.enums import CATEGORY_VALUES
from domain.models.database import Base, utc_now

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
CATEGORY_MAX_LENGTH = 50


def _nocase(length: int) -> String:
    """String column compared case-insensitively (NOCASE collation on SQLite)."""
    return String(length).with_variant(String(length, collation="nocase"), "sqlite")


class JSONEncodedList(TypeDecorator):
    """Stores a list of strings as a JSON array in a text column.

    An empty or missing list is written as ``[]``, never NULL, and element
    order is preserved both ways.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return json.dumps(list(value or []), separators=(",", ":"))

    def process_result_value(self, value, dialect):
        if not value:
            return []
        decoded = json.loads(value)
        return [str(v) for v in decoded] if isinstance(decoded, list) else []


_category_list = ", ".join(f"'{c}'" for c in CATEGORY_VALUES)


class MenuItem(Base):
    """A dish or drink offered on the menu"""

    __tablename__ = "menu_items"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(_nocase(NAME_MAX_LENGTH), nullable=False)
    description = Column(
        _nocase(DESCRIPTION_MAX_LENGTH), nullable=False, default="", server_default=""
    )
    price = Column(Numeric(18, 2), nullable=False)
    # Binary comparison, so the IN check rejects anything not stored lowercase
    category = Column(String(CATEGORY_MAX_LENGTH), nullable=False)
    dietary_tags = Column(JSONEncodedList, nullable=False, default=list)
    ingredients = Column(JSONEncodedList, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_menu_items_price_positive"),
        CheckConstraint("length(trim(name)) > 0", name="ck_menu_items_name_not_empty"),
        CheckConstraint(
            f"category IN ({_category_list})", name="ck_menu_items_category_valid"
        ),
        Index("ix_menu_items_category", "category"),
        Index("ix_menu_items_price", "price"),
        Index("ix_menu_items_name", "name"),
        Index("ix_menu_items_category_price", "category", "price"),
    )

    def __repr__(self):
        return f"<MenuItem(id={self.id}, name='{self.name}', category='{self.category}')>"


# Case-insensitive uniqueness on any backend; closes the read-then-insert race
# left open by the application-level duplicate check.
UNIQUE_NAME_INDEX = "ux_menu_items_name_lower"
Index(UNIQUE_NAME_INDEX, func.lower(MenuItem.name), unique=True)
