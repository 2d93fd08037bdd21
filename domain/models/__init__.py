"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
    utc_now,
)
from domain.models.menu_item import MenuItem, JSONEncodedList
from domain.models.seed import SEED_MENU_ITEMS, seed_menu_items

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    "utc_now",
    # Menu models
    "MenuItem",
    "JSONEncodedList",
    # Seed data
    "SEED_MENU_ITEMS",
    "seed_menu_items",
]
