"""
Sample menu items inserted into an empty catalog.
"""

import logging
import uuid
from decimal import Decimal

from sqlalchemy.orm import Session

from domain.models.database import utc_now
from domain.models.menu_item import MenuItem

logger = logging.getLogger("quickbite.seed")

SEED_MENU_ITEMS = [
    {
        "id": uuid.UUID("11111111-1111-1111-1111-111111111111"),
        "name": "Margherita Pizza",
        "description": "Fresh tomatoes, mozzarella, basil on thin crust",
        "price": Decimal("12.99"),
        "category": "mains",
        "dietary_tags": ["vegetarian"],
        "ingredients": ["tomatoes", "mozzarella", "basil", "pizza dough", "olive oil"],
    },
    {
        "id": uuid.UUID("22222222-2222-2222-2222-222222222222"),
        "name": "Caesar Salad",
        "description": "Crisp romaine lettuce with parmesan and croutons",
        "price": Decimal("8.99"),
        "category": "appetizers",
        "dietary_tags": ["vegetarian"],
        "ingredients": ["romaine lettuce", "parmesan cheese", "croutons", "caesar dressing"],
    },
    {
        "id": uuid.UUID("33333333-3333-3333-3333-333333333333"),
        "name": "Chocolate Cake",
        "description": "Rich chocolate cake with chocolate frosting",
        "price": Decimal("6.99"),
        "category": "desserts",
        "dietary_tags": ["vegetarian"],
        "ingredients": ["chocolate", "flour", "sugar", "eggs", "butter"],
    },
    {
        "id": uuid.UUID("44444444-4444-4444-4444-444444444444"),
        "name": "Fresh Orange Juice",
        "description": "Freshly squeezed orange juice",
        "price": Decimal("4.99"),
        "category": "beverages",
        "dietary_tags": ["vegan", "gluten-free"],
        "ingredients": ["oranges"],
    },
]


def seed_menu_items(db: Session) -> int:
    """
    Insert the sample menu items if the catalog is empty.

    Safe to call on every startup: a non-empty table is left untouched.

    Returns:
        Number of items inserted (0 when seeding was skipped)
    """
    if db.query(MenuItem.id).first() is not None:
        logger.info("Database already contains data, skipping seeding")
        return 0

    logger.info("Database is empty, seeding with initial data")
    now = utc_now()
    try:
        for data in SEED_MENU_ITEMS:
            item = MenuItem(**data, created_at=now, updated_at=now)
            # Copies, so the module-level lists are never shared with the session
            item.dietary_tags = list(data["dietary_tags"])
            item.ingredients = list(data["ingredients"])
            db.add(item)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("An error occurred while seeding the database")
        raise

    logger.info(f"Database seeding completed items={len(SEED_MENU_ITEMS)}")
    return len(SEED_MENU_ITEMS)
