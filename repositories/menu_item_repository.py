"""
Menu Item Repository - Data access layer for the menu catalog
"""

import logging
from contextlib import contextmanager
from typing import Any, List, Mapping, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import (
    ConflictError,
    ConstraintViolationError,
    NotFoundError,
    StorageError,
)
from domain.models import MenuItem, utc_now
from domain.models.menu_item import UNIQUE_NAME_INDEX
from repositories.base import BaseRepository

logger = logging.getLogger("quickbite.repository.menu")

# Everything except id and created_at may be replaced by an update
MUTABLE_FIELDS = (
    "name",
    "description",
    "price",
    "category",
    "dietary_tags",
    "ingredients",
)


class MenuItemRepository(BaseRepository[MenuItem]):
    """Repository for menu item data access"""

    def __init__(self, db: Session):
        super().__init__(db, MenuItem)

    @contextmanager
    def _reading(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"menu_item_read_failed action={action} error={e}")
            raise StorageError("Could not read menu items") from e

    def get_by_id(self, entity_id: UUID) -> Optional[MenuItem]:
        with self._reading("get_by_id"):
            return super().get_by_id(entity_id)

    def get_by_name(self, name: str) -> Optional[MenuItem]:
        """Get menu item by exact name, ignoring case and surrounding whitespace"""
        # Both sides folded by the store, the same way ux_menu_items_name_lower is
        with self._reading("get_by_name"):
            return (
                self.db.query(MenuItem)
                .filter(func.lower(MenuItem.name) == func.lower(name.strip()))
                .first()
            )

    def get_all(self) -> List[MenuItem]:
        """All menu items ordered by category, then name"""
        with self._reading("get_all"):
            return (
                self.db.query(MenuItem)
                .order_by(MenuItem.category, func.lower(MenuItem.name), MenuItem.name)
                .all()
            )

    def count(self) -> int:
        with self._reading("count"):
            return super().count()

    def create(self, item: MenuItem) -> MenuItem:
        """Insert a menu item; id and timestamps fall back to column defaults"""
        try:
            return super().create(item)
        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(e, item.name) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"menu_item_insert_failed name={item.name!r} error={e}")
            raise StorageError("Could not save menu item") from e

    def update(self, item_id: UUID, values: Mapping[str, Any]) -> MenuItem:
        """
        Replace the mutable fields of a menu item and refresh updated_at.

        Raises:
            NotFoundError: no item with this id
        """
        item = self.get_by_id(item_id)
        if item is None:
            raise NotFoundError(f"Menu item with ID '{item_id}' not found.")

        for key in MUTABLE_FIELDS:
            if key in values:
                setattr(item, key, values[key])
        item.updated_at = utc_now()

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(e, values.get("name", item.name)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"menu_item_update_failed id={item_id} error={e}")
            raise StorageError("Could not update menu item") from e

        self.db.refresh(item)
        return item

    def delete(self, item_id: UUID) -> bool:
        """
        Hard-delete a menu item.

        Raises:
            NotFoundError: no item with this id
        """
        try:
            deleted = super().delete(item_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"menu_item_delete_failed id={item_id} error={e}")
            raise StorageError("Could not delete menu item") from e

        if not deleted:
            raise NotFoundError(f"Menu item with ID '{item_id}' not found.")
        return True

    @staticmethod
    def _integrity_error(error: IntegrityError, name: str) -> Exception:
        message = str(error.orig)
        # SQLite and PostgreSQL both name the violated index in the message
        if UNIQUE_NAME_INDEX in message or "unique" in message.lower():
            return ConflictError(f"Menu item with name '{name}' already exists.")
        logger.error(f"menu_item_constraint_violation name={name!r} error={message}")
        return ConstraintViolationError("Menu item violates a storage constraint")
