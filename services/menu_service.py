"""Menu item service - catalog CRUD with validation and normalization."""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import MenuItem, utc_now
from domain.schemas.menu_schemas import MenuItemCreate, MenuItemUpdate
from domain.mappers import MenuItemMapper
from domain.validation import (
    validate_menu_item,
    normalize_category,
    normalize_dietary_tags,
)
from repositories import MenuItemRepository
from app.exceptions import ServiceValidationError, NotFoundError, ConflictError

logger = logging.getLogger("quickbite.menu")


class MenuItemService:
    """Business logic for the menu catalog."""

    @staticmethod
    def _validated_values(payload: MenuItemCreate) -> dict:
        """
        Check a create/update body and return normalized column values.

        Nothing touches the store here, so a rejected request never
        leaves a partial write behind.

        Raises:
            ServiceValidationError: missing or malformed fields
            InvalidArgumentError: unknown category or dietary tag
        """
        errors = validate_menu_item(
            payload.name, payload.description, payload.price, payload.category
        )
        if errors:
            logger.warning(
                f"menu_item_validation_failed fields={[e.field for e in errors]}"
            )
            raise ServiceValidationError(
                "One or more validation errors occurred.",
                details=[e.to_dict() for e in errors],
            )

        category = normalize_category(payload.category)
        dietary_tags = normalize_dietary_tags(payload.dietary_tags)
        return MenuItemMapper.to_values(payload, category, dietary_tags)

    @staticmethod
    def create_item(db: Session, payload: MenuItemCreate) -> MenuItem:
        """Create a menu item with a fresh id and createdAt == updatedAt."""
        values = MenuItemService._validated_values(payload)
        repo = MenuItemRepository(db)

        if repo.get_by_name(values["name"]) is not None:
            logger.warning(f"menu_item_duplicate name={values['name']!r}")
            raise ConflictError(
                f"Menu item with name '{values['name']}' already exists."
            )

        now = utc_now()
        item = repo.create(MenuItem(**values, created_at=now, updated_at=now))
        logger.info(f"menu_item_created id={item.id} name={item.name!r}")
        return item

    @staticmethod
    def get_item(db: Session, item_id: UUID) -> MenuItem:
        logger.info(f"menu_item_fetch id={item_id}")
        item = MenuItemRepository(db).get_by_id(item_id)
        if item is None:
            logger.warning(f"menu_item_not_found id={item_id}")
            raise NotFoundError(f"Menu item with ID '{item_id}' not found.")
        return item

    @staticmethod
    def list_items(db: Session) -> List[MenuItem]:
        """Every menu item, ordered by category then name."""
        items = MenuItemRepository(db).get_all()
        logger.info(f"menu_items_listed count={len(items)}")
        return items

    @staticmethod
    def update_item(db: Session, item_id: UUID, payload: MenuItemUpdate) -> MenuItem:
        """
        Replace every mutable field of an existing item.

        Raises:
            ServiceValidationError: body id differs from path id, or bad fields
            InvalidArgumentError: unknown category or dietary tag
            NotFoundError: no item with this id
            ConflictError: the new name belongs to another item
        """
        if payload.id != item_id:
            logger.warning(f"menu_item_id_mismatch path={item_id} body={payload.id}")
            raise ServiceValidationError(
                "ID in route does not match ID in request body.",
                details=[{"field": "id", "reason": "Must equal the id in the path"}],
            )

        values = MenuItemService._validated_values(payload)
        repo = MenuItemRepository(db)

        if not repo.exists(item_id):
            logger.warning(f"menu_item_not_found id={item_id}")
            raise NotFoundError(f"Menu item with ID '{item_id}' not found.")

        same_name = repo.get_by_name(values["name"])
        if same_name is not None and same_name.id != item_id:
            logger.warning(f"menu_item_duplicate name={values['name']!r}")
            raise ConflictError(
                f"Menu item with name '{values['name']}' already exists."
            )

        item = repo.update(item_id, values)
        logger.info(f"menu_item_updated id={item.id} name={item.name!r}")
        return item

    @staticmethod
    def delete_item(db: Session, item_id: UUID) -> None:
        """Hard-delete an item; raises NotFoundError when it does not exist."""
        MenuItemRepository(db).delete(item_id)
        logger.info(f"menu_item_deleted id={item_id}")
