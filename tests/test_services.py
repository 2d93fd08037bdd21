"""
Tests for MenuItemService business logic.

Covers normalization (category, dietary tags, name trimming), duplicate
detection, timestamp handling and the fail-fast validation order.
"""

import pytest
import uuid
from decimal import Decimal
from unittest.mock import patch
from sqlalchemy.orm import Session

from test_fixtures import db_session, make_menu_payload
from app.exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ServiceValidationError,
)
from domain.schemas.menu_schemas import MenuItemCreate, MenuItemUpdate
from repositories import MenuItemRepository
from services.menu_service import MenuItemService


def create_payload(profile="wrap", **overrides) -> MenuItemCreate:
    return MenuItemCreate(**make_menu_payload(profile, **overrides))


def update_payload(item_id, profile="wrap", **overrides) -> MenuItemUpdate:
    return MenuItemUpdate(id=item_id, **make_menu_payload(profile, **overrides))


# =============================================================================
# CREATE
# =============================================================================


def test_create_normalizes_and_stamps(db_session: Session):
    item = MenuItemService.create_item(
        db_session,
        create_payload(name="  Veggie Wrap ", category=" MAINS ", dietaryTags=["Vegetarian", "GlutenFree"]),
    )

    assert item.name == "Veggie Wrap"
    assert item.category == "mains"
    assert item.dietary_tags == ["vegetarian", "gluten-free"]
    assert item.ingredients == ["tortilla", "lettuce"]
    assert item.created_at == item.updated_at


def test_create_generates_fresh_ids(db_session: Session):
    ids = {
        MenuItemService.create_item(db_session, create_payload(p)).id
        for p in ("wrap", "bruschetta", "tiramisu", "lemonade")
    }
    assert len(ids) == 4


def test_create_defaults_optional_fields(db_session: Session):
    payload = MenuItemCreate(name="Still Water", price=Decimal("2.00"), category="beverages")
    item = MenuItemService.create_item(db_session, payload)

    assert item.description == ""
    assert item.dietary_tags == []
    assert item.ingredients == []


def test_create_duplicate_name_is_case_insensitive(db_session: Session):
    MenuItemService.create_item(db_session, create_payload(name="Pizza"))

    with pytest.raises(ConflictError):
        MenuItemService.create_item(db_session, create_payload(name="pizza"))

    assert MenuItemRepository(db_session).count() == 1


@pytest.mark.parametrize("category", ["sides", "main", "Drinks", "appetizer"])
def test_create_rejects_unknown_category(db_session: Session, category):
    with pytest.raises(InvalidArgumentError):
        MenuItemService.create_item(db_session, create_payload(category=category))


def test_create_rejects_unknown_dietary_tag(db_session: Session):
    with pytest.raises(InvalidArgumentError):
        MenuItemService.create_item(db_session, create_payload(dietaryTags=["vegan", "paleo"]))


def test_create_validation_fails_before_touching_store(db_session: Session):
    with patch.object(MenuItemRepository, "get_by_name") as get_by_name, patch.object(
        MenuItemRepository, "create"
    ) as create:
        with pytest.raises(ServiceValidationError) as exc_info:
            MenuItemService.create_item(
                db_session, create_payload(name=" ", price=Decimal("0"))
            )

    get_by_name.assert_not_called()
    create.assert_not_called()
    assert {d["field"] for d in exc_info.value.details} == {"name", "price"}


# =============================================================================
# READ
# =============================================================================


def test_get_item_and_not_found(db_session: Session):
    created = MenuItemService.create_item(db_session, create_payload())

    assert MenuItemService.get_item(db_session, created.id).name == "Veggie Wrap"
    with pytest.raises(NotFoundError):
        MenuItemService.get_item(db_session, uuid.uuid4())


def test_list_items_empty_and_ordered(db_session: Session):
    assert MenuItemService.list_items(db_session) == []

    for profile in ("wrap", "lemonade", "tiramisu", "bruschetta"):
        MenuItemService.create_item(db_session, create_payload(profile))

    categories = [i.category for i in MenuItemService.list_items(db_session)]
    assert categories == ["appetizers", "beverages", "desserts", "mains"]


# =============================================================================
# UPDATE
# =============================================================================


def test_update_overwrites_all_mutable_fields(db_session: Session):
    created = MenuItemService.create_item(db_session, create_payload())
    created_at = created.created_at

    updated = MenuItemService.update_item(
        db_session,
        created.id,
        update_payload(
            created.id,
            "tiramisu",
            category="Desserts",
            dietaryTags=[],
            price=Decimal("7.00"),
        ),
    )

    assert updated.id == created.id
    assert updated.name == "Tiramisu"
    assert updated.category == "desserts"
    assert updated.price == Decimal("7.00")
    assert updated.dietary_tags == []
    assert updated.created_at == created_at
    assert updated.updated_at > updated.created_at


def test_update_keeping_own_name_is_allowed(db_session: Session):
    created = MenuItemService.create_item(db_session, create_payload())

    updated = MenuItemService.update_item(
        db_session, created.id, update_payload(created.id, name="VEGGIE WRAP")
    )
    assert updated.name == "VEGGIE WRAP"


def test_update_id_mismatch_leaves_record_untouched(db_session: Session):
    created = MenuItemService.create_item(db_session, create_payload())

    with pytest.raises(ServiceValidationError):
        MenuItemService.update_item(
            db_session, created.id, update_payload(uuid.uuid4(), price=Decimal("99.00"))
        )
    with pytest.raises(ServiceValidationError):
        MenuItemService.update_item(
            db_session, created.id, update_payload(None, price=Decimal("99.00"))
        )

    db_session.expire_all()
    assert MenuItemService.get_item(db_session, created.id).price == Decimal("9.50")


def test_update_missing_item(db_session: Session):
    missing = uuid.uuid4()
    with pytest.raises(NotFoundError):
        MenuItemService.update_item(db_session, missing, update_payload(missing))


def test_update_rejects_unknown_category(db_session: Session):
    created = MenuItemService.create_item(db_session, create_payload())
    with pytest.raises(InvalidArgumentError):
        MenuItemService.update_item(
            db_session, created.id, update_payload(created.id, category="brunch")
        )


def test_update_onto_other_items_name_conflicts(db_session: Session):
    MenuItemService.create_item(db_session, create_payload("tiramisu"))
    wrap = MenuItemService.create_item(db_session, create_payload("wrap"))

    with pytest.raises(ConflictError):
        MenuItemService.update_item(
            db_session, wrap.id, update_payload(wrap.id, name="tiramisu")
        )


# =============================================================================
# DELETE
# =============================================================================


def test_delete_item_twice(db_session: Session):
    created = MenuItemService.create_item(db_session, create_payload())

    MenuItemService.delete_item(db_session, created.id)
    with pytest.raises(NotFoundError):
        MenuItemService.delete_item(db_session, created.id)
