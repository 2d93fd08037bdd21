"""Menu item CRUD routes"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from domain.models import get_db_session
from domain.schemas.menu_schemas import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
)
from domain.mappers import MenuItemMapper
from services.menu_service import MenuItemService
from api.responses import ERROR_RESPONSES

router = APIRouter(prefix="/api/menuitem", tags=["Menu Items"])
logger = logging.getLogger("quickbite.api.menu_items")


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={k: ERROR_RESPONSES[k] for k in (400, 409)},
)
def create_menu_item(
    payload: MenuItemCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db_session),
):
    """Create a menu item. The category is stored lowercase."""
    item = MenuItemService.create_item(db, payload)
    response.headers["Location"] = str(request.url_for("get_menu_item", item_id=item.id))
    return MenuItemMapper.to_response(item)


@router.get("", response_model=List[MenuItemResponse])
def get_all_menu_items(db: Session = Depends(get_db_session)):
    """All menu items ordered by category, then name. Empty list when none exist."""
    items = MenuItemService.list_items(db)
    return [MenuItemMapper.to_response(i) for i in items]


@router.get(
    "/{item_id}",
    response_model=MenuItemResponse,
    responses={k: ERROR_RESPONSES[k] for k in (400, 404)},
)
def get_menu_item(item_id: UUID, db: Session = Depends(get_db_session)):
    item = MenuItemService.get_item(db, item_id)
    return MenuItemMapper.to_response(item)


@router.put(
    "/{item_id}",
    response_model=MenuItemResponse,
    responses=ERROR_RESPONSES,
)
def update_menu_item(
    item_id: UUID, payload: MenuItemUpdate, db: Session = Depends(get_db_session)
):
    """
    Replace every mutable field of a menu item.

    The ``id`` in the body must equal the one in the path.
    """
    item = MenuItemService.update_item(db, item_id, payload)
    return MenuItemMapper.to_response(item)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: ERROR_RESPONSES[404]},
)
def delete_menu_item(item_id: UUID, db: Session = Depends(get_db_session)):
    """Hard-delete a menu item."""
    MenuItemService.delete_item(db, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
