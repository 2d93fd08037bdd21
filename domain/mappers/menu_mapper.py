"""
Menu item domain mappers.
Handles transformation between request DTOs, ORM models and response DTOs.
"""

from typing import List

from domain.models import MenuItem
from domain.schemas.menu_schemas import MenuItemCreate, MenuItemResponse


class MenuItemMapper:
    """Mapper for menu item transformations."""

    @staticmethod
    def to_response(item: MenuItem) -> MenuItemResponse:
        """
        Convert MenuItem ORM model to MenuItemResponse DTO.

        Args:
            item: MenuItem ORM instance (JSON list columns already decoded)

        Returns:
            MenuItemResponse DTO with UTC timestamps
        """
        return MenuItemResponse.model_validate(item)

    @staticmethod
    def to_values(
        payload: MenuItemCreate, category: str, dietary_tags: List[str]
    ) -> dict:
        """
        Build the mutable column values from a validated request.

        ``category`` and ``dietary_tags`` are passed in already normalized.
        """
        return {
            "name": payload.name.strip(),
            "description": payload.description or "",
            "price": payload.price,
            "category": category,
            "dietary_tags": list(dietary_tags),
            "ingredients": list(payload.ingredients or []),
        }
