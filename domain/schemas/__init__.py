"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.menu_schemas import (
    CamelModel,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
)

__all__ = [
    "CamelModel",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
]
