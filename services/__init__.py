"""
Services package - Business logic layer.
"""

from services.menu_service import MenuItemService

__all__ = ["MenuItemService"]
