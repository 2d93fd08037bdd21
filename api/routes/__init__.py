"""API routes package"""

from . import menu_items, health

__all__ = ["menu_items", "health"]
