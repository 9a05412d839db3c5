"""SQLAlchemy models."""

from inventory.models.pantry import PantryItem
from inventory.models.product import Product
from inventory.models.shopping_list import ShoppingListEntry

__all__ = [
    "Product",
    "PantryItem",
    "ShoppingListEntry",
]
