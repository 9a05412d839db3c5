"""Pydantic schemas for API requests and responses."""

from inventory.schemas.pantry import PantryItemCreate, PantryItemResponse
from inventory.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from inventory.schemas.shopping_list import ShoppingListEntryCreate, ShoppingListEntryResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "PantryItemCreate",
    "PantryItemResponse",
    "ShoppingListEntryCreate",
    "ShoppingListEntryResponse",
]
