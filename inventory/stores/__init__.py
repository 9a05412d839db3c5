"""Store interfaces and their SQLAlchemy implementations."""

from inventory.stores.base import CatalogStore, ShoppingListStore, StockStore
from inventory.stores.sql import SqlCatalogStore, SqlShoppingListStore, SqlStockStore

__all__ = [
    "CatalogStore",
    "StockStore",
    "ShoppingListStore",
    "SqlCatalogStore",
    "SqlStockStore",
    "SqlShoppingListStore",
]
