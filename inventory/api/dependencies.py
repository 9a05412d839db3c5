"""FastAPI dependencies wiring stores and services to the request session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from inventory.database import get_db
from inventory.services.pantry_service import PantryService
from inventory.services.product_service import ProductService
from inventory.services.shopping_list_service import ShoppingListRegenerator, ShoppingListService
from inventory.stores.base import CatalogStore, ShoppingListStore, StockStore
from inventory.stores.sql import SqlCatalogStore, SqlShoppingListStore, SqlStockStore


def get_catalog_store(db: Annotated[Session, Depends(get_db)]) -> CatalogStore:
    return SqlCatalogStore(db)


def get_stock_store(db: Annotated[Session, Depends(get_db)]) -> StockStore:
    return SqlStockStore(db)


def get_shopping_list_store(db: Annotated[Session, Depends(get_db)]) -> ShoppingListStore:
    return SqlShoppingListStore(db)


def get_product_service(
    catalog: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> ProductService:
    """Get product service with dependencies."""
    return ProductService(catalog)


def get_pantry_service(
    stock: Annotated[StockStore, Depends(get_stock_store)],
    catalog: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> PantryService:
    """Get pantry service with dependencies."""
    return PantryService(stock, catalog)


def get_shopping_list_service(
    catalog: Annotated[CatalogStore, Depends(get_catalog_store)],
    stock: Annotated[StockStore, Depends(get_stock_store)],
    shopping_list: Annotated[ShoppingListStore, Depends(get_shopping_list_store)],
) -> ShoppingListService:
    """Get shopping list service with dependencies."""
    regenerator = ShoppingListRegenerator(catalog, stock, shopping_list)
    return ShoppingListService(shopping_list, regenerator)
