"""Pantry stock service."""

import logging

from inventory.errors import NotFound
from inventory.identifiers import parse_id
from inventory.models.pantry import PantryItem
from inventory.schemas.pantry import PantryItemCreate
from inventory.stores.base import CatalogStore, StockStore

logger = logging.getLogger(__name__)


class PantryService:
    """Service for pantry-related operations."""

    def __init__(self, stock: StockStore, catalog: CatalogStore):
        self.stock = stock
        self.catalog = catalog

    def list_items(self) -> list[PantryItem]:
        return self.stock.list_all()

    def get_item(self, raw_id: str) -> PantryItem:
        item_id = parse_id(raw_id, "pantry item")
        item = self.stock.get(item_id)
        if item is None:
            raise NotFound("The requested pantry item was not found")
        return item

    def add_item(self, data: PantryItemCreate) -> PantryItem:
        """Record one unit of a catalog product as on hand."""
        product_id = parse_id(data.product_id, "product")
        if self.catalog.get(product_id) is None:
            raise NotFound(f"Product {product_id} is not in the catalog")

        item = PantryItem(product_id=product_id, purchase_date=data.purchase_date, notes=data.notes)
        self.stock.insert(item)
        logger.info(f"Added pantry item {item.id} for product {product_id}")
        return item

    def delete_item(self, raw_id: str) -> None:
        item_id = parse_id(raw_id, "pantry item")
        if self.stock.delete(item_id) != 1:
            raise NotFound("The requested pantry item was not found")
        logger.info(f"Removed pantry item {item_id}")
