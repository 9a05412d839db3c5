"""Shopping list service: manual entry editing and full regeneration."""

import logging

from inventory.errors import NotFound, ValidationFailure
from inventory.identifiers import parse_id
from inventory.models.shopping_list import ShoppingListEntry
from inventory.schemas.shopping_list import ShoppingListEntryCreate
from inventory.services.restock import compute_restock
from inventory.stores.base import CatalogStore, ShoppingListStore, StockStore

logger = logging.getLogger(__name__)

MAX_QUANTITY = 1_000_000


class ShoppingListRegenerator:
    """Rebuilds the shopping list from the current catalog and pantry stock.

    The catalog and stock are read before the list is touched, so a failed
    read leaves the list as it was. The replace itself is a single store
    transaction. Running it twice with unchanged inputs yields the same list.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        stock: StockStore,
        shopping_list: ShoppingListStore,
    ):
        self.catalog = catalog
        self.stock = stock
        self.shopping_list = shopping_list

    def regenerate(self) -> list[ShoppingListEntry]:
        products = self.catalog.list_all()
        pantry_items = self.stock.list_all()
        restock = compute_restock(products, pantry_items)
        logger.info(
            f"Regenerating shopping list: {len(restock)} of {len(products)} products "
            f"below threshold ({len(pantry_items)} pantry items)"
        )

        entries = [
            ShoppingListEntry(
                product_id=entry.product_id,
                name=entry.product_name,
                quantity=entry.quantity,
            )
            for entry in restock
        ]
        saved = self.shopping_list.replace_all(entries)
        logger.info(f"Shopping list regenerated with {len(saved)} entries")
        return saved


class ShoppingListService:
    """Service for shopping list operations."""

    def __init__(self, shopping_list: ShoppingListStore, regenerator: ShoppingListRegenerator):
        self.shopping_list = shopping_list
        self.regenerator = regenerator

    def list_entries(self) -> list[ShoppingListEntry]:
        return self.shopping_list.list_all()

    def get_entry(self, raw_id: str) -> ShoppingListEntry:
        entry_id = parse_id(raw_id, "shopping list entry")
        entry = self.shopping_list.get(entry_id)
        if entry is None:
            raise NotFound("The requested shopping list entry was not found")
        return entry

    def add_entry(self, data: ShoppingListEntryCreate) -> ShoppingListEntry:
        if not data.name.strip():
            raise ValidationFailure("Shopping list entry must have a non-empty name")
        if data.quantity <= 0:
            raise ValidationFailure("Shopping list quantity must be greater than zero")
        if data.quantity > MAX_QUANTITY:
            raise ValidationFailure(f"Shopping list quantity must be at most {MAX_QUANTITY}")
        if not data.product_id.strip():
            raise ValidationFailure("Shopping list entry must have a non-empty product ID")
        product_id = parse_id(data.product_id, "product")

        entry = ShoppingListEntry(product_id=product_id, name=data.name, quantity=data.quantity)
        self.shopping_list.insert(entry)
        logger.info(f"Added shopping list entry '{entry.name}' x{entry.quantity}")
        return entry

    def delete_entry(self, raw_id: str) -> None:
        entry_id = parse_id(raw_id, "shopping list entry")
        if self.shopping_list.delete(entry_id) != 1:
            raise NotFound("The requested shopping list entry was not found")
        logger.info(f"Deleted shopping list entry {entry_id}")

    def regenerate(self) -> list[ShoppingListEntry]:
        """Replace the whole list with the current restock deficits."""
        return self.regenerator.regenerate()
