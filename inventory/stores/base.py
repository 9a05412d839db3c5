"""Store contracts consumed by the services.

Implementations raise ``StorageUnavailable`` when the backing store fails and
leave no partial mutation behind.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from inventory.models.pantry import PantryItem
from inventory.models.product import Product
from inventory.models.shopping_list import ShoppingListEntry
from inventory.services.product_query import ProductFilter, ProductOrdering


class CatalogStore(ABC):
    """Product catalog."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Snapshot of every product."""

    @abstractmethod
    def find(self, product_filter: ProductFilter, ordering: ProductOrdering) -> list[Product]:
        """Products matching the filter, in the given order."""

    @abstractmethod
    def get(self, product_id: str) -> Product | None:
        """Retrieve a product by id."""

    @abstractmethod
    def insert(self, product: Product) -> str:
        """Store a new product and return its id."""

    @abstractmethod
    def update_fields(self, product_id: str, fields: Mapping[str, Any]) -> int:
        """Set the given fields on a product. Returns the number of products matched."""

    def update_field(self, product_id: str, field: str, value: Any) -> int:
        """Set a single field on a product."""
        return self.update_fields(product_id, {field: value})

    @abstractmethod
    def delete(self, product_id: str) -> int:
        """Delete a product. Returns the number deleted."""


class StockStore(ABC):
    """Pantry stock, one record per unit on hand."""

    @abstractmethod
    def list_all(self) -> list[PantryItem]:
        """Snapshot of every pantry item."""

    @abstractmethod
    def get(self, item_id: str) -> PantryItem | None:
        """Retrieve a pantry item by id."""

    @abstractmethod
    def insert(self, item: PantryItem) -> str:
        """Store a new pantry item and return its id."""

    @abstractmethod
    def delete(self, item_id: str) -> int:
        """Delete a pantry item. Returns the number deleted."""


class ShoppingListStore(ABC):
    """Shopping list entries."""

    @abstractmethod
    def list_all(self) -> list[ShoppingListEntry]:
        """Every entry, ordered by name."""

    @abstractmethod
    def get(self, entry_id: str) -> ShoppingListEntry | None:
        """Retrieve an entry by id."""

    @abstractmethod
    def insert(self, entry: ShoppingListEntry) -> str:
        """Store a new entry and return its id."""

    @abstractmethod
    def delete(self, entry_id: str) -> int:
        """Delete an entry. Returns the number deleted."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every entry. Returns the number deleted."""

    @abstractmethod
    def replace_all(self, entries: Sequence[ShoppingListEntry]) -> list[ShoppingListEntry]:
        """Atomically replace the whole list with `entries`.

        Readers observe either the previous contents or the new ones. On
        failure the previous contents remain.
        """
