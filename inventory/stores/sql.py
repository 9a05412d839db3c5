"""SQLAlchemy-backed stores.

Each store works on the request's session and commits per operation, so a
store call is one transaction.
"""

import logging
from collections.abc import Generator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory.errors import StorageUnavailable
from inventory.models.pantry import PantryItem
from inventory.models.product import Product
from inventory.models.shopping_list import ShoppingListEntry
from inventory.services.product_query import ProductFilter, ProductOrdering
from inventory.stores.base import CatalogStore, ShoppingListStore, StockStore

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(db: Session, action: str) -> Generator[None, None, None]:
    """Roll back and raise StorageUnavailable on any database error."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Storage failure while {action}: {e}")
        raise StorageUnavailable(f"Storage unavailable while {action}") from e


class SqlCatalogStore(CatalogStore):
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Product]:
        with storage_errors(self.db, "reading the product catalog"):
            return self.db.query(Product).order_by(Product.created_at, Product.id).all()

    def find(self, product_filter: ProductFilter, ordering: ProductOrdering) -> list[Product]:
        with storage_errors(self.db, "listing products"):
            return (
                self.db.query(Product)
                .filter(product_filter.to_sql(Product))
                .order_by(ordering.to_sql(Product), Product.id)
                .all()
            )

    def get(self, product_id: str) -> Product | None:
        with storage_errors(self.db, "reading a product"):
            return self.db.get(Product, product_id)

    def insert(self, product: Product) -> str:
        with storage_errors(self.db, "inserting a product"):
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        return product.id

    def update_fields(self, product_id: str, fields: Mapping[str, Any]) -> int:
        with storage_errors(self.db, "updating a product"):
            product = self.db.get(Product, product_id)
            if product is None:
                return 0
            for field, value in fields.items():
                setattr(product, field, value)
            self.db.commit()
        return 1

    def delete(self, product_id: str) -> int:
        with storage_errors(self.db, "deleting a product"):
            deleted = self.db.query(Product).filter(Product.id == product_id).delete()
            self.db.commit()
        return deleted


class SqlStockStore(StockStore):
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[PantryItem]:
        with storage_errors(self.db, "reading pantry stock"):
            return self.db.query(PantryItem).order_by(PantryItem.created_at, PantryItem.id).all()

    def get(self, item_id: str) -> PantryItem | None:
        with storage_errors(self.db, "reading a pantry item"):
            return self.db.get(PantryItem, item_id)

    def insert(self, item: PantryItem) -> str:
        with storage_errors(self.db, "inserting a pantry item"):
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
        return item.id

    def delete(self, item_id: str) -> int:
        with storage_errors(self.db, "deleting a pantry item"):
            deleted = self.db.query(PantryItem).filter(PantryItem.id == item_id).delete()
            self.db.commit()
        return deleted


class SqlShoppingListStore(ShoppingListStore):
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[ShoppingListEntry]:
        with storage_errors(self.db, "reading the shopping list"):
            return (
                self.db.query(ShoppingListEntry)
                .order_by(ShoppingListEntry.name, ShoppingListEntry.id)
                .all()
            )

    def get(self, entry_id: str) -> ShoppingListEntry | None:
        with storage_errors(self.db, "reading a shopping list entry"):
            return self.db.get(ShoppingListEntry, entry_id)

    def insert(self, entry: ShoppingListEntry) -> str:
        with storage_errors(self.db, "inserting a shopping list entry"):
            self.db.add(entry)
            self.db.commit()
            self.db.refresh(entry)
        return entry.id

    def delete(self, entry_id: str) -> int:
        with storage_errors(self.db, "deleting a shopping list entry"):
            deleted = (
                self.db.query(ShoppingListEntry).filter(ShoppingListEntry.id == entry_id).delete()
            )
            self.db.commit()
        return deleted

    def delete_all(self) -> int:
        with storage_errors(self.db, "clearing the shopping list"):
            deleted = self.db.query(ShoppingListEntry).delete()
            self.db.commit()
        return deleted

    def replace_all(self, entries: Sequence[ShoppingListEntry]) -> list[ShoppingListEntry]:
        with storage_errors(self.db, "replacing the shopping list"):
            self._lock_for_replace()
            self.db.query(ShoppingListEntry).delete(synchronize_session=False)
            self.db.add_all(entries)
            self.db.flush()
            self.db.commit()
            for entry in entries:
                self.db.refresh(entry)
        return list(entries)

    def _lock_for_replace(self) -> None:
        # Serializes concurrent replaces; plain SELECTs are not blocked and keep
        # seeing the old rows until commit.
        if self.db.get_bind().dialect.name == "postgresql":
            self.db.execute(
                text(f"LOCK TABLE {ShoppingListEntry.__tablename__} IN SHARE ROW EXCLUSIVE MODE")
            )
