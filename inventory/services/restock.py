"""Restock calculation: which products are below threshold and by how much."""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from inventory.models.pantry import PantryItem
from inventory.models.product import Product


@dataclass(frozen=True)
class RestockEntry:
    """A product deficit: `quantity` more units are needed to reach threshold."""

    product_id: str
    product_name: str
    quantity: int


def count_stock(pantry_items: Iterable[PantryItem]) -> Counter[str]:
    """Count pantry rows per product id. Every row is one unit."""
    return Counter(item.product_id for item in pantry_items)


def compute_restock(
    products: Sequence[Product],
    pantry_items: Iterable[PantryItem],
) -> list[RestockEntry]:
    """Compute restock entries for every product strictly below its threshold.

    Entries come back in the same order as `products`. Products with no pantry
    rows count as zero on hand; pantry rows for unknown products are ignored.
    A threshold of zero (or less) never triggers a restock.
    """
    on_hand = count_stock(pantry_items)

    entries = []
    for product in products:
        count = on_hand.get(product.id, 0)
        if count < product.threshold:
            entries.append(
                RestockEntry(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=product.threshold - count,
                )
            )
    return entries
