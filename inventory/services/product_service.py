"""Product catalog service: validation, CRUD and filtered listing."""

import logging
from collections.abc import Mapping
from typing import Any

from inventory.errors import NotFound, ValidationFailure
from inventory.identifiers import parse_id
from inventory.models.product import Product
from inventory.schemas.product import ProductCreate, ProductUpdate
from inventory.services.product_query import build_filter, build_sort
from inventory.stores.base import CatalogStore

logger = logging.getLogger(__name__)

MAX_THRESHOLD = 1_000_000
REQUIRED_TEXT_FIELDS = ("name", "category", "store")


def validate_product_fields(fields: Mapping[str, Any], *, creating: bool) -> None:
    """Check product invariants before anything is written.

    New products need a positive threshold; edits may lower it to zero,
    which switches restocking off for that product.
    """
    for field in REQUIRED_TEXT_FIELDS:
        value = fields.get(field)
        if value is None or not str(value).strip():
            raise ValidationFailure(f"Product must have a non-empty {field}")

    threshold = fields.get("threshold")
    if not isinstance(threshold, int) or isinstance(threshold, bool):
        raise ValidationFailure("Product threshold must be an integer")
    if creating and threshold <= 0:
        raise ValidationFailure("Product threshold must be greater than zero")
    if threshold < 0:
        raise ValidationFailure("Product threshold can't be negative")
    if threshold > MAX_THRESHOLD:
        raise ValidationFailure(f"Product threshold must be at most {MAX_THRESHOLD}")


class ProductService:
    """Service for product catalog operations."""

    def __init__(self, catalog: CatalogStore):
        self.catalog = catalog

    def list_products(
        self,
        criteria: Mapping[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[Product]:
        """List products matching the criteria, sorted as requested."""
        ordering = build_sort(sort_by, sort_order)
        return self.catalog.find(build_filter(criteria), ordering)

    def get_product(self, raw_id: str) -> Product:
        product_id = parse_id(raw_id, "product")
        product = self.catalog.get(product_id)
        if product is None:
            raise NotFound("The requested product was not found")
        return product

    def create_product(self, data: ProductCreate) -> Product:
        fields = data.model_dump()
        validate_product_fields(fields, creating=True)

        product = Product(**fields)
        product_id = self.catalog.insert(product)
        logger.info(f"Created product '{product.name}' ({product_id})")
        return product

    def update_product(self, raw_id: str, data: ProductUpdate) -> Product:
        product_id = parse_id(raw_id, "product")
        fields = data.model_dump()
        validate_product_fields(fields, creating=False)

        if self.catalog.update_fields(product_id, fields) == 0:
            raise NotFound("The requested product was not found")
        logger.info(f"Updated product {product_id}")
        return self.get_product(product_id)

    def delete_product(self, raw_id: str) -> None:
        product_id = parse_id(raw_id, "product")
        if self.catalog.delete(product_id) != 1:
            raise NotFound(
                f"Was unable to delete ID {raw_id}; perhaps an ID for a product not in the system?"
            )
        logger.info(f"Deleted product {product_id}")
