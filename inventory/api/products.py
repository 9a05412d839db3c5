"""Product API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from inventory.api.dependencies import get_product_service
from inventory.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from inventory.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
def list_products(
    service: Annotated[ProductService, Depends(get_product_service)],
    name: str | None = None,
    product_name: str | None = None,
    brand: str | None = None,
    category: str | None = None,
    store: str | None = None,
    sort_by: Annotated[str | None, Query(alias="sortby")] = None,
    sort_order: Annotated[str | None, Query(alias="sortorder")] = None,
):
    """List products, optionally filtered and sorted.

    Filters are case-insensitive substring matches and are combined with AND.
    `product_name` is accepted as a synonym for `name`.
    Results are sorted by name ascending unless `sortby`/`sortorder` say otherwise.
    """
    criteria = {
        "name": name if name is not None else product_name,
        "brand": brand,
        "category": category,
        "store": store,
    }
    return service.list_products(criteria, sort_by, sort_order)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Add a product to the catalog."""
    return service.create_product(product_data)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Get a specific product."""
    return service.get_product(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    product_data: ProductUpdate,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Replace a product's fields."""
    return service.update_product(product_id, product_data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: str,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Remove a product from the catalog."""
    service.delete_product(product_id)
