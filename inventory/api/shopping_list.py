"""Shopping list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from inventory.api.dependencies import get_shopping_list_service
from inventory.schemas.shopping_list import ShoppingListEntryCreate, ShoppingListEntryResponse
from inventory.services.shopping_list_service import ShoppingListService

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


@router.get("", response_model=list[ShoppingListEntryResponse])
def list_shopping_list(
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
):
    """List shopping list entries, sorted by name."""
    return service.list_entries()


@router.post(
    "", response_model=ShoppingListEntryResponse, status_code=status.HTTP_201_CREATED
)
def create_shopping_list_entry(
    entry_data: ShoppingListEntryCreate,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
):
    """Manually add an entry. The next regeneration overwrites it."""
    return service.add_entry(entry_data)


@router.post("/regenerate", response_model=list[ShoppingListEntryResponse])
def regenerate_shopping_list(
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
):
    """Rebuild the shopping list from product thresholds and pantry stock."""
    return service.regenerate()


@router.get("/{entry_id}", response_model=ShoppingListEntryResponse)
def get_shopping_list_entry(
    entry_id: str,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
):
    """Get a specific shopping list entry."""
    return service.get_entry(entry_id)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shopping_list_entry(
    entry_id: str,
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
):
    """Remove an entry from the shopping list."""
    service.delete_entry(entry_id)
