"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from inventory.api.dependencies import get_pantry_service
from inventory.schemas.pantry import PantryItemCreate, PantryItemResponse
from inventory.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])


@router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(service: Annotated[PantryService, Depends(get_pantry_service)]):
    """List every unit currently in the pantry."""
    return service.list_items()


@router.post("", response_model=PantryItemResponse, status_code=status.HTTP_201_CREATED)
def create_pantry_item(
    item_data: PantryItemCreate,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Add one unit of a product to the pantry."""
    return service.add_item(item_data)


@router.get("/{item_id}", response_model=PantryItemResponse)
def get_pantry_item(
    item_id: str,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Get a specific pantry item."""
    return service.get_item(item_id)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_item(
    item_id: str,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Remove a unit from the pantry."""
    service.delete_item(item_id)
