"""Shopping list schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ShoppingListEntryCreate(BaseModel):
    """Manually add a shopping list entry."""

    product_id: str = Field(..., max_length=64)
    name: str = Field(..., max_length=100)
    quantity: int


class ShoppingListEntryResponse(BaseModel):
    """Shopping list entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    name: str
    quantity: int
    created_at: datetime
    updated_at: datetime
