"""Pantry schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class PantryItemCreate(BaseModel):
    """Add one unit of a product to the pantry."""

    product_id: str = Field(..., min_length=1, max_length=64)
    purchase_date: date | None = None
    notes: str = Field("", max_length=200)


class PantryItemResponse(BaseModel):
    """Pantry item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    purchase_date: date | None
    notes: str
    created_at: datetime
    updated_at: datetime
