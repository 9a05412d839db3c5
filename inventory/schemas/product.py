"""Product schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    """Editable product fields.

    Non-empty and threshold range checks happen in ProductService so they
    apply to every caller, not just HTTP requests.
    """

    name: str = Field(..., max_length=100)
    brand: str = Field("", max_length=100)
    category: str = Field(..., max_length=100)
    store: str = Field(..., max_length=100)
    threshold: int
    location: str = Field("", max_length=100)
    lifespan: str = Field("", max_length=100)
    description: str = Field("", max_length=200)
    notes: str = Field("", max_length=200)


class ProductCreate(ProductBase):
    """Create a product."""


class ProductUpdate(ProductBase):
    """Replace every editable field of a product."""


class ProductResponse(ProductBase):
    """Product response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime
