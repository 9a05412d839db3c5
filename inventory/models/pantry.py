"""Pantry item model: one row per unit of a product on hand."""

from sqlalchemy import Column, Date, String

from inventory.database import Base
from inventory.models.mixins import IdentifierMixin, TimestampMixin


class PantryItem(Base, IdentifierMixin, TimestampMixin):
    """A single unit of a product currently in stock."""

    __tablename__ = "pantry_items"

    # Plain reference, not a foreign key: rows for a deleted product stop counting
    product_id = Column(String(32), nullable=False, index=True)
    purchase_date = Column(Date, nullable=True)
    notes = Column(String(200), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<PantryItem(id={self.id}, product_id={self.product_id})>"
