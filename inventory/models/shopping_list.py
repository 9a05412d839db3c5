"""Shopping list entry model."""

from sqlalchemy import Column, Integer, String

from inventory.database import Base
from inventory.models.mixins import IdentifierMixin, TimestampMixin


class ShoppingListEntry(Base, IdentifierMixin, TimestampMixin):
    """One line of the shopping list: buy `quantity` more of a product."""

    __tablename__ = "shopping_list_entries"

    product_id = Column(String(32), nullable=False, index=True)
    name = Column(String(100), nullable=False)  # Denormalized product name
    quantity = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ShoppingListEntry(id={self.id}, product_id={self.product_id}, "
            f"quantity={self.quantity})>"
        )
