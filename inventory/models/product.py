"""Product catalog model."""

from sqlalchemy import Column, Integer, String

from inventory.database import Base
from inventory.models.mixins import IdentifierMixin, TimestampMixin


class Product(Base, IdentifierMixin, TimestampMixin):
    """A product the household wants to keep stocked."""

    __tablename__ = "products"

    name = Column(String(100), nullable=False, index=True)
    brand = Column(String(100), nullable=False, default="")
    category = Column(String(100), nullable=False, index=True)
    store = Column(String(100), nullable=False, index=True)
    threshold = Column(Integer, nullable=False, default=0)  # Restock below this many units
    location = Column(String(100), nullable=False, default="")  # Where it lives at home
    lifespan = Column(String(100), nullable=False, default="")
    description = Column(String(200), nullable=False, default="")
    notes = Column(String(200), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', threshold={self.threshold})>"
