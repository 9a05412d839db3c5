"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, String, func

from inventory.identifiers import new_id


class IdentifierMixin:
    """Mixin to add an opaque hex UUID primary key."""

    id = Column(String(32), primary_key=True, default=new_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
