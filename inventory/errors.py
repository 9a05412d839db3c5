"""Domain errors raised by services and stores.

The API layer maps each of these to an HTTP status in ``inventory.main``.
"""


class InventoryError(Exception):
    """Base class for inventory errors."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidIdentifier(InventoryError):
    """A malformed id was supplied to a by-id operation."""


class NotFound(InventoryError):
    """A lookup or delete targeted a record that does not exist."""


class ValidationFailure(InventoryError):
    """A submitted record violates a field invariant. Raised before any write."""


class StorageUnavailable(InventoryError):
    """A read or write against the backing store failed. Safe to retry."""
