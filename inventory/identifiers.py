"""Record identifier helpers."""

import uuid

from inventory.errors import InvalidIdentifier


def new_id() -> str:
    """Generate a new record id (32 lowercase hex characters)."""
    return uuid.uuid4().hex


def parse_id(raw: str, kind: str = "record") -> str:
    """Normalize a client-supplied id, raising InvalidIdentifier if malformed."""
    try:
        return uuid.UUID(str(raw).strip()).hex
    except ValueError:
        raise InvalidIdentifier(f"The requested {kind} id wasn't a legal id: {raw!r}") from None
