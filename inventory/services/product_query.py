"""Filter and sort builders for the product listing."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import and_, true

from inventory.errors import ValidationFailure

FILTER_FIELDS = ("name", "brand", "category", "store")
SORTABLE_FIELDS = (
    "name",
    "brand",
    "category",
    "store",
    "location",
    "threshold",
    "created_at",
    "updated_at",
)
DEFAULT_SORT_FIELD = "name"
SORT_FIELD_ALIASES = {"product_name": "name"}
DESCENDING = "desc"

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


@dataclass(frozen=True)
class FieldMatch:
    """Case-insensitive literal substring match against one field."""

    field: str
    pattern: str

    def matches(self, record: Any) -> bool:
        value = getattr(record, self.field, None) or ""
        return self.pattern.lower() in str(value).lower()

    def to_sql(self, model: Any):
        column = getattr(model, self.field)
        return column.ilike(f"%{escape_like(self.pattern)}%", escape=LIKE_ESCAPE)


@dataclass(frozen=True)
class ProductFilter:
    """Conjunction of field matches. No matches means every record passes."""

    field_matches: tuple[FieldMatch, ...] = ()

    def matches(self, record: Any) -> bool:
        return all(match.matches(record) for match in self.field_matches)

    def to_sql(self, model: Any):
        if not self.field_matches:
            return true()
        return and_(*(match.to_sql(model) for match in self.field_matches))


@dataclass(frozen=True)
class ProductOrdering:
    """Single-field sort order."""

    field: str = DEFAULT_SORT_FIELD
    descending: bool = False

    def sort(self, records: Iterable[Any]) -> list[Any]:
        return sorted(records, key=lambda r: getattr(r, self.field), reverse=self.descending)

    def to_sql(self, model: Any):
        column = getattr(model, self.field)
        return column.desc() if self.descending else column.asc()


def build_filter(criteria: Mapping[str, str | None]) -> ProductFilter:
    """Build a product filter from optional field criteria.

    Only name, brand, category and store are recognized; other keys and
    ``None`` values are ignored. Patterns are literal, never regex or LIKE
    syntax.
    """
    matches = tuple(
        FieldMatch(field, criteria[field])
        for field in FILTER_FIELDS
        if criteria.get(field) is not None
    )
    return ProductFilter(matches)


def build_sort(sort_by: str | None = None, sort_order: str | None = None) -> ProductOrdering:
    """Build a sort order. Defaults to ascending by name.

    Only the exact string "desc" selects descending order.
    """
    field = SORT_FIELD_ALIASES.get(sort_by, sort_by) or DEFAULT_SORT_FIELD
    if field not in SORTABLE_FIELDS:
        raise ValidationFailure(
            f"Cannot sort products by '{field}'; expected one of {', '.join(SORTABLE_FIELDS)}"
        )
    return ProductOrdering(field=field, descending=sort_order == DESCENDING)
