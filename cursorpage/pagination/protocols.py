"""Protocols for items that can be paginated."""

from datetime import datetime
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ValueProvider(Protocol):
    """An item that exposes the ordering token for a given key.

    The returned string is compared for equality only, to find records that
    tie on the ordering key at a page boundary. It must be equal exactly when
    the backing store considers the two values equal, but it need not sort
    correctly: ``"9"`` and ``"10"`` are fine for integers since ordering is
    the job of the query that fetched the items. Unknown keys should return
    ``""`` instead of raising.
    """

    def value_for(self, order: str) -> str:
        ...


def format_value(value: Any) -> str:
    """Render a raw column value as an ordering token."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class MappingItem:
    """ValueProvider over a mapping, e.g. a database row."""

    __slots__ = ("row",)

    def __init__(self, row: Mapping[str, Any]):
        self.row = row

    def value_for(self, order: str) -> str:
        return format_value(self.row.get(order))

    def __repr__(self) -> str:
        return f"MappingItem({dict(self.row)!r})"
