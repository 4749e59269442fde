"""Next/previous cursor derivation from one fetched page.

The caller fetches up to ``cursor.count + 1`` items: one page plus a single
lookahead item. The lookahead tells us whether another page exists and,
because it is the first record of that page, its ordering value becomes the
next cursor's value without a second query.

Records sharing the boundary value are handled with ``offset``: the next
cursor says "start at value, skip offset records with that value". When a
whole page is one run of equal values continuing the previous page's run, the
skip count accumulates so the next query still lands past every record
already returned.

All functions here are pure. They never mutate the cursor or the item list
and never raise for empty input; ``None`` means there is no such page.
"""

import logging
from typing import Iterable, List, Optional

from .cursor import Cursor, Direction
from .protocols import ValueProvider

logger = logging.getLogger(__name__)


def _as_list(items: Optional[Iterable[ValueProvider]]) -> List[ValueProvider]:
    if items is None:
        return []
    return list(items)


def boundary_index(cursor: Cursor, items: List[ValueProvider]) -> int:
    """Index of the item whose value starts the next page.

    On a short page that is the last item; when the lookahead item is
    present it is the lookahead itself. Returns -1 for an empty list.
    """
    if len(items) <= cursor.count:
        return len(items) - 1
    return cursor.count


def tie_count(cursor: Cursor, items: List[ValueProvider], index: int) -> int:
    """Number of items on the page sharing the ordering value at index."""
    boundary_value = items[index].value_for(cursor.order)
    return sum(
        1 for item in items[:cursor.count]
        if item.value_for(cursor.order) == boundary_value
    )


def cursor_after(
    cursor: Cursor,
    items: Optional[Iterable[ValueProvider]],
    index: int,
    direction: Direction
) -> Optional[Cursor]:
    """Cursor positioned at items[index], moving in direction."""
    items = _as_list(items)
    if not items:
        return None

    value = items[index].value_for(cursor.order)
    offset = tie_count(cursor, items, index)
    if offset == cursor.count and value == cursor.value:
        # the page is one run continuing the previous page's run
        offset += cursor.offset

    return Cursor(
        value=value,
        offset=offset,
        count=cursor.count,
        order=cursor.order,
        direction=direction,
    )


def next_cursor(
    cursor: Cursor,
    items: Optional[Iterable[ValueProvider]],
    prefetched: bool = True
) -> Optional[Cursor]:
    """Cursor for the page after the current one.

    Args:
        cursor: Cursor the items were fetched with
        items: Fetched items, including the lookahead item if any
        prefetched: Whether the fetch asked for count + 1 items. If so and
            the lookahead item is missing, there is no next page.

    Returns:
        The next cursor, or None when there is no next page
    """
    items = _as_list(items)
    if prefetched and len(items) <= cursor.count:
        return None

    nxt = cursor_after(cursor, items, boundary_index(cursor, items), cursor.direction)
    if nxt is not None:
        logger.debug(f"Next cursor for order={cursor.order!r}: value={nxt.value!r} offset={nxt.offset}")
    return nxt


def prev_cursor(
    cursor: Cursor,
    items: Optional[Iterable[ValueProvider]]
) -> Optional[Cursor]:
    """Cursor for the page before the current one.

    Built from the first item of the page with the direction inverted, so
    the caller fetches backwards from where this page starts.
    """
    prv = cursor_after(cursor, items, 0, cursor.direction.invert())
    if prv is not None:
        logger.debug(f"Prev cursor for order={cursor.order!r}: value={prv.value!r} offset={prv.offset}")
    return prv
