"""Pagination module for offset-tiebroken cursor pagination."""

from .cursor import (
    DEFAULT_PAGE_SIZE,
    Cursor,
    CursorDefaults,
    Direction
)
from .protocols import ValueProvider, MappingItem, format_value
from .codec import (
    CURSOR_PARAMS,
    decode_cursor,
    encode_cursor,
    merge_defaults
)
from .engine import (
    boundary_index,
    tie_count,
    cursor_after,
    next_cursor,
    prev_cursor
)
from .response import (
    NextPageResponse,
    cursor_url,
    package_next,
    create_link_header
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Cursor",
    "CursorDefaults",
    "Direction",
    "ValueProvider",
    "MappingItem",
    "format_value",
    "CURSOR_PARAMS",
    "decode_cursor",
    "encode_cursor",
    "merge_defaults",
    "boundary_index",
    "tie_count",
    "cursor_after",
    "next_cursor",
    "prev_cursor",
    "NextPageResponse",
    "cursor_url",
    "package_next",
    "create_link_header"
]
