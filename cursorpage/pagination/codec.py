"""Query-string encoding and decoding of cursors."""

import logging
import re
from typing import Any, Dict, Optional, Tuple

from starlette.datastructures import URL, QueryParams

from ..errors.decode_errors import DecodeErrors, InvalidDirection, ParseFailure
from .cursor import DEFAULT_PAGE_SIZE, Cursor, CursorDefaults, Direction

logger = logging.getLogger(__name__)

CURSOR_PARAMS = ("value", "offset", "count", "order", "direction")

_DIRECTION_NAMES = {"asc": Direction.ASC, "desc": Direction.DESC}
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(field: str, raw: str, errors: DecodeErrors) -> Optional[int]:
    if not _INTEGER.fullmatch(raw):
        errors.add(ParseFailure(field=field, raw_value=raw, cause="not an ASCII decimal integer"))
        return None
    return int(raw)


def _first(params: QueryParams, key: str) -> Optional[str]:
    values = params.getlist(key)
    return values[0] if values else None


def _parse_non_negative(field: str, raw: str, errors: DecodeErrors) -> Optional[int]:
    number = _parse_int(field, raw, errors)
    if number is None:
        return None
    if number < 0:
        errors.add(ParseFailure(field=field, raw_value=raw, cause="must not be negative"))
        return None
    return number


def _parse_direction(raw: str, errors: DecodeErrors) -> Optional[Direction]:
    named = _DIRECTION_NAMES.get(raw.lower())
    if named is not None:
        return named
    number = _parse_int("direction", raw, errors)
    if number is None:
        return None
    try:
        return Direction(number)
    except ValueError:
        errors.add(InvalidDirection(raw_value=raw))
        return None


def merge_defaults(fields: Dict[str, Any], defaults: Optional[CursorDefaults] = None) -> Cursor:
    """Build a cursor from decoded fields, filling zero values from defaults.

    A field that is missing, empty or 0 takes the default, so an explicit
    ``count=0`` behaves exactly like an omitted ``count``.
    """
    defaults = defaults or CursorDefaults()

    direction = fields.get("direction")
    if direction is None:
        direction = defaults.direction or Direction.ASC

    return Cursor(
        value=fields.get("value") or defaults.value,
        offset=fields.get("offset") or defaults.offset,
        count=fields.get("count") or defaults.count or DEFAULT_PAGE_SIZE,
        order=fields.get("order") or defaults.order,
        direction=direction,
    )


def decode_cursor(
    query_string: str,
    defaults: Optional[CursorDefaults] = None
) -> Tuple[Cursor, DecodeErrors]:
    """Decode a cursor from a URL query string.

    Every malformed parameter is recorded and decoding carries on with the
    rest, so the result is always a usable cursor plus the (possibly empty)
    list of everything that was wrong with the input.

    Args:
        query_string: Raw query string, with or without the leading "?"
        defaults: Values for parameters that are missing, zero or malformed

    Returns:
        Tuple of (cursor, decode_errors)
    """
    params = QueryParams(query_string.lstrip("?"))
    errors = DecodeErrors()
    fields: Dict[str, Any] = {}

    value = _first(params, "value")
    if value is not None:
        fields["value"] = value

    for name in ("offset", "count"):
        raw = _first(params, name)
        if raw is not None:
            fields[name] = _parse_non_negative(name, raw, errors)

    order = _first(params, "order")
    if order is not None:
        fields["order"] = order

    raw_direction = _first(params, "direction")
    if raw_direction is not None:
        fields["direction"] = _parse_direction(raw_direction, errors)

    if errors:
        logger.debug(f"Cursor decoded with {len(errors)} errors: {errors.messages()}")

    return merge_defaults(fields, defaults), errors


def encode_cursor(cursor: Cursor, base_url: Any) -> str:
    """Encode a cursor into base_url's query string.

    Existing values of the cursor parameters are replaced; any other query
    parameters on base_url are kept as they are.

    Args:
        cursor: Cursor to serialize
        base_url: URL to attach the cursor to (str or starlette URL)

    Returns:
        The resulting URL as a string
    """
    url = URL(str(base_url)).include_query_params(
        value=cursor.value,
        offset=cursor.offset,
        count=cursor.count,
        order=cursor.order,
        direction=int(cursor.direction),
    )
    return str(url)
