"""Helpers for putting cursors into responses."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from .codec import encode_cursor
from .cursor import Cursor


class NextPageResponse(BaseModel):
    """Response fragment carrying the next-page URL."""

    next: Optional[str] = Field(default=None, description="URL of the next page, null on the last page")


def cursor_url(cursor: Optional[Cursor], base_url: Any) -> Optional[str]:
    """Encode cursor into base_url, or None when there is no cursor."""
    if cursor is None:
        return None
    return encode_cursor(cursor, base_url)


def package_next(cursor: Optional[Cursor], base_url: Any) -> NextPageResponse:
    """Wrap the next cursor as {"next": url | null}."""
    return NextPageResponse(next=cursor_url(cursor, base_url))


def create_link_header(
    next_url: Optional[str] = None,
    prev_url: Optional[str] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.

    Args:
        next_url: URL of the next page
        prev_url: URL of the previous page

    Returns:
        Link header value or None if no links
    """
    links = []

    if next_url:
        links.append(f'<{next_url}>; rel="next"')

    if prev_url:
        links.append(f'<{prev_url}>; rel="prev"')

    return ", ".join(links) if links else None
