"""Comments API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from ..config import Settings, get_settings
from ..errors.problem_details import BadRequestError
from ..models.comments import CommentListResponse
from ..pagination import (
    CursorDefaults,
    decode_cursor,
    next_cursor,
    prev_cursor,
    cursor_url,
    create_link_header
)
from ..store import InMemoryCommentStore, get_comment_store


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/comments",
    tags=["Comments"],
    responses={
        400: {"description": "Bad Request - Invalid cursor"}
    }
)


@router.get(
    "",
    response_model=CommentListResponse,
    summary="List comments",
    description=(
        "List comments one page at a time. The page position is given by the "
        "value, offset, count, order and direction query parameters, which are "
        "normally taken verbatim from a previous response's next or prev URL."
    ),
    responses={
        200: {"description": "Comments retrieved successfully"}
    }
)
async def list_comments(
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
    store: Annotated[InMemoryCommentStore, Depends(get_comment_store)]
) -> CommentListResponse:
    """List comments with offset-tiebroken cursor pagination.

    One extra comment past the page size is fetched so the next page's
    cursor can be computed without a second query. Malformed cursor
    parameters are all reported together; with ``strict_cursors`` disabled
    they are logged and replaced by the configured defaults instead.

    Args:
        request: FastAPI request object, source of the cursor parameters
        response: FastAPI response object for adding the Link header
        settings: Application settings providing cursor defaults
        store: Comment store to page through

    Returns:
        One page of comments with next and prev URLs (null when absent)
    """
    defaults = CursorDefaults.from_settings(settings)
    cursor, errors = decode_cursor(request.url.query, defaults)
    if errors:
        if settings.strict_cursors:
            errors.raise_for_errors()
        logger.warning(f"Ignoring malformed cursor parameters: {errors.messages()}")

    if cursor.count > settings.max_page_size:
        raise BadRequestError(
            f"count must not exceed {settings.max_page_size}",
            max_page_size=settings.max_page_size
        )

    limit = cursor.count + 1 if defaults.prefetch else cursor.count
    try:
        items = await store.fetch(cursor, limit)
    except ValueError as e:
        raise BadRequestError(str(e))

    next_url = cursor_url(next_cursor(cursor, items, prefetched=defaults.prefetch), request.url)
    prev_url = cursor_url(prev_cursor(cursor, items), request.url)

    link_header = create_link_header(next_url=next_url, prev_url=prev_url)
    if link_header:
        response.headers["Link"] = link_header

    page = items[:cursor.count]
    logger.info(f"Retrieved {len(page)} comments ordered by {cursor.order} {cursor.direction.sql}")
    return CommentListResponse(comments=page, next=next_url, prev=prev_url)
