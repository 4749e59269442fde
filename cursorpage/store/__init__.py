"""Storage for the cursorpage service."""

from .memory import (
    SORTABLE_FIELDS,
    InMemoryCommentStore,
    comment_store,
    get_comment_store,
    sample_comments
)

__all__ = [
    "SORTABLE_FIELDS",
    "InMemoryCommentStore",
    "comment_store",
    "get_comment_store",
    "sample_comments"
]
