"""Data models for the cursorpage service."""

from .comments import Comment, CommentListResponse

__all__ = [
    "Comment",
    "CommentListResponse"
]
