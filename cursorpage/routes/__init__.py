"""API routes for the cursorpage service."""

from .comments import router as comments_router

__all__ = ["comments_router"]
