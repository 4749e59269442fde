"""Request logging middleware."""

import logging
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log paginated listing requests."""

    def __init__(self, app, paths=("/comments",)):
        super().__init__(app)
        self.paths = tuple(paths)

    async def dispatch(self, request: Request, call_next):
        """Log request details and call next middleware."""
        if request.method == "GET" and request.url.path in self.paths:
            logger.info(f"GET {request.url.path} query={request.url.query!r}")
            response = await call_next(request)
            logger.info(f"GET {request.url.path} -> {response.status_code}")
            return response

        return await call_next(request)
