"""Reference FastAPI application paging comments with cursorpage."""

import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI

from .config import get_settings
from .errors import register_exception_handlers
from .middleware.request_logging import RequestLoggingMiddleware
from .routes import comments_router
from .store import get_comment_store

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=get_settings().log_format
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logging.getLogger().setLevel(getattr(logging, settings.log_level))

    logger.info(f"Starting {settings.app_name}")
    logger.info(
        f"Cursor defaults: count={settings.default_page_size} order={settings.default_order} "
        f"direction={settings.default_direction} prefetch={settings.prefetch}"
    )
    logger.info(f"Comment store holds {len(get_comment_store())} comments")

    yield

    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Stable forward/backward cursor pagination over ordered results",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(RequestLoggingMiddleware, paths=["/comments"])

    register_exception_handlers(app)

    app.include_router(comments_router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()

    uvicorn.run(
        "cursorpage.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
