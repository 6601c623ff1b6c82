"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, middleware and exception
handlers, and configures the uvicorn server.

Dependencies: fastapi, uvicorn, visualsuite.api.routers, visualsuite.observability
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visualsuite.api.deps import ServiceCache
from visualsuite.api.errors import register_exception_handlers
from visualsuite.boundary.db import create_tables
from visualsuite.configs import Settings, get_settings
from visualsuite.core.rate_limiting import FixedWindowRateLimiter
from visualsuite.observability.logger import configure_logging
from visualsuite.observability.middleware import (
    BodySizeLimitMiddleware,
    CorrelationMiddleware,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
)
from .routers import generation_router, health_router, visuals_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache: ServiceCache = app.state.service_cache
    await create_tables(cache.engine)
    logger.info("Archive tables ready")

    _ = cache.generation_service
    if not cache.image_client.is_configured:
        logger.warning("HUGGINGFACE_API_KEY is not set; /generate will return 500")
    if not settings.text_model.api_key:
        logger.warning("GEMINI_API_KEY is not set; text output will use fallbacks")

    yield

    await cache.close()
    logger.info("Application shutdown: service cache closed")


def build_rate_limiter(settings: Settings) -> FixedWindowRateLimiter:
    """Create the limiter described by the rate limit settings."""
    return FixedWindowRateLimiter(
        window_seconds=settings.rate_limit.window_seconds,
        max_requests=settings.rate_limit.max_requests,
    )


def create_app(
    settings: Settings | None = None,
    rate_limiter: FixedWindowRateLimiter | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to use (defaults to the cached application settings)
        rate_limiter: Limiter to inject (defaults to one built from settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="TextToVisual AI Suite API",
        description="Prompt enhancement, image synthesis and Mermaid diagrams",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service_cache = ServiceCache(settings)

    # Added first = innermost
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.server.max_body_bytes)
    if settings.rate_limit.enabled:
        limiter = rate_limiter or build_rate_limiter(settings)
        app.state.rate_limiter = limiter
        app.add_middleware(
            RateLimitMiddleware,
            limiter=limiter,
            message=settings.rate_limit.message,
        )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(generation_router)
    app.include_router(visuals_router)

    return app


app = create_app()


def run() -> None:
    """Launch uvicorn with host/port from settings."""
    settings = get_settings()
    uvicorn.run(
        "visualsuite.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
