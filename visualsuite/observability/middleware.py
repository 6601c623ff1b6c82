"""
FastAPI middleware for observability and throttling.

Request logging, correlation ID and fixed-window rate limiting middleware.

Dependencies: fastapi, starlette, visualsuite.observability, visualsuite.core
System role: Request/response observability injection
"""

import logging
import math
import time

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from visualsuite.core.rate_limiting import FixedWindowRateLimiter
from visualsuite.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request and response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        start_time = time.time()

        method = request.method
        path = request.url.path

        logger.info(
            f"{method} {path}",
            extra={
                "method": method,
                "path": path,
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                f"{method} {path} - {response.status_code}",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "process_time_ms": round(process_time * 1000, 2),
                },
            )
            return response
        except Exception as e:
            process_time = time.time() - start_time
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round(process_time * 1000, 2),
                    "error_type": type(e).__name__,
                    "error_msg": str(e),
                },
            )
            raise


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware applying a fixed-window limit to all traffic per client address."""

    def __init__(
        self,
        app: ASGIApp,
        limiter: FixedWindowRateLimiter,
        message: str = "Too many requests, please try again later",
    ) -> None:
        """
        Initialize rate limit middleware.

        Args:
            app: Wrapped ASGI application
            limiter: Injected limiter instance (owns the counters)
            message: Error message for refused requests
        """
        super().__init__(app)
        self.limiter = limiter
        self.message = message

    async def dispatch(self, request: Request, call_next):
        """
        Count the request against its caller and refuse it once over the limit.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Downstream response, or 429 JSON error when throttled
        """
        key = request.client.host if request.client else "unknown"
        decision = self.limiter.hit(key)
        headers = {
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Remaining": str(decision.remaining),
            "X-RateLimit-Reset": str(math.ceil(decision.reset_after)),
        }

        if not decision.allowed:
            logger.warning(
                f"{__name__}:dispatch - rate limit exceeded key={key}",
                extra={"client_host": key, "reset_after": decision.reset_after},
            )
            headers["Retry-After"] = str(math.ceil(decision.reset_after))
            return JSONResponse(
                status_code=429,
                content={"error": self.message},
                headers=headers,
            )

        response: Response = await call_next(request)
        response.headers.update(headers)
        return response


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware refusing requests whose declared body exceeds a byte limit."""

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            logger.warning(
                f"{__name__}:dispatch - body too large ({content_length} bytes) for {request.url.path}"
            )
            return JSONResponse(status_code=413, content={"error": "Request body too large"})
        return await call_next(request)
