"""Request throttling primitives."""

from visualsuite.core.rate_limiting.rate_limiter import (
    FixedWindowRateLimiter,
    RateLimitDecision,
)

__all__ = ["FixedWindowRateLimiter", "RateLimitDecision"]
