"""
Fixed-window rate limiter.

Counts hits per caller key inside a fixed time window. The limiter is an
explicit component: the HTTP middleware receives an instance instead of
sharing module-level counters, so tests and multiple apps stay isolated.

Dependencies: threading, time
System role: Request throttling for the gateway
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of registering one hit against a key."""

    allowed: bool
    limit: int
    remaining: int
    reset_after: float


@dataclass
class _Window:
    started_at: float
    count: int = 0


class FixedWindowRateLimiter:
    """
    Per-key fixed-window counter.

    The first hit for a key opens a window of `window_seconds`. Every hit in
    the window increments the counter; hits beyond `max_requests` are refused
    until the window expires, at which point the next hit opens a new window.

    Attributes:
        window_seconds: Window length in seconds
        max_requests: Hits allowed per key per window
    """

    def __init__(
        self,
        window_seconds: float = 15 * 60,
        max_requests: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the limiter.

        Args:
            window_seconds: Window length in seconds (must be positive)
            max_requests: Allowed hits per window (must be positive)
            clock: Monotonic time source, injectable for tests

        Raises:
            ValueError: If window_seconds or max_requests is not positive
        """
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")

        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitDecision:
        """
        Register one request for `key` and decide whether it may proceed.

        Args:
            key: Caller identity (client address)

        Returns:
            RateLimitDecision: Whether the hit is allowed and the window state
        """
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now - window.started_at >= self.window_seconds:
                window = _Window(started_at=now)
                self._windows[key] = window
                self._evict_expired(now)

            window.count += 1
            reset_after = max(0.0, window.started_at + self.window_seconds - now)
            return RateLimitDecision(
                allowed=window.count <= self.max_requests,
                limit=self.max_requests,
                remaining=max(0, self.max_requests - window.count),
                reset_after=reset_after,
            )

    def reset(self, key: str | None = None) -> None:
        """Clear the counter for one key, or for every key when key is None."""
        with self._lock:
            if key is None:
                self._windows.clear()
            else:
                self._windows.pop(key, None)

    def _evict_expired(self, now: float) -> None:
        expired = [
            k for k, w in self._windows.items()
            if now - w.started_at >= self.window_seconds
        ]
        for k in expired:
            del self._windows[k]
