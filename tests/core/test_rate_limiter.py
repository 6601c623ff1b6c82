"""Tests for the fixed-window rate limiter."""

import pytest

from visualsuite.core.rate_limiting import FixedWindowRateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestFixedWindowRateLimiter:
    """Tests for FixedWindowRateLimiter.hit() and reset()."""

    def test_allows_up_to_max_requests(self, clock: FakeClock) -> None:
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=3, clock=clock)

        decisions = [limiter.hit("1.2.3.4") for _ in range(3)]

        assert all(d.allowed for d in decisions)
        assert [d.remaining for d in decisions] == [2, 1, 0]

    def test_refuses_after_max_requests(self, clock: FakeClock) -> None:
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=2, clock=clock)
        limiter.hit("k")
        limiter.hit("k")

        decision = limiter.hit("k")

        assert decision.allowed is False
        assert decision.remaining == 0
        assert decision.limit == 2

    def test_window_resets_after_expiry(self, clock: FakeClock) -> None:
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        limiter.hit("k")
        assert limiter.hit("k").allowed is False

        clock.now += 60

        assert limiter.hit("k").allowed is True

    def test_reset_after_counts_down(self, clock: FakeClock) -> None:
        limiter = FixedWindowRateLimiter(window_seconds=900, max_requests=5, clock=clock)
        limiter.hit("k")
        clock.now += 100

        assert limiter.hit("k").reset_after == pytest.approx(800)

    def test_keys_are_independent(self, clock: FakeClock) -> None:
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        limiter.hit("a")

        assert limiter.hit("a").allowed is False
        assert limiter.hit("b").allowed is True

    def test_instances_do_not_share_counters(self, clock: FakeClock) -> None:
        first = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        second = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        first.hit("k")

        assert second.hit("k").allowed is True

    def test_reset_single_key_and_all(self, clock: FakeClock) -> None:
        limiter = FixedWindowRateLimiter(window_seconds=60, max_requests=1, clock=clock)
        limiter.hit("a")
        limiter.hit("b")

        limiter.reset("a")
        assert limiter.hit("a").allowed is True
        assert limiter.hit("b").allowed is False

        limiter.reset()
        assert limiter.hit("b").allowed is True

    @pytest.mark.parametrize("window, max_requests", [(0, 1), (60, 0), (-1, 5)])
    def test_rejects_invalid_configuration(self, window: float, max_requests: int) -> None:
        with pytest.raises(ValueError):
            FixedWindowRateLimiter(window_seconds=window, max_requests=max_requests)
