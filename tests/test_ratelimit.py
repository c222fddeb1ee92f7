from __future__ import annotations

from scamcheck.ratelimit import RateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_limit_within_window():
    limiter = RateLimiter(max_requests=2, window_seconds=60, clock=FakeClock())
    assert limiter.hit("a") is True
    assert limiter.hit("a") is True
    assert limiter.hit("a") is False
    assert limiter.hit("b") is True


def test_window_resets_after_expiry():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
    assert limiter.hit("a") is True
    assert limiter.hit("a") is False

    clock.now += 60
    assert limiter.hit("a") is False
    clock.now += 0.5
    assert limiter.hit("a") is True
