"""
Tests for the fixed-window rate limiter.
"""

from __future__ import annotations

from techhub.application.utils.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_allows_max_attempts_then_denies():
    limiter = RateLimiter(3, 60000)
    assert [limiter.allow("k") for _ in range(4)] == [True, True, True, False]


def test_reset_allows_immediately():
    limiter = RateLimiter(3, 60000)
    for _ in range(4):
        limiter.allow("k")
    limiter.reset("k")
    assert limiter.allow("k") is True


def test_keys_are_independent():
    limiter = RateLimiter(1, 60000)
    assert limiter.allow("a") is True
    assert limiter.allow("a") is False
    assert limiter.allow("b") is True


def test_window_expiry_opens_new_window():
    clock = FakeClock()
    limiter = RateLimiter(2, 60000, clock=clock)
    assert limiter.allow("k") and limiter.allow("k")
    assert limiter.allow("k") is False

    clock.now += 60.5
    assert limiter.allow("k") is True
    assert limiter.allow("k") is True
    assert limiter.allow("k") is False


def test_sweep_drops_only_expired_windows():
    clock = FakeClock()
    limiter = RateLimiter(3, 10000, clock=clock)
    limiter.allow("old")
    clock.now += 11
    limiter.allow("fresh")

    assert limiter.sweep() == 1
    assert len(limiter) == 1


def test_table_is_bounded():
    clock = FakeClock()
    limiter = RateLimiter(3, 60000, max_keys=5, clock=clock)
    for i in range(20):
        clock.now += 0.01
        assert limiter.allow(f"ip-{i}") is True
    assert len(limiter) <= 5
    # the newest key survives eviction
    assert limiter.allow("ip-19") is True
