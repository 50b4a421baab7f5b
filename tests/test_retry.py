"""
Tests for backoff retries and the classification-gated retry policy.
"""

from __future__ import annotations

import pytest

from techhub.application.utils import retry as retry_module
from techhub.application.utils.retry import RetryPolicy, backoff_delay_ms, retry_operation


class Flaky:
    def __init__(self, failures: int, error: Exception | None = None) -> None:
        self.failures = failures
        self.error = error or RuntimeError("boom")
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return "ok"


@pytest.fixture
def sleeps(monkeypatch):
    recorded: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr(retry_module.asyncio, "sleep", fake_sleep)
    return recorded


async def test_fails_twice_then_succeeds():
    op = Flaky(failures=2)
    assert await retry_operation(op, 3, 10) == "ok"
    assert op.calls == 3


async def test_always_failing_raises_after_initial_plus_retries():
    op = Flaky(failures=100)
    with pytest.raises(RuntimeError, match="boom"):
        await retry_operation(op, 2, 10)
    assert op.calls == 3


async def test_last_error_is_propagated_unchanged(sleeps):
    error = ValueError("bad")
    op = Flaky(failures=100, error=error)
    with pytest.raises(ValueError) as exc_info:
        await retry_operation(op, 1, 10)
    assert exc_info.value is error


async def test_backoff_grows_exponentially(sleeps):
    await retry_operation(Flaky(failures=3), 3, 100)
    assert len(sleeps) == 3
    for attempt, seconds in enumerate(sleeps, start=1):
        floor = 100 * 2 ** (attempt - 1) / 1000
        assert floor <= seconds < floor + 0.1


def test_backoff_delay_bounds():
    for _ in range(50):
        delay = backoff_delay_ms(3, 10)
        assert 40 <= delay < 50


async def test_policy_stops_on_non_retryable(sleeps):
    op = Flaky(failures=5, error=RuntimeError("not retryable"))
    with pytest.raises(RuntimeError):
        await RetryPolicy(max_retries=3, base_delay_ms=10).run(op)
    assert op.calls == 1
    assert sleeps == []


async def test_policy_retries_retryable_errors(sleeps):
    op = Flaky(failures=2, error=ConnectionError("reset by peer"))
    assert await RetryPolicy(max_retries=2, base_delay_ms=10).run(op) == "ok"
    assert op.calls == 3


async def test_policy_gives_up_after_max_retries(sleeps):
    op = Flaky(failures=10, error=ConnectionError("down"))
    with pytest.raises(ConnectionError):
        await RetryPolicy(max_retries=2, base_delay_ms=10).run(op)
    assert op.calls == 3
