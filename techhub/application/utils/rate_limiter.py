from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class _Window:
    count: int
    reset_at: float  # seconds on the limiter's clock


class RateLimiter:
    """
    Fixed-window attempt counter keyed by caller (IP, form name, ...).

    Process-local and in-memory: a soft abuse deterrent, not a security control.
    Expired windows are swept once the table passes `max_keys`; if it is still
    full after the sweep the windows closest to expiry are evicted.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        window_ms: int = 60000,
        max_keys: int = 10000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_attempts = max_attempts
        self._window_seconds = window_ms / 1000.0
        self._max_keys = max_keys
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now > window.reset_at:
                self._windows[key] = _Window(count=1, reset_at=now + self._window_seconds)
                if len(self._windows) > self._max_keys:
                    self._shrink(now, keep=key)
                return True

            if window.count >= self._max_attempts:
                return False

            window.count += 1
            return True

    def reset(self, key: str) -> None:
        with self._lock:
            self._windows.pop(key, None)

    def sweep(self) -> int:
        """Drop expired windows. Returns how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def __len__(self) -> int:
        return len(self._windows)

    def _sweep(self, now: float) -> int:
        expired = [k for k, w in self._windows.items() if now > w.reset_at]
        for k in expired:
            del self._windows[k]
        if expired:
            logger.debug("Swept expired rate limit windows", extra={"count": len(expired)})
        return len(expired)

    def _shrink(self, now: float, keep: str) -> None:
        self._sweep(now)
        overflow = len(self._windows) - self._max_keys
        if overflow <= 0:
            return
        oldest = sorted(
            (k for k in self._windows if k != keep),
            key=lambda k: self._windows[k].reset_at,
        )
        for k in oldest[:overflow]:
            del self._windows[k]
        logger.warning("Rate limit table full, evicted windows", extra={"count": overflow})
