from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import TypeVar

from techhub.application.utils.error_classifier import classify_error
from techhub.domain.entities.error_details import ErrorDetails

T = TypeVar("T")

logger = logging.getLogger(__name__)


def backoff_delay_ms(attempt: int, base_delay_ms: float) -> float:
    """Exponential backoff for the given 1-based attempt, plus jitter in [0, base)."""
    return base_delay_ms * 2 ** (attempt - 1) + random.random() * base_delay_ms


async def retry_operation(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay_ms: float = 1000,
) -> T:
    """
    Invoke `operation` once, then retry up to `max_retries` more times on any exception.
    The last exception is re-raised unchanged once retries are exhausted.
    """
    attempt = 1
    while True:
        try:
            return await operation()
        except Exception as e:
            if attempt > max_retries:
                raise
            delay = backoff_delay_ms(attempt, base_delay_ms)
            logger.info(
                "Operation failed, retrying",
                extra={"attempt": attempt, "delay_ms": round(delay), "error": str(e)},
            )
            await asyncio.sleep(delay / 1000)
            attempt += 1


class RetryPolicy:
    """
    Backoff retries gated by classification: a failure whose descriptor is not
    retryable is re-raised on the spot instead of being attempted again.
    """

    def __init__(
        self,
        max_retries: int = 2,
        base_delay_ms: float = 1000,
        classifier: Callable[[object], ErrorDetails] = classify_error,
    ) -> None:
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self._classifier = classifier

    async def run(self, operation: Callable[[], Awaitable[T]]) -> T:
        attempt = 1
        while True:
            try:
                return await operation()
            except Exception as e:
                details = self._classifier(e)
                if not details.retryable or attempt > self.max_retries:
                    raise
                delay = backoff_delay_ms(attempt, self.base_delay_ms)
                logger.info(
                    "Retryable failure, backing off",
                    extra={
                        "attempt": attempt,
                        "delay_ms": round(delay),
                        "error": details.code or details.kind,
                    },
                )
                await asyncio.sleep(delay / 1000)
                attempt += 1
