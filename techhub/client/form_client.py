from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from techhub.application.utils.error_classifier import RATE_LIMIT_MESSAGE, classify_error
from techhub.application.utils.rate_limiter import RateLimiter
from techhub.application.utils.retry import RetryPolicy
from techhub.application.utils.validation import ValidationResult, validate_booking, validate_contact
from techhub.domain.entities.error_details import ErrorDetails


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    data: dict[str, Any] | None = None
    error: ErrorDetails | None = None


class FormClient:
    """
    Submits the site's forms: local validation, per-form throttling, then a
    POST retried by the policy. Every failure comes back as an ErrorDetails.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_policy: RetryPolicy | None = None,
        rate_limiter: RateLimiter | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._retry = retry_policy or RetryPolicy(max_retries=2)
        self._rate_limiter = rate_limiter or RateLimiter(max_attempts=3, window_ms=60000)
        self._timeout = timeout
        self._logger = logging.getLogger(__name__)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={"Content-Type": "application/json"},
        )

    async def request_json(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """One HTTP call; raises httpx.HTTPStatusError for non-2xx responses."""
        async with self._client() as client:
            try:
                resp = await client.request(method, path, **kwargs)
                resp.raise_for_status()
            except httpx.HTTPError as e:
                self._logger.error("Fetch request failed", extra={"error": str(e)})
                raise
            return resp.json()

    async def submit_contact(self, data: Mapping[str, Any]) -> SubmissionResult:
        return await self._submit("contact", "/api/contact", data, validate_contact)

    async def submit_booking(self, data: Mapping[str, Any]) -> SubmissionResult:
        return await self._submit("booking", "/api/booking", data, validate_booking)

    async def available_slots(self, day: str) -> dict[str, Any]:
        return await self._retry.run(lambda: self.request_json("GET", "/api/booking", params={"date": day}))

    async def _submit(
        self,
        form: str,
        path: str,
        data: Mapping[str, Any],
        validator: Callable[[Mapping[str, Any]], ValidationResult],
    ) -> SubmissionResult:
        validation = validator(data)
        if not validation.is_valid:
            return SubmissionResult(
                success=False,
                error=ErrorDetails(
                    kind="validation",
                    message="Form validation failed",
                    retryable=False,
                    user_message="Please check your form and try again. "
                    + ", ".join(validation.errors.values()),
                ),
            )

        if not self._rate_limiter.allow(form):
            return SubmissionResult(
                success=False,
                error=ErrorDetails(
                    kind="server",
                    message="Client rate limit exceeded",
                    code="RATE_LIMIT",
                    retryable=True,
                    user_message=RATE_LIMIT_MESSAGE,
                ),
            )

        try:
            body = await self._retry.run(lambda: self.request_json("POST", path, json=validation.data))
        except Exception as e:
            details = classify_error(e)
            self._logger.error(
                "Form submission failed",
                extra={"status": details.code or details.kind, "error": details.message},
            )
            return SubmissionResult(success=False, error=details)

        self._rate_limiter.reset(form)
        return SubmissionResult(success=True, data=body)
