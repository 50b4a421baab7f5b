from __future__ import annotations

import logging
from typing import Any

import httpx

from techhub.application.exceptions import EmailDeliveryError
from techhub.application.ports.email_provider import EmailProviderPort
from techhub.core.config import settings
from techhub.domain.entities.email import EmailMessage


class ResendEmailProvider(EmailProviderPort):
    name = "resend"

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        from_email: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key or settings.RESEND_API_KEY
        self._api_url = api_url or settings.RESEND_API_URL
        self._from_email = from_email or settings.EMAIL_FROM
        self._timeout = timeout or settings.EMAIL_TIMEOUT_SECONDS
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def send(self, message: EmailMessage) -> dict[str, Any]:
        if not self._api_key:
            raise EmailDeliveryError("Email service not configured - RESEND_API_KEY is required")

        payload = {
            "from": message.sender or self._from_email,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(self._api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Email service error: {e}") from e

        if resp.status_code >= 400:
            try:
                detail = resp.json().get("message") or resp.reason_phrase
            except ValueError:
                detail = resp.reason_phrase
            self._logger.error(
                "Resend send failed",
                extra={"status": resp.status_code, "recipient": message.to, "error": detail},
            )
            raise EmailDeliveryError(f"Email service error: {detail}")

        return resp.json()
