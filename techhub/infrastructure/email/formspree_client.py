from __future__ import annotations

from typing import Any

import httpx

from techhub.application.exceptions import EmailDeliveryError
from techhub.application.ports.email_provider import EmailProviderPort
from techhub.core.config import settings
from techhub.domain.entities.email import EmailMessage


class FormspreeEmailProvider(EmailProviderPort):
    name = "formspree"

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint or settings.FORMSPREE_ENDPOINT
        self._timeout = timeout or settings.EMAIL_TIMEOUT_SECONDS
        self._transport = transport

    async def send(self, message: EmailMessage) -> dict[str, Any]:
        if not self._endpoint:
            raise EmailDeliveryError("Formspree endpoint not configured")

        form = {"email": message.to, "subject": message.subject, "message": message.html}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(
                    self._endpoint, data=form, headers={"Accept": "application/json"}
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Formspree error: {e}") from e

        if resp.status_code >= 400:
            raise EmailDeliveryError(f"Formspree error: {resp.reason_phrase}")

        try:
            return resp.json()
        except ValueError:
            return {"ok": True}
