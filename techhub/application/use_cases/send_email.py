from __future__ import annotations

import asyncio
import logging
from typing import Any

from techhub.application.exceptions import EmailDeliveryError
from techhub.application.ports.email_provider import EmailProviderPort
from techhub.domain.entities.email import EmailMessage, EmailResult


class SendEmailUseCase:
    def __init__(self, primary: EmailProviderPort, fallback: EmailProviderPort | None = None) -> None:
        self._primary = primary
        self._fallback = fallback
        self._logger = logging.getLogger(__name__)

    async def execute(self, message: EmailMessage) -> dict[str, Any]:
        """Send through the primary provider, then the fallback. Raises EmailDeliveryError if both fail."""
        try:
            return await self._primary.send(message)
        except Exception as primary_error:
            self._logger.error(
                "Primary email service failed",
                extra={"provider": self._primary.name, "recipient": message.to, "error": str(primary_error)},
            )
            if self._fallback is None:
                raise EmailDeliveryError("All email services are currently unavailable") from primary_error

        try:
            return await self._fallback.send(message)
        except Exception as fallback_error:
            self._logger.error(
                "Fallback email service failed",
                extra={"provider": self._fallback.name, "recipient": message.to, "error": str(fallback_error)},
            )
            raise EmailDeliveryError("All email services are currently unavailable") from fallback_error

    async def send_many(self, messages: list[EmailMessage]) -> list[EmailResult]:
        """Send each message independently; one recipient's failure never blocks the others."""
        outcomes = await asyncio.gather(
            *(self.execute(message) for message in messages), return_exceptions=True
        )
        results: list[EmailResult] = []
        for message, outcome in zip(messages, outcomes):
            if isinstance(outcome, BaseException):
                results.append(EmailResult(email=message.to, success=False, error=str(outcome)))
            else:
                results.append(EmailResult(email=message.to, success=True, result=dict(outcome or {})))
        return results
