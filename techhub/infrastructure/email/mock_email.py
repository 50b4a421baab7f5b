from __future__ import annotations

import logging
from typing import Any

from techhub.application.ports.email_provider import EmailProviderPort
from techhub.domain.entities.email import EmailMessage


class MockEmailProvider(EmailProviderPort):
    name = "mock"

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self._logger = logging.getLogger(__name__)

    async def send(self, message: EmailMessage) -> dict[str, Any]:
        self.sent.append(message)
        self._logger.info(
            "Mock email send", extra={"recipient": message.to, "provider": self.name}
        )
        return {"id": f"mock_email_{len(self.sent)}"}
