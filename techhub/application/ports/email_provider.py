from abc import ABC, abstractmethod
from typing import Any

from techhub.domain.entities.email import EmailMessage


class EmailProviderPort(ABC):
    name: str = "provider"

    @abstractmethod
    async def send(self, message: EmailMessage) -> dict[str, Any]:
        """Send one message. Raises EmailDeliveryError on failure."""
        raise NotImplementedError
