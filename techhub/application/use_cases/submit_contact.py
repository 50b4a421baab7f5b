from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from techhub.application.use_cases.send_email import SendEmailUseCase
from techhub.application.utils.email_templates import build_contact_email, contact_subject
from techhub.application.utils.validation import ValidationResult, validate_contact
from techhub.domain.entities.contact import ContactSubmission
from techhub.domain.entities.email import EmailMessage


class SubmitContactUseCase:
    def __init__(self, send_email: SendEmailUseCase, inbox: str, business_name: str) -> None:
        self._send_email = send_email
        self._inbox = inbox
        self._business_name = business_name
        self._logger = logging.getLogger(__name__)

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        return validate_contact(payload)

    async def execute(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Send an already-validated, sanitized submission to the contact inbox.
        Raises EmailDeliveryError when every provider fails.
        """
        submission = ContactSubmission(
            name=data["name"],
            email=data["email"],
            phone=data.get("phone") or "",
            subject=data["subject"],
            message=data["message"],
        )
        message = EmailMessage(
            to=self._inbox,
            subject=contact_subject(submission),
            html=build_contact_email(submission, self._business_name),
        )
        result = await self._send_email.execute(message)
        self._logger.info(
            "Contact form submitted",
            extra={"recipient": self._inbox, "status": "sent"},
        )
        return result
