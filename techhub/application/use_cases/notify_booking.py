from __future__ import annotations

import logging

from techhub.application.use_cases.send_email import SendEmailUseCase
from techhub.application.utils.email_templates import booking_subject, build_booking_notification
from techhub.domain.entities.booking import Booking
from techhub.domain.entities.email import EmailMessage, EmailResult


class NotifyBookingUseCase:
    """Best-effort staff notification for a stored booking. Never raises."""

    def __init__(self, send_email: SendEmailUseCase, recipients: list[str], business_name: str) -> None:
        self._send_email = send_email
        self._recipients = list(recipients)
        self._business_name = business_name
        self._logger = logging.getLogger(__name__)

    async def execute(self, booking: Booking) -> list[EmailResult]:
        try:
            subject = booking_subject(booking)
            html = build_booking_notification(booking, self._business_name)
            messages = [EmailMessage(to=r, subject=subject, html=html) for r in self._recipients]
            results = await self._send_email.send_many(messages)
        except Exception as e:
            self._logger.exception(
                "Failed to send booking notification emails",
                extra={"booking_id": booking.id, "error": str(e)},
            )
            return []

        for result in results:
            if result.success:
                self._logger.info(
                    "Booking notification sent",
                    extra={"booking_id": booking.id, "recipient": result.email},
                )
            else:
                self._logger.error(
                    "Booking notification failed",
                    extra={"booking_id": booking.id, "recipient": result.email, "error": result.error},
                )
        return results
