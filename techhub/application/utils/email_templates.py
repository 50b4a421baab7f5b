from __future__ import annotations

from datetime import date, datetime
from html import escape

from techhub.domain.entities.booking import Booking
from techhub.domain.entities.contact import ContactSubmission

_ROW = (
    '<tr><td style="padding: 8px 0; font-weight: bold; color: #374151; width: 120px;">{label}:</td>'
    '<td style="padding: 8px 0; color: #1f2937;">{value}</td></tr>'
)


def _multiline(text: str) -> str:
    return escape(text).replace("\n", "<br>")


def _long_date(value: str) -> str:
    try:
        day = date.fromisoformat(value)
    except ValueError:
        return escape(value)
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def _submitted_at(value: str | None) -> str:
    if not value:
        return ""
    try:
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return escape(value)
    return f"{moment:%B} {moment.day}, {moment.year} at {moment:%H:%M} UTC"


def booking_subject(booking: Booking) -> str:
    return f"New Booking Request - {booking.name} ({booking.date} at {booking.time})"


def build_booking_notification(booking: Booking, business_name: str) -> str:
    rows = "".join(
        _ROW.format(label=label, value=value)
        for label, value in (
            ("Visitor Name", escape(booking.name)),
            ("Email", escape(booking.email)),
            ("Phone", escape(booking.phone)),
            ("Visit Date", _long_date(booking.date)),
            ("Visit Time", escape(booking.time)),
            ("Purpose", escape(booking.purpose_label)),
            ("Number of Guests", str(booking.guests)),
            ("Booking ID", f'<span style="font-family: monospace;">{escape(booking.id or "")}</span>'),
        )
    )

    message_block = ""
    if booking.message:
        message_block = (
            '<div style="background-color: #f1f5f9; padding: 20px; border-radius: 6px; margin-bottom: 20px;">'
            '<h3 style="color: #1e40af; margin: 0 0 10px 0; font-size: 16px;">Additional Message</h3>'
            f'<p style="color: #1f2937; margin: 0; line-height: 1.6;">{_multiline(booking.message)}</p>'
            "</div>"
        )

    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; background-color: #f8fafc; padding: 20px;">'
        '<div style="background-color: white; border-radius: 8px; padding: 30px;">'
        '<div style="text-align: center; margin-bottom: 30px;">'
        f'<h1 style="color: #1e40af; margin: 0; font-size: 24px;">{escape(business_name)}</h1>'
        '<p style="color: #64748b; margin: 5px 0 0 0;">New Booking Request</p>'
        "</div>"
        '<div style="background-color: #f1f5f9; padding: 20px; border-radius: 6px; margin-bottom: 20px;">'
        '<h2 style="color: #1e40af; margin: 0 0 15px 0; font-size: 18px;">Booking Details</h2>'
        f'<table style="width: 100%; border-collapse: collapse;">{rows}</table>'
        "</div>"
        f"{message_block}"
        '<div style="background-color: #dbeafe; padding: 15px; border-radius: 6px; border-left: 4px solid #1e40af;">'
        '<p style="margin: 0; color: #1e40af; font-weight: 500;"><strong>Action Required:</strong> '
        "Please review this booking request and confirm the appointment or contact the visitor "
        "if additional information is needed.</p>"
        "</div>"
        '<div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #e5e7eb; text-align: center;">'
        '<p style="color: #64748b; font-size: 14px; margin: 0;">'
        f"This notification was sent automatically from the {escape(business_name)} booking system.<br>"
        f"Booking submitted on {_submitted_at(booking.created_at)}"
        "</p></div>"
        "</div></div>"
    )


def contact_subject(submission: ContactSubmission) -> str:
    return f"Contact Form: {submission.subject}"


def build_contact_email(submission: ContactSubmission, business_name: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<h2 style="color: #1e40af;">New Contact Form Submission</h2>'
        '<div style="background: #f8fafc; padding: 20px; border-radius: 8px; margin: 20px 0;">'
        f"<p><strong>Name:</strong> {escape(submission.name)}</p>"
        f"<p><strong>Email:</strong> {escape(submission.email)}</p>"
        f"<p><strong>Phone:</strong> {escape(submission.phone) or 'Not provided'}</p>"
        f"<p><strong>Subject:</strong> {escape(submission.subject)}</p>"
        "<p><strong>Message:</strong></p>"
        '<div style="background: white; padding: 15px; border-radius: 4px; margin-top: 10px;">'
        f"{_multiline(submission.message)}"
        "</div></div>"
        '<p style="color: #64748b; font-size: 14px;">'
        f"This message was sent from the {escape(business_name)} contact form."
        "</p></div>"
    )
