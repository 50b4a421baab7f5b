from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# Ghana: 024-429-9095, 030-123-4567, +233-024-429-9095
PHONE_RE = re.compile(r"^(\+233-)?(0[235679][0-9]-[0-9]{3}-[0-9]{4})$")

_ANGLE_BRACKETS_RE = re.compile(r"[<>]")
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+=", re.IGNORECASE)
_PHONE_STRIP_RE = re.compile(r"[^\d+-]")

NAME_ERROR = "Name must be at least 2 characters long"
EMAIL_ERROR = "Please enter a valid email address"
CONTACT_PHONE_ERROR = "Please enter a valid phone number"
BOOKING_PHONE_ERROR = "Please enter a valid Ghanaian phone number (e.g., 024-429-9095)"
SUBJECT_ERROR = "Please select a subject"
MESSAGE_ERROR = "Message must be at least 10 characters long"
DATE_ERROR = "Please select a date"
TIME_ERROR = "Please select a time"
PURPOSE_ERROR = "Please select a purpose for your visit"
GUESTS_ERROR = "Number of guests must be a positive whole number"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)


def sanitize_input(value: Any) -> str:
    """
    Strip angle brackets, javascript: URIs and inline on*= handlers.
    Substring removal only; not a replacement for output escaping.
    """
    if not isinstance(value, str):
        return ""
    cleaned = _ANGLE_BRACKETS_RE.sub("", value)
    cleaned = _JS_PROTOCOL_RE.sub("", cleaned)
    cleaned = _EVENT_HANDLER_RE.sub("", cleaned)
    return cleaned.strip()


def validate_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def validate_phone(phone: str) -> bool:
    return bool(PHONE_RE.match(_PHONE_STRIP_RE.sub("", phone)))


def format_phone(raw: str) -> str:
    """Shape typed digits the way the booking form displays them."""
    digits = re.sub(r"\D", "", raw or "")
    if not digits:
        return ""
    if digits.startswith("233"):
        local = digits[3:]
        if len(local) >= 9:
            return f"+233-{local[:2]}-{local[2:5]}-{local[5:9]}"
        return local
    if len(digits) >= 10:
        return f"{digits[:3]}-{digits[3:6]}-{digits[6:10]}"
    return digits


def _is_text(value: Any, min_length: int = 1) -> bool:
    return isinstance(value, str) and len(value.strip()) >= min_length


def _sanitized_copy(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: sanitize_input(value) if isinstance(value, str) else value
        for key, value in payload.items()
    }


def _check_identity(payload: Mapping[str, Any], errors: dict[str, str]) -> None:
    if not _is_text(payload.get("name"), 2):
        errors["name"] = NAME_ERROR
    email = payload.get("email")
    if not isinstance(email, str) or not validate_email(email):
        errors["email"] = EMAIL_ERROR


def validate_contact(payload: Mapping[str, Any]) -> ValidationResult:
    if not isinstance(payload, Mapping):
        payload = {}
    errors: dict[str, str] = {}
    _check_identity(payload, errors)

    phone = payload.get("phone")
    if phone and isinstance(phone, str) and not validate_phone(phone):
        errors["phone"] = CONTACT_PHONE_ERROR

    if not _is_text(payload.get("subject")):
        errors["subject"] = SUBJECT_ERROR
    if not _is_text(payload.get("message"), 10):
        errors["message"] = MESSAGE_ERROR

    return ValidationResult(is_valid=not errors, errors=errors, data=_sanitized_copy(payload))


def validate_booking(payload: Mapping[str, Any]) -> ValidationResult:
    if not isinstance(payload, Mapping):
        payload = {}
    errors: dict[str, str] = {}
    _check_identity(payload, errors)

    phone = payload.get("phone")
    if not isinstance(phone, str) or not validate_phone(phone):
        errors["phone"] = BOOKING_PHONE_ERROR

    if not _is_text(payload.get("date")):
        errors["date"] = DATE_ERROR
    if not _is_text(payload.get("time")):
        errors["time"] = TIME_ERROR
    if not _is_text(payload.get("purpose")):
        errors["purpose"] = PURPOSE_ERROR

    guests = payload.get("guests")
    if guests not in (None, "") and parse_guests(guests) is None:
        errors["guests"] = GUESTS_ERROR

    return ValidationResult(is_valid=not errors, errors=errors, data=_sanitized_copy(payload))


def parse_guests(value: Any) -> int | None:
    """Positive integer from an int or numeric string; None if not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
        return number if number > 0 else None
    return None
