"""
Tests for contact/booking payload validation and input sanitizing.
"""

from __future__ import annotations

import pytest

from techhub.application.utils.validation import (
    format_phone,
    sanitize_input,
    validate_booking,
    validate_contact,
    validate_phone,
)

from conftest import booking_payload

CONTACT = {
    "name": "Kofi Boateng",
    "email": "kofi@example.com",
    "phone": "024-429-9095",
    "subject": "Programs",
    "message": "Which courses start next month?",
}


def test_valid_contact_passes():
    result = validate_contact(CONTACT)
    assert result.is_valid is True
    assert result.errors == {}


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
def test_missing_contact_field_is_reported_by_name(field):
    payload = dict(CONTACT)
    del payload[field]
    result = validate_contact(payload)
    assert result.is_valid is False
    assert field in result.errors


def test_contact_phone_is_optional_but_checked_when_present():
    payload = dict(CONTACT)
    del payload["phone"]
    assert validate_contact(payload).is_valid is True

    payload["phone"] = "12345"
    result = validate_contact(payload)
    assert result.errors == {"phone": "Please enter a valid phone number"}


def test_contact_length_rules():
    result = validate_contact({**CONTACT, "name": " A ", "message": "too short"})
    assert set(result.errors) == {"name", "message"}


def test_non_mapping_payload_reports_every_required_field():
    result = validate_contact(None)
    assert set(result.errors) == {"name", "email", "subject", "message"}


def test_booking_requires_phone_date_time_purpose():
    result = validate_booking({"name": "Ama", "email": "ama@example.com"})
    assert result.is_valid is False
    assert set(result.errors) == {"phone", "date", "time", "purpose"}
    assert "024-429-9095" in result.errors["phone"]


def test_booking_message_optional():
    payload = booking_payload()
    del payload["message"]
    assert validate_booking(payload).is_valid is True


@pytest.mark.parametrize("guests", [0, -2, "two", 1.5, True])
def test_booking_guests_must_be_positive_integer(guests):
    result = validate_booking(booking_payload(guests=guests))
    assert "guests" in result.errors


def test_booking_guests_numeric_string_accepted():
    assert validate_booking(booking_payload(guests="3")).is_valid is True


def test_validation_returns_sanitized_copy_without_mutating_input():
    payload = booking_payload(message="<b onclick=alert(1)>hi</b> javascript:go()")
    result = validate_booking(payload)
    assert result.data["message"] == "b alert(1)hi/b go()"
    assert payload["message"].startswith("<b")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  hello  ", "hello"),
        ("<script>x</script>", "scriptx/script"),
        ("JavaScript:alert(1)", "alert(1)"),
        ('img onerror="x"', 'img "x"'),
        (42, ""),
        (None, ""),
    ],
)
def test_sanitize_input(raw, expected):
    assert sanitize_input(raw) == expected


@pytest.mark.parametrize(
    "phone, ok",
    [
        ("024-429-9095", True),
        ("030-123-4567", True),
        ("+233-024-429-9095", True),
        ("(024) 429-9095", False),
        ("014-429-9095", False),
        ("0244299095", False),
    ],
)
def test_validate_phone(phone, ok):
    assert validate_phone(phone) is ok


def test_format_phone():
    assert format_phone("0244299095") == "024-429-9095"
    assert format_phone("233244299095") == "+233-24-429-9095"
    assert format_phone("024") == "024"
    assert format_phone("") == ""
