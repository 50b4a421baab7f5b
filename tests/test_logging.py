"""
Tests for the log line formatter.
"""

from __future__ import annotations

import logging

from techhub.main import ContextFormatter


def render(**extra) -> str:
    record = logging.LogRecord("techhub.test", logging.INFO, __file__, 1, "Booking submitted", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return ContextFormatter("%(levelname)s:%(name)s:%(message)s").format(record)


def test_context_fields_are_appended_under_their_own_keys():
    line = render(booking_id="BK-1", slot="2099-01-10 10:00", path="./data/bookings.json", count=3)
    assert line == (
        "INFO:techhub.test:Booking submitted | booking_id=BK-1 slot=2099-01-10 10:00 "
        "path=./data/bookings.json count=3"
    )


def test_empty_and_missing_fields_are_skipped():
    assert render(status="", error=None) == "INFO:techhub.test:Booking submitted"
    assert render(role="admin") == "INFO:techhub.test:Booking submitted | role=admin"
