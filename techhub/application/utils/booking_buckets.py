from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, timezone

from techhub.domain.entities.booking import Booking

BUCKETS = ("all", "today", "upcoming", "past")

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_visit_date(value: str) -> date | None:
    """Strict YYYY-MM-DD only; None for anything else."""
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value.strip()):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def in_bucket(booking: Booking, bucket: str | None, today: date) -> bool:
    if bucket in (None, "", "all"):
        return True
    visit = parse_visit_date(booking.date)
    if visit is None:
        return False
    if bucket == "today":
        return visit == today
    if bucket == "upcoming":
        return visit > today
    if bucket == "past":
        return visit < today
    raise ValueError(f"Unknown booking filter: {bucket}")


def filter_bookings(bookings: Iterable[Booking], bucket: str | None, today: date) -> list[Booking]:
    return [b for b in bookings if in_bucket(b, bucket, today)]


def new_booking_id(existing: set[str], now: datetime | None = None) -> str:
    """BK-<epoch ms>; bumps the millisecond until it is unused."""
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    while f"BK-{millis}" in existing:
        millis += 1
    return f"BK-{millis}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
