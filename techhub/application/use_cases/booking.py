from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from techhub.application.exceptions import BookingValidationError
from techhub.application.ports.booking_store import BookingStorePort
from techhub.application.utils.booking_buckets import BUCKETS, parse_visit_date
from techhub.application.utils.validation import parse_guests, validate_booking
from techhub.domain.entities.booking import BOOKING_STATUSES, TIME_SLOTS, Booking

INVALID_DATE = "Invalid date selected"
INVALID_TIME = "Please select an available time slot"


@dataclass(frozen=True)
class Availability:
    date: str
    available_slots: list[str]
    booked_slots: list[str]


class BookingUseCase:
    def __init__(self, store: BookingStorePort, timezone: ZoneInfo) -> None:
        self._store = store
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def today(self) -> date:
        return datetime.now(self._timezone).date()

    def create(self, payload: Mapping[str, Any], today: date | None = None) -> Booking:
        """
        Validate and store a visit request.
        Raises BookingValidationError for bad input and SlotConflictError for a taken slot.
        """
        validation = validate_booking(payload)
        if not validation.is_valid:
            self._logger.info("Booking validation failed", extra={"error": ",".join(validation.errors)})
            raise BookingValidationError(validation.errors)

        data = validation.data
        visit_date = parse_visit_date(data["date"])
        if visit_date is None or visit_date <= (today or self.today()):
            raise BookingValidationError({"date": INVALID_DATE}, message=INVALID_DATE)
        time_slot = data["time"].strip()
        if time_slot not in TIME_SLOTS:
            raise BookingValidationError({"time": INVALID_TIME}, message=INVALID_TIME)

        booking = Booking(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            date=visit_date.isoformat(),
            time=time_slot,
            purpose=data["purpose"],
            guests=parse_guests(data.get("guests")) or 1,
            message=data.get("message") or "",
        )
        stored = self._store.create(booking)
        self._logger.info(
            "Booking submitted",
            extra={"booking_id": stored.id, "slot": f"{stored.date} {stored.time}"},
        )
        return stored

    def availability(self, day: str) -> Availability:
        """Raises ValueError unless `day` is a YYYY-MM-DD date."""
        visit_date = parse_visit_date(day)
        if visit_date is None:
            raise ValueError(INVALID_DATE)
        day = visit_date.isoformat()
        booked = self._store.booked_times(day)
        return Availability(
            date=day,
            available_slots=[slot for slot in TIME_SLOTS if slot not in booked],
            booked_slots=booked,
        )

    def list(self, filter: str | None = None, today: date | None = None) -> list[Booking]:
        """All bookings in the bucket, newest first."""
        if filter not in (None, "") and filter not in BUCKETS:
            raise ValueError(f"Unknown filter: {filter}")
        bookings = self._store.list(filter=filter, today=today or self.today())
        return sorted(bookings, key=lambda b: b.created_at or "", reverse=True)

    def stats(self) -> dict[str, int]:
        counts = {status: 0 for status in BOOKING_STATUSES}
        for booking in self._store.list():
            counts[booking.status] = counts.get(booking.status, 0) + 1
        counts["total"] = sum(counts.values())
        return counts

    def update_status(self, booking_id: str, status: str) -> Booking:
        if status not in BOOKING_STATUSES:
            raise ValueError(f"Invalid status: {status}")
        updated = self._store.update_status(booking_id, status)
        self._logger.info("Booking status updated", extra={"booking_id": booking_id, "status": status})
        return updated

    def delete(self, booking_id: str) -> None:
        self._store.delete(booking_id)
        self._logger.info("Booking deleted", extra={"booking_id": booking_id})
