from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date

from techhub.application.exceptions import BookingNotFoundError, SlotConflictError
from techhub.application.ports.booking_store import BookingStorePort
from techhub.application.utils.booking_buckets import filter_bookings, new_booking_id, utc_now_iso
from techhub.domain.entities.booking import Booking


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: list[Booking] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create(self, booking: Booking) -> Booking:
        with self._lock:
            if any(b.slot == booking.slot for b in self._bookings):
                raise SlotConflictError(booking.date, booking.time)
            stored = replace(
                booking,
                id=new_booking_id({b.id for b in self._bookings if b.id}),
                status="confirmed",
                created_at=utc_now_iso(),
            )
            self._bookings.append(stored)
        self._logger.info("Booking stored", extra={"booking_id": stored.id})
        return stored

    def get(self, booking_id: str) -> Booking:
        return self._bookings[self._index_of(booking_id)]

    def list(self, filter: str | None = None, today: date | None = None) -> list[Booking]:
        return filter_bookings(list(self._bookings), filter, today or date.today())

    def update_status(self, booking_id: str, status: str) -> Booking:
        with self._lock:
            index = self._index_of(booking_id)
            updated = replace(self._bookings[index], status=status)
            self._bookings[index] = updated
        return updated

    def delete(self, booking_id: str) -> None:
        with self._lock:
            del self._bookings[self._index_of(booking_id)]

    def booked_times(self, day: str) -> list[str]:
        return [b.time for b in self._bookings if b.date == day]

    def _index_of(self, booking_id: str) -> int:
        for index, booking in enumerate(self._bookings):
            if booking.id == booking_id:
                return index
        raise BookingNotFoundError(booking_id)
