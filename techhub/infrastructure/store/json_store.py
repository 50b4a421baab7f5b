from __future__ import annotations

import json
import logging
import threading
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any

from techhub.application.exceptions import BookingNotFoundError, SlotConflictError
from techhub.application.ports.booking_store import BookingStorePort
from techhub.application.utils.booking_buckets import filter_bookings, new_booking_id, utc_now_iso
from techhub.domain.entities.booking import Booking


class JsonBookingStore(BookingStorePort):
    def __init__(self, path: str = "./data/bookings.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)
        self._bookings: list[Booking] = self._load()

    def _load(self) -> list[Booking]:
        """Load bookings from disk, return an empty list if missing or unreadable."""
        if not self._path.exists():
            return []
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict) or not isinstance(data.get("bookings", []), list):
                raise ValueError("expected an object with a bookings list")
            return [Booking.from_dict(item) for item in data.get("bookings", [])]
        except (ValueError, TypeError, AttributeError, IOError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueErrors
            self._logger.error(
                "Bookings file unreadable, starting empty",
                extra={"path": str(self._path), "error": str(e)},
            )
            return []

    def _save(self) -> None:
        """Write all bookings atomically: temp file, then rename over the original."""
        payload: dict[str, Any] = {
            "version": 1,
            "bookings": [b.to_dict() for b in self._bookings],
        }
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

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
            try:
                self._save()
            except Exception:
                self._bookings.pop()
                raise
        self._logger.info("Booking stored", extra={"booking_id": stored.id})
        return stored

    def get(self, booking_id: str) -> Booking:
        with self._lock:
            return self._bookings[self._index_of(booking_id)]

    def list(self, filter: str | None = None, today: date | None = None) -> list[Booking]:
        with self._lock:
            snapshot = list(self._bookings)
        return filter_bookings(snapshot, filter, today or date.today())

    def update_status(self, booking_id: str, status: str) -> Booking:
        with self._lock:
            index = self._index_of(booking_id)
            previous = self._bookings[index]
            updated = replace(previous, status=status)
            self._bookings[index] = updated
            try:
                self._save()
            except Exception:
                self._bookings[index] = previous
                raise
        return updated

    def delete(self, booking_id: str) -> None:
        with self._lock:
            index = self._index_of(booking_id)
            removed = self._bookings.pop(index)
            try:
                self._save()
            except Exception:
                self._bookings.insert(index, removed)
                raise

    def booked_times(self, day: str) -> list[str]:
        with self._lock:
            return [b.time for b in self._bookings if b.date == day]

    def _index_of(self, booking_id: str) -> int:
        for index, booking in enumerate(self._bookings):
            if booking.id == booking_id:
                return index
        raise BookingNotFoundError(booking_id)
