from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from techhub.domain.entities.booking import Booking


class BookingStorePort(ABC):
    @abstractmethod
    def create(self, booking: Booking) -> Booking:
        """
        Store a new booking. Assigns id, created_at and the confirmed status.
        Raises SlotConflictError if the (date, time) pair is already present.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking:
        """Raises BookingNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def list(self, filter: str | None = None, today: date | None = None) -> list[Booking]:
        """
        Return bookings in insertion order, optionally restricted to the
        "today", "upcoming" or "past" bucket relative to `today`.
        """
        raise NotImplementedError

    @abstractmethod
    def update_status(self, booking_id: str, status: str) -> Booking:
        """Raises BookingNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: str) -> None:
        """Raises BookingNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def booked_times(self, day: str) -> list[str]:
        """Times already taken on the given YYYY-MM-DD date."""
        raise NotImplementedError
