from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

TIME_SLOTS: tuple[str, ...] = ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00")

BOOKING_STATUSES: tuple[str, ...] = ("confirmed", "cancelled", "completed")

PURPOSE_LABELS: dict[str, str] = {
    "facility-tour": "Facility Tour",
    "program-inquiry": "Program Inquiry",
    "partnership": "Partnership Discussion",
    "partnership-discussion": "Partnership Discussion",
    "event-visit": "Event Visit",
    "other": "Other",
}


@dataclass(frozen=True)
class Booking:
    name: str
    email: str
    phone: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, one of TIME_SLOTS
    purpose: str
    guests: int = 1
    message: str = ""
    id: str | None = None  # BK-<epoch ms>, assigned by the store
    status: str = "confirmed"
    created_at: str | None = None  # ISO-8601 UTC, assigned by the store

    @property
    def slot(self) -> tuple[str, str]:
        return (self.date, self.time)

    @property
    def purpose_label(self) -> str:
        return PURPOSE_LABELS.get(self.purpose, self.purpose)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Booking":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
            date=data.get("date", ""),
            time=data.get("time", ""),
            purpose=data.get("purpose", ""),
            guests=int(data.get("guests") or 1),
            message=data.get("message") or "",
            status=data.get("status", "confirmed"),
            created_at=data.get("created_at"),
        )
