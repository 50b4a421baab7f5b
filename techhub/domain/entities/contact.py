from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    subject: str
    message: str
    phone: str = ""
