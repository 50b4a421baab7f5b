from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminUser:
    id: str
    username: str
    role: str  # "admin" | "staff"
