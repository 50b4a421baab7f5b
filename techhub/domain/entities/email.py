from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str
    sender: str | None = None


@dataclass(frozen=True)
class EmailResult:
    email: str
    success: bool
    result: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
