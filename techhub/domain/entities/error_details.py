from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetails:
    kind: str  # "network" | "validation" | "server" | "unknown"
    message: str
    retryable: bool
    user_message: str
    code: str | None = None
