from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from techhub.domain.entities.error_details import ErrorDetails

NETWORK_MESSAGE = "Network connection issue. Please check your internet connection and try again."
RATE_LIMIT_MESSAGE = "Too many attempts. Please wait a moment before trying again."
SERVER_MESSAGE = "Our servers are experiencing issues. Please try again in a few moments."
CLIENT_MESSAGE = "There was an issue with your request. Please check your input and try again."
UNKNOWN_MESSAGE = "An unexpected error occurred. Please try again."


def _status_of(error: Any) -> int | None:
    if isinstance(error, Mapping):
        status = error.get("status")
    elif isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
    else:
        status = getattr(error, "status", None)
        if status is None:
            status = getattr(error, "status_code", None)
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    return status


def _is_network_error(error: Any) -> bool:
    if isinstance(error, (httpx.TransportError, ConnectionError)):
        return True
    return isinstance(error, TypeError) and "fetch" in str(error)


def classify_error(error: Any) -> ErrorDetails:
    """Map any caught value to an ErrorDetails. First matching rule wins."""
    if _is_network_error(error):
        return ErrorDetails(
            kind="network",
            message=str(error),
            retryable=True,
            user_message=NETWORK_MESSAGE,
        )

    status = _status_of(error)
    if status == 429:
        return ErrorDetails(
            kind="server",
            message="Rate limit exceeded",
            code="RATE_LIMIT",
            retryable=True,
            user_message=RATE_LIMIT_MESSAGE,
        )
    if status is not None and status >= 500:
        return ErrorDetails(
            kind="server",
            message=f"Server error: {status}",
            code=f"HTTP_{status}",
            retryable=True,
            user_message=SERVER_MESSAGE,
        )
    if status is not None and status >= 400:
        return ErrorDetails(
            kind="validation",
            message=f"Client error: {status}",
            code=f"HTTP_{status}",
            retryable=False,
            user_message=CLIENT_MESSAGE,
        )

    # Exceptions and arbitrary values alike: message is the string form.
    return ErrorDetails(
        kind="unknown",
        message=str(error),
        retryable=False,
        user_message=UNKNOWN_MESSAGE,
    )


def user_friendly_message(error: ErrorDetails) -> str:
    return error.user_message


def retry_button_text(error: ErrorDetails) -> str:
    return "Try Again" if error.retryable else "Go Back"
