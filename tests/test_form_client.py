"""
Tests for FormClient against an in-process mock transport.
"""

from __future__ import annotations

import json

import httpx
from conftest import booking_payload

from techhub.application.utils.rate_limiter import RateLimiter
from techhub.application.utils.retry import RetryPolicy
from techhub.client.form_client import FormClient

CONTACT = {
    "name": "Kofi Boateng",
    "email": "kofi@example.com",
    "subject": "Programs",
    "message": "Which courses start next month?",
}


class ScriptedServer:
    """Answers each request with the next (status, body) pair; repeats the last one."""

    def __init__(self, *responses: tuple[int, dict]) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.responses)) - 1
        status, body = self.responses[index]
        return httpx.Response(status, json=body)


def make_client(server: ScriptedServer, **kw) -> FormClient:
    return FormClient(
        "http://hub.test",
        transport=httpx.MockTransport(server),
        retry_policy=RetryPolicy(max_retries=2, base_delay_ms=0),
        **kw,
    )


async def test_retries_server_errors_then_succeeds():
    server = ScriptedServer((503, {"error": "busy"}), (200, {"success": True, "message": "ok"}))
    result = await make_client(server).submit_contact(CONTACT)

    assert result.success is True
    assert result.data == {"success": True, "message": "ok"}
    assert len(server.requests) == 2
    assert json.loads(server.requests[-1].content)["email"] == "kofi@example.com"


async def test_gives_up_after_max_retries():
    server = ScriptedServer((500, {"error": "down"}))
    result = await make_client(server).submit_contact(CONTACT)

    assert result.success is False
    assert result.error.code == "HTTP_500"
    assert result.error.retryable is True
    assert len(server.requests) == 3


async def test_client_error_is_not_retried():
    server = ScriptedServer((409, {"success": False, "error": "This time slot is already booked"}))
    result = await make_client(server).submit_booking(booking_payload())

    assert result.success is False
    assert result.error.kind == "validation"
    assert result.error.code == "HTTP_409"
    assert len(server.requests) == 1


async def test_network_failure_is_classified():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = FormClient(
        "http://hub.test",
        transport=httpx.MockTransport(handler),
        retry_policy=RetryPolicy(max_retries=1, base_delay_ms=0),
    )
    result = await client.submit_contact(CONTACT)
    assert result.error.kind == "network"
    assert result.error.retryable is True


async def test_local_validation_short_circuits():
    server = ScriptedServer((200, {"success": True}))
    result = await make_client(server).submit_contact({**CONTACT, "email": "bad"})

    assert result.success is False
    assert result.error.kind == "validation"
    assert "valid email" in result.error.user_message
    assert server.requests == []


async def test_client_side_rate_limit():
    server = ScriptedServer((400, {"success": False}))
    client = make_client(server, rate_limiter=RateLimiter(max_attempts=3, window_ms=60000))
    for _ in range(3):
        assert (await client.submit_contact(CONTACT)).error.code == "HTTP_400"

    blocked = await client.submit_contact(CONTACT)
    assert blocked.error.code == "RATE_LIMIT"
    assert len(server.requests) == 3


async def test_success_resets_rate_limit():
    server = ScriptedServer((200, {"success": True}))
    client = make_client(server, rate_limiter=RateLimiter(max_attempts=1, window_ms=60000))
    for _ in range(3):
        assert (await client.submit_contact(CONTACT)).success is True


async def test_available_slots():
    server = ScriptedServer(
        (200, {"success": True, "date": "2099-01-10", "availableSlots": ["09:00"], "bookedSlots": ["10:00"]})
    )
    body = await make_client(server).available_slots("2099-01-10")
    assert body["availableSlots"] == ["09:00"]
    assert server.requests[0].url.params["date"] == "2099-01-10"
