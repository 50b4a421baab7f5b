from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from techhub.application.exceptions import EmailDeliveryError
from techhub.core.config import Settings
from techhub.domain.entities.email import EmailMessage
from techhub.infrastructure.email.mock_email import MockEmailProvider
from techhub.main import create_app
from techhub.wiring.dependencies import build_container


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ENV="test",
        STORE_PROVIDER="memory",
        ADMIN_PASSWORD="admin-pass",
        STAFF_PASSWORD="staff-pass",
        JWT_SECRET="test-secret",
        STAFF_NOTIFICATION_EMAILS=["info@example.com", "admissions@example.com"],
        CONTACT_INBOX="info@example.com",
    )


@pytest.fixture
def mailer() -> MockEmailProvider:
    return MockEmailProvider()


@pytest.fixture
def container(test_settings, mailer):
    return build_container(test_settings, email_providers=(mailer, None))


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def admin_headers(client) -> dict[str, str]:
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin-pass"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def booking_payload(**overrides) -> dict:
    payload = {
        "name": "Ama Mensah",
        "email": "ama@example.com",
        "phone": "024-429-9095",
        "date": "2099-01-10",
        "time": "10:00",
        "purpose": "facility-tour",
        "guests": 2,
        "message": "Looking forward to it",
    }
    payload.update(overrides)
    return payload


class FailingProvider:
    """E-mail provider that fails for every recipient, or only for those in `fail_for`."""

    name = "failing"

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.fail_for = fail_for
        self.calls = 0

    async def send(self, message: EmailMessage) -> dict:
        self.calls += 1
        if self.fail_for is None or message.to in self.fail_for:
            raise EmailDeliveryError("provider down")
        return {"id": f"ok-{message.to}"}
