"""
Tests for the /api/contact endpoint.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from techhub.application.utils.validation import EMAIL_ERROR, MESSAGE_ERROR
from techhub.main import create_app
from techhub.wiring.dependencies import build_container

from conftest import FailingProvider

CONTACT = {
    "name": "Kofi Boateng",
    "email": "kofi@example.com",
    "phone": "024-429-9095",
    "subject": "Programs",
    "message": "Which courses start next month?",
}


def test_contact_sends_to_inbox(client, mailer):
    resp = client.post("/api/contact", json=CONTACT)
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Thank you for your message! We'll get back to you soon.",
    }
    assert len(mailer.sent) == 1
    sent = mailer.sent[0]
    assert sent.to == "info@example.com"
    assert "Kofi Boateng" in sent.html
    assert "Programs" in sent.subject


def test_contact_input_is_sanitized(client, mailer):
    resp = client.post(
        "/api/contact", json={**CONTACT, "message": "<script>alert('x')</script> please call"}
    )
    assert resp.status_code == 200
    assert "<script>" not in mailer.sent[0].html


def test_contact_validation_details(client, mailer):
    resp = client.post("/api/contact", json={**CONTACT, "email": "nope", "message": "short"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    assert body["details"] == {"email": EMAIL_ERROR, "message": MESSAGE_ERROR}
    assert mailer.sent == []


def test_contact_rate_limited_per_ip(client):
    headers = {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
    for _ in range(3):
        assert client.post("/api/contact", json=CONTACT, headers=headers).status_code == 200

    blocked = client.post("/api/contact", json=CONTACT, headers=headers)
    assert blocked.status_code == 429
    assert blocked.json()["success"] is False

    other = client.post("/api/contact", json=CONTACT, headers={"X-Forwarded-For": "198.51.100.2"})
    assert other.status_code == 200


def test_invalid_submissions_count_toward_limit(client):
    for _ in range(3):
        client.post("/api/contact", json={"name": ""})
    assert client.post("/api/contact", json=CONTACT).status_code == 429


def test_contact_all_providers_down(test_settings):
    container = build_container(test_settings, email_providers=(FailingProvider(), FailingProvider()))
    client = TestClient(create_app(container))

    resp = client.post("/api/contact", json=CONTACT)
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Sorry, there was an error sending your message. Please try again."
    assert body["details"] == "All email services are currently unavailable"


def test_contact_get_not_allowed(client):
    resp = client.get("/api/contact")
    assert resp.status_code == 405
    assert resp.json() == {"success": False, "error": "Method not allowed"}
