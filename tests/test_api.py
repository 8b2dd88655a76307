"""
HTTP tests for the booking service routes.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
from app.wiring.dependencies import get_session_registry, reset_state

AUTH = {"X-User-Id": "1"}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "MOCK_PAYMENT_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(settings, "MOCK_PAYMENT_FAIL", False)
    monkeypatch.setattr(settings, "MOCK_CONTACT_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(settings, "ENV", "dev")
    reset_state()
    with TestClient(app) as test_client:
        yield test_client
    reset_state()


def _future_day(days: int = 7) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_catalog_routes(client):
    specs = client.get("/api/v1/catalog/specializations").json()
    assert len(specs) == 6

    cardiology = client.get("/api/v1/catalog/doctors", params={"specialization": "Cardiology"}).json()
    assert [d["name"] for d in cardiology] == ["Dr. Michael Chen"]
    assert len(client.get("/api/v1/catalog/doctors").json()) == 4

    slots = client.get("/api/v1/catalog/time-slots").json()
    assert len(slots) == 12
    assert slots[7] == {"value": "14:30", "label": "02:30 PM"}


def test_open_booking_without_user_redirects(client):
    response = client.post("/api/v1/bookings")

    assert response.status_code == 401
    body = response.json()
    assert body["redirect_to"] == "/login"
    assert body["notifications"] == [{"level": "error", "message": "Please login to book an appointment"}]
    assert len(get_session_registry()) == 0


def test_booking_flow_over_http(client):
    opened = client.post("/api/v1/bookings", headers=AUTH)
    assert opened.status_code == 201
    session_id = opened.json()["session_id"]
    assert opened.json()["selection"]["step"] == 1

    base = f"/api/v1/bookings/{session_id}"
    step = client.post(f"{base}/specialization", json={"specialization": "Cardiology"}, headers=AUTH).json()
    assert step["selection"]["step"] == 2
    assert [d["id"] for d in step["shortlist"]] == ["2"]

    rejected = client.post(f"{base}/doctor", json={"doctor_id": "1"}, headers=AUTH)
    assert rejected.status_code == 422
    assert rejected.json()["action"] == "rejected"
    assert rejected.json()["notifications"][0]["level"] == "error"

    client.post(f"{base}/doctor", json={"doctor_id": "2"}, headers=AUTH)
    past = client.post(f"{base}/date", json={"date": "2000-01-01"}, headers=AUTH)
    assert past.status_code == 422

    day = _future_day()
    client.post(f"{base}/date", json={"date": day}, headers=AUTH)
    step = client.post(f"{base}/time", json={"time": "14:30"}, headers=AUTH).json()
    assert step["selection"]["step"] == 5

    back = client.post(f"{base}/back", headers=AUTH).json()
    assert back["selection"]["step"] == 4
    assert back["selection"]["time"] == "14:30"
    client.post(f"{base}/time", json={"time": "14:30"}, headers=AUTH)

    confirmed = client.post(f"{base}/confirm", headers=AUTH)
    assert confirmed.status_code == 200
    body = confirmed.json()
    assert body["action"] == "payment_succeeded"
    assert body["navigate_to"] == "/appointments"
    assert [n["level"] for n in body["notifications"]] == ["success"]
    assert [e["kind"] for e in body["payment_events"]] == ["started", "settled"]
    assert body["appointment"]["appointment_date"] == day

    assert client.get(base, headers=AUTH).status_code == 404

    listed = client.get("/api/v1/appointments", params={"filter": "upcoming"}, headers=AUTH).json()
    assert [a["appointment_date"] for a in listed["appointments"]] == [day]


def test_session_belongs_to_its_user(client):
    session_id = client.post("/api/v1/bookings", headers=AUTH).json()["session_id"]
    assert client.get(f"/api/v1/bookings/{session_id}").status_code == 404
    assert client.get(f"/api/v1/bookings/{session_id}", headers=AUTH).status_code == 200


def test_close_booking_discards_session(client):
    session_id = client.post("/api/v1/bookings", headers=AUTH).json()["session_id"]
    assert client.delete(f"/api/v1/bookings/{session_id}", headers=AUTH).status_code == 204
    assert client.get(f"/api/v1/bookings/{session_id}", headers=AUTH).status_code == 404


def test_payment_failure_over_http(client, monkeypatch):
    monkeypatch.setattr(settings, "MOCK_PAYMENT_FAIL", True)
    session_id = client.post("/api/v1/bookings", headers=AUTH).json()["session_id"]
    base = f"/api/v1/bookings/{session_id}"
    client.post(f"{base}/specialization", json={"specialization": "Cardiology"}, headers=AUTH)
    client.post(f"{base}/doctor", json={"doctor_id": "2"}, headers=AUTH)
    client.post(f"{base}/date", json={"date": _future_day()}, headers=AUTH)
    client.post(f"{base}/time", json={"time": "09:00"}, headers=AUTH)

    response = client.post(f"{base}/confirm", headers=AUTH)

    assert response.status_code == 402
    assert response.json()["selection"]["step"] == 5
    assert response.json()["navigate_to"] is None
    assert client.get(base, headers=AUTH).status_code == 200


def test_appointments_routes(client):
    assert client.get("/api/v1/appointments").status_code == 401

    listed = client.get("/api/v1/appointments", headers=AUTH).json()
    assert [a["id"] for a in listed["appointments"]] == ["1", "2"]

    cancelled = client.post("/api/v1/appointments/1/cancel", headers=AUTH)
    assert cancelled.status_code == 200
    assert cancelled.json()["appointment"]["status"] == "cancelled"

    again = client.post("/api/v1/appointments/1/cancel", headers=AUTH)
    assert again.status_code == 409

    only_cancelled = client.get("/api/v1/appointments", params={"filter": "cancelled"}, headers=AUTH).json()
    assert [a["id"] for a in only_cancelled["appointments"]] == ["1"]


def test_contact_form(client):
    ok = client.post(
        "/api/v1/contact",
        json={
            "name": "Jane",
            "email": "jane@example.com",
            "phone": "+1 555 0100",
            "subject": "Question",
            "message": "Do you take walk-ins?",
        },
    )
    assert ok.status_code == 200
    assert ok.json()["notifications"][0]["level"] == "success"

    bad = client.post(
        "/api/v1/contact",
        json={"name": "Jane", "email": "not-an-email", "phone": "1", "subject": "s", "message": " "},
    )
    assert bad.status_code == 422


def test_contact_form_rejects_malformed_email(client):
    """Addresses that only look like an address, such as an empty domain label, are refused."""
    for email in ("a@b..c", "jane@", "@example.com", "jane@@example.com"):
        response = client.post(
            "/api/v1/contact",
            json={
                "name": "Jane",
                "email": email,
                "phone": "+1 555 0100",
                "subject": "Question",
                "message": "Do you take walk-ins?",
            },
        )
        assert response.status_code == 422, email
