"""API tests for solar event endpoints."""

from __future__ import annotations

import pytest


def _client(default_timezone: str | None = "") -> object:
    """Create FastAPI TestClient with optional dependency guards."""
    pytest.importorskip("fastapi")
    testclient_module = pytest.importorskip("fastapi.testclient")
    from solar_events.api.app import create_app

    return testclient_module.TestClient(create_app(default_timezone=default_timezone))


def test_health_endpoint() -> None:
    """`GET /health` reports service status."""
    response = _client().get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_events_endpoint_returns_solar_day_payload() -> None:
    """`POST /events` returns every event for the requested day."""
    response = _client().post("/events", json={"date": "2024-03-20", "lat": 51.5, "lon": 0.0})

    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2024-03-20"
    assert body["timezone"] is None
    assert set(body["events"]) >= {"sunrise", "solar_noon", "sunset", "astronomical_twilight_end"}
    assert body["events"]["sunrise"].startswith("2024-03-20T06:")
    assert 725.0 < body["day_length_minutes"] < 740.0


def test_events_endpoint_saturates_latitude() -> None:
    """Latitudes beyond the poles are accepted and saturated."""
    response = _client().post("/events", json={"date": "2024-06-21", "lat": 95.0, "lon": 0.0})

    assert response.status_code == 200
    assert response.json()["lat"] == 89.8


def test_single_event_polar_day() -> None:
    """Polar outcomes are reported instead of a time."""
    response = _client().post(
        "/events/sunset",
        json={"date": "2024-06-21", "lat": 78.0, "lon": 15.0},
    )

    assert response.status_code == 200
    assert response.json() == {"event": "sunset", "time_utc": None, "never_reaches": "always_above"}


def test_single_event_returns_time() -> None:
    """A reachable event is returned as an ISO UTC timestamp."""
    response = _client().post("/events/solar_noon", json={"date": "2024-03-20", "lat": 51.5, "lon": 0.0})

    assert response.status_code == 200
    body = response.json()
    assert body["never_reaches"] is None
    assert body["time_utc"].startswith("2024-03-20T12:0")


def test_unknown_event_is_404() -> None:
    """Unknown event names are rejected."""
    response = _client().post("/events/moonrise", json={"date": "2024-03-20", "lat": 51.5, "lon": 0.0})

    assert response.status_code == 404


def test_unknown_timezone_is_422() -> None:
    """Unresolvable timezones surface as validation errors."""
    response = _client().post(
        "/events",
        json={"date": "2024-03-20", "lat": 51.5, "lon": 0.0, "timezone": "Nowhere/Special"},
    )

    assert response.status_code == 422
    assert "unknown timezone" in response.json()["detail"]


def test_default_timezone_applies_when_request_omits_one() -> None:
    """The configured default timezone is used for requests without one."""
    response = _client(default_timezone="Europe/Amsterdam").post(
        "/events",
        json={"date": "2024-03-20", "lat": 52.37, "lon": 4.9},
    )

    assert response.status_code == 200
    assert response.json()["timezone"] == "Europe/Amsterdam"


def test_invalid_date_is_rejected_by_schema() -> None:
    """Malformed dates fail request validation."""
    response = _client().post("/events", json={"date": "2023-02-29", "lat": 51.5, "lon": 0.0})

    assert response.status_code == 422
