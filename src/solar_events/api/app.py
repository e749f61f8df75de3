"""FastAPI app exposing solar event endpoints."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from solar_events.astro.solar import event_time, solar_day
from solar_events.contracts import (
    InvalidDateError,
    NeverReachesDepression,
    SolarEvent,
    UnknownTimezoneError,
)

logger = logging.getLogger(__name__)

_SERVICE_VERSION = "0.1.0"


class EventsRequest(BaseModel):
    """Request schema for solar events at one place and date."""

    on_date: date = Field(alias="date")
    lat: float = Field(allow_inf_nan=False)
    lon: float = Field(allow_inf_nan=False)
    timezone: str | None = None


class SolarDayResponse(BaseModel):
    """Response schema aligned with the SolarDay contract."""

    date: str
    lat: float
    lon: float
    timezone: str | None
    events: dict[str, Any]
    day_length_minutes: float | None


class EventResponse(BaseModel):
    """Single event time or polar outcome."""

    event: str
    time_utc: datetime | None = None
    never_reaches: str | None = None


def _configure_logging() -> None:
    level = os.getenv("SOLAR_EVENTS_LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _resolve_timezone(requested: str | None, default_timezone: str) -> str | None:
    """Use the request timezone, else the configured default; blank means UTC."""
    chosen = requested if requested is not None else default_timezone
    return chosen.strip() or None


def create_app(default_timezone: str | None = None) -> FastAPI:
    """Create the solar events API application."""
    _configure_logging()
    if default_timezone is None:
        default_timezone = os.getenv("SOLAR_EVENTS_DEFAULT_TIMEZONE", "")

    app = FastAPI(title="Solar Events API", version=_SERVICE_VERSION)

    @app.get("/health")
    def get_health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/events", response_model=SolarDayResponse)
    def post_events(payload: EventsRequest) -> SolarDayResponse:
        timezone_id = _resolve_timezone(payload.timezone, default_timezone)
        logger.info(
            "events date=%s lat=%s lon=%s timezone=%s",
            payload.on_date,
            payload.lat,
            payload.lon,
            timezone_id or "UTC",
        )
        try:
            result = solar_day(payload.on_date, payload.lat, payload.lon, timezone_id)
        except (InvalidDateError, UnknownTimezoneError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        for event, outcome in result.events.items():
            if isinstance(outcome, NeverReachesDepression):
                logger.debug("%s never occurs: %s", event.value, outcome.extreme.value)
        return SolarDayResponse(**result.to_dict())

    @app.post("/events/{event_name}", response_model=EventResponse)
    def post_event(event_name: str, payload: EventsRequest) -> EventResponse:
        try:
            event = SolarEvent(event_name)
        except ValueError as exc:
            raise HTTPException(status_code=404, detail=f"unknown event: {event_name}") from exc

        timezone_id = _resolve_timezone(payload.timezone, default_timezone)
        try:
            outcome = event_time(event, payload.on_date, payload.lat, payload.lon, timezone_id)
        except (InvalidDateError, UnknownTimezoneError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        if isinstance(outcome, NeverReachesDepression):
            logger.debug("%s never occurs: %s", event.value, outcome.extreme.value)
            return EventResponse(event=event.value, never_reaches=outcome.extreme.value)
        return EventResponse(event=event.value, time_utc=outcome)

    return app
