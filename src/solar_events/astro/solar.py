"""Solar event times for a date and WGS84 location.

Every function returns an aware UTC datetime on (or rolled over from) the
requested date, or a `NeverReachesDepression` outcome when the sun does not
cross the event's depression angle that day.
"""

from __future__ import annotations

from datetime import date, datetime

from solar_events.astro.resolver import resolve_event_minutes, resolve_noon_minutes
from solar_events.contracts import (
    CalendarDate,
    EventOutcome,
    GeoCoordinate,
    NeverReachesDepression,
    SolarDay,
    SolarEvent,
)
from solar_events.time.instants import assemble
from solar_events.time.zones import timezone_offset_days

DateLike = CalendarDate | date


def solar_noon(day: DateLike, longitude: float, timezone_id: str | None = None) -> datetime:
    """Return the UTC time when the sun is highest at `longitude`."""
    cal = CalendarDate.coerce(day)
    offset = timezone_offset_days(timezone_id, cal)
    coordinate = GeoCoordinate(0.0, longitude)
    return assemble(resolve_noon_minutes(cal, coordinate.longitude, offset), cal)


def _depression_time(
    day: DateLike,
    latitude: float,
    longitude: float,
    depression_deg: float,
    timezone_id: str | None,
) -> EventOutcome:
    cal = CalendarDate.coerce(day)
    offset = timezone_offset_days(timezone_id, cal)
    minutes = resolve_event_minutes(cal, GeoCoordinate(latitude, longitude), depression_deg, offset)
    if isinstance(minutes, NeverReachesDepression):
        return minutes
    return assemble(minutes, cal)


def event_time(
    event: SolarEvent | str,
    day: DateLike,
    latitude: float,
    longitude: float,
    timezone_id: str | None = None,
) -> EventOutcome:
    """Return the time of any `SolarEvent`."""
    event = SolarEvent(event)
    depression = event.depression_deg
    if depression is None:
        return solar_noon(day, longitude, timezone_id)
    return _depression_time(day, latitude, longitude, depression, timezone_id)


def sunrise(day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None) -> EventOutcome:
    """Upper limb of the sun appears (0.833 deg depression, refraction included)."""
    return event_time(SolarEvent.SUNRISE, day, latitude, longitude, timezone_id)


def sunset(day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None) -> EventOutcome:
    """Upper limb of the sun disappears."""
    return event_time(SolarEvent.SUNSET, day, latitude, longitude, timezone_id)


def civil_twilight_begin(
    day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None
) -> EventOutcome:
    """Sun 6 deg below the horizon in the morning; enough light for most outdoor activity."""
    return event_time(SolarEvent.CIVIL_TWILIGHT_BEGIN, day, latitude, longitude, timezone_id)


def civil_twilight_end(
    day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None
) -> EventOutcome:
    return event_time(SolarEvent.CIVIL_TWILIGHT_END, day, latitude, longitude, timezone_id)


def nautical_twilight_begin(
    day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None
) -> EventOutcome:
    """Sun 12 deg below the horizon; horizon and bright stars both visible at sea."""
    return event_time(SolarEvent.NAUTICAL_TWILIGHT_BEGIN, day, latitude, longitude, timezone_id)


def nautical_twilight_end(
    day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None
) -> EventOutcome:
    return event_time(SolarEvent.NAUTICAL_TWILIGHT_END, day, latitude, longitude, timezone_id)


def astronomical_twilight_begin(
    day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None
) -> EventOutcome:
    """Sun 18 deg below the horizon; earliest stage of dawn."""
    return event_time(SolarEvent.ASTRONOMICAL_TWILIGHT_BEGIN, day, latitude, longitude, timezone_id)


def astronomical_twilight_end(
    day: DateLike, latitude: float, longitude: float, timezone_id: str | None = None
) -> EventOutcome:
    return event_time(SolarEvent.ASTRONOMICAL_TWILIGHT_END, day, latitude, longitude, timezone_id)


def solar_day(
    day: DateLike,
    latitude: float,
    longitude: float,
    timezone_id: str | None = None,
) -> SolarDay:
    """Compute every `SolarEvent` for one date and location."""
    cal = CalendarDate.coerce(day)
    coordinate = GeoCoordinate(latitude, longitude)
    events = {
        event: event_time(event, cal, latitude, longitude, timezone_id)
        for event in SolarEvent
    }
    return SolarDay(date=cal, coordinate=coordinate, timezone_id=timezone_id or None, events=events)
