"""Timezone identifier resolution to fractional-day UTC offsets."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from solar_events.contracts import CalendarDate, UnknownTimezoneError

SECONDS_PER_DAY = 86400.0


def resolve_zone(timezone_id: str) -> ZoneInfo:
    """Return the ZoneInfo for an IANA identifier."""
    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        raise UnknownTimezoneError(f"unknown timezone: {timezone_id!r}") from exc


def timezone_offset_days(timezone_id: str | None, on_date: CalendarDate | date) -> float:
    """Return the zone's UTC offset in days, taken at 12:00 local time on `on_date`.

    None or a blank identifier means UTC.
    """
    if timezone_id is None or not timezone_id.strip():
        return 0.0

    zone = resolve_zone(timezone_id.strip())
    cal = CalendarDate.coerce(on_date)
    # Naive wall-clock noon; converting from UTC would overflow at the calendar edges.
    offset = zone.utcoffset(datetime(cal.year, cal.month, cal.day, 12))
    if offset is None:
        return 0.0
    return offset.total_seconds() / SECONDS_PER_DAY
