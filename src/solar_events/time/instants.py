"""Assemble UTC instants from minutes-of-day with day rollover."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta

from solar_events.contracts import CalendarDate, InvalidDateError

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


def split_minutes(minutes_of_day: float) -> tuple[int, int, int]:
    """Split fractional minutes into truncated (hour, minute, second) components.

    Components are not normalized yet and keep the sign of the input.
    """
    hours = minutes_of_day / MINUTES_PER_HOUR
    hour = int(hours)
    minutes = (hours - hour) * MINUTES_PER_HOUR
    minute = int(minutes)
    second = int((minutes - minute) * SECONDS_PER_MINUTE)
    return hour, minute, second


def carry(value: int, unit: int) -> tuple[int, int]:
    """Return `(carry, remainder)` with remainder in [0, unit)."""
    overflow, remainder = divmod(value, unit)
    return overflow, remainder


def normalize_clock(hour: int, minute: int, second: int) -> tuple[int, int, int, int]:
    """Cascade seconds -> minutes -> hours -> days; returns (day_offset, hour, minute, second)."""
    minute_carry, second = carry(second, SECONDS_PER_MINUTE)
    hour_carry, minute = carry(minute + minute_carry, MINUTES_PER_HOUR)
    day_offset, hour = carry(hour + hour_carry, HOURS_PER_DAY)
    return day_offset, hour, minute, second


def assemble(minutes_of_day_utc: float, base_date: CalendarDate | date) -> datetime:
    """Build an aware UTC datetime `minutes_of_day_utc` minutes after 00:00 of `base_date`.

    Negative values and values past 1440 roll into the previous/next days.
    """
    cal = CalendarDate.coerce(base_date)
    day_offset, hour, minute, second = normalize_clock(*split_minutes(minutes_of_day_utc))
    try:
        day = cal.to_date() + timedelta(days=day_offset)
    except OverflowError as exc:
        raise InvalidDateError(
            f"{cal.isoformat()} shifted by {day_offset} days is out of range"
        ) from exc
    return datetime.combine(day, time(hour, minute, second), tzinfo=UTC)
