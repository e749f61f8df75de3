"""Calendar date to Julian Day and Julian Century conversions."""

from __future__ import annotations

from datetime import date
from math import floor

from solar_events.contracts import CalendarDate

# Last instant of the Julian calendar, 1582-10-04 24:00.
GREGORIAN_REFORM_JD = 2299160.4999999
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0


def to_julian_day(value: CalendarDate | date, timezone_offset_days: float = 0.0) -> float:
    """Return the Julian Day at 00:00 of `value`, shifted by a timezone offset in days.

    Dates after the 1582 calendar reform get the Gregorian century correction;
    earlier dates are read on the Julian calendar.
    """
    cal = CalendarDate.coerce(value)
    year = cal.year
    month = cal.month
    day = cal.day + timezone_offset_days

    if month <= 2:
        year -= 1
        month += 12

    julian_day = floor(365.25 * (year + 4716)) + floor(30.6001 * (month + 1)) + day - 1524.5

    if julian_day > GREGORIAN_REFORM_JD:
        century = floor(year / 100.0)
        julian_day += 2 - century + floor(century / 4.0)
    return float(julian_day)


def julian_day_to_century(julian_day: float) -> float:
    """Convert Julian Day to Julian centuries since J2000.0."""
    return (julian_day - J2000_JD) / DAYS_PER_CENTURY


def century_to_julian_day(julian_century: float) -> float:
    """Convert Julian centuries since J2000.0 back to Julian Day."""
    return julian_century * DAYS_PER_CENTURY + J2000_JD
