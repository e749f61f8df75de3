"""Two-pass resolution of solar event times in UTC minutes of day."""

from __future__ import annotations

from datetime import date
from math import degrees

from solar_events.astro.ephemeris import declination
from solar_events.astro.equation_of_time import equation_of_time
from solar_events.astro.hour_angle import hour_angle
from solar_events.contracts import (
    SUNRISE_DEPRESSION,
    CalendarDate,
    GeoCoordinate,
    NeverReachesDepression,
)
from solar_events.time.julian import (
    century_to_julian_day,
    julian_day_to_century,
    to_julian_day,
)

MINUTES_PER_DAY = 1440.0


def utc_event_minutes(
    jc: float,
    latitude_deg: float,
    longitude_deg: float,
    depression_deg: float,
) -> float | NeverReachesDepression:
    """UTC minutes of day when the sun reaches `depression_deg` at Julian Century `jc`."""
    eot = equation_of_time(jc)
    decl = declination(jc)
    solved = hour_angle(latitude_deg, decl, depression_deg)
    if isinstance(solved, NeverReachesDepression):
        return solved
    delta = -longitude_deg - degrees(solved)
    return 720.0 + 4.0 * delta - eot


def utc_noon_minutes(julian_day: float, longitude_deg: float) -> float:
    """UTC minutes of day of local solar noon."""
    jc = julian_day_to_century(julian_day + 0.5 - longitude_deg / 360.0)
    return 720.0 - 4.0 * longitude_deg - equation_of_time(jc)


def resolve_event_minutes(
    day: CalendarDate | date,
    coordinate: GeoCoordinate,
    depression_deg: float,
    timezone_offset_days: float = 0.0,
) -> float | NeverReachesDepression:
    """Resolve an event with exactly two passes.

    The first pass always uses the sunrise depression and only moves the Julian
    Century to the estimated event time; the second pass solves the requested
    depression there. Results may fall outside [0, 1440).
    """
    julian_day = to_julian_day(day, timezone_offset_days)
    jc = julian_day_to_century(julian_day)

    seed = utc_event_minutes(jc, coordinate.latitude, coordinate.longitude, SUNRISE_DEPRESSION)
    if isinstance(seed, NeverReachesDepression):
        # No sunrise (polar night/day): seed from solar noon instead.
        seed = utc_noon_minutes(julian_day, coordinate.longitude)

    advanced = julian_day_to_century(century_to_julian_day(jc) + seed / MINUTES_PER_DAY)
    return utc_event_minutes(advanced, coordinate.latitude, coordinate.longitude, depression_deg)


def resolve_noon_minutes(
    day: CalendarDate | date,
    longitude_deg: float,
    timezone_offset_days: float = 0.0,
) -> float:
    """Resolve solar noon in a single closed-form pass."""
    return utc_noon_minutes(to_julian_day(day, timezone_offset_days), longitude_deg)
