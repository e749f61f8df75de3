"""Unit tests for data contracts."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime

import pytest

from solar_events.contracts import (
    CalendarDate,
    Extreme,
    GeoCoordinate,
    InvalidDateError,
    NeverReachesDepression,
    SolarDay,
    SolarEvent,
)


def test_calendar_date_accepts_leap_day() -> None:
    """Feb 29 is valid in Gregorian leap years."""
    assert CalendarDate(2024, 2, 29).to_date() == date(2024, 2, 29)
    assert CalendarDate(2000, 2, 29).isoformat() == "2000-02-29"


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [(2023, 2, 29), (1900, 2, 29), (2024, 13, 1), (2024, 0, 10), (2024, 4, 31)],
)
def test_calendar_date_rejects_invalid_components(year: int, month: int, day: int) -> None:
    """Out-of-range months and days raise InvalidDateError."""
    with pytest.raises(InvalidDateError):
        CalendarDate(year, month, day)


def test_invalid_date_error_is_value_error() -> None:
    """Callers catching ValueError also see calendar failures."""
    with pytest.raises(ValueError, match="invalid calendar date"):
        CalendarDate(2023, 2, 30)


def test_calendar_date_coerce_from_date_and_datetime() -> None:
    """Dates and datetimes both coerce to their calendar day."""
    assert CalendarDate.coerce(date(2024, 3, 20)) == CalendarDate(2024, 3, 20)
    assert CalendarDate.coerce(datetime(2024, 3, 20, 23, 59, tzinfo=UTC)) == CalendarDate(2024, 3, 20)


def test_geo_coordinate_saturates_latitude() -> None:
    """Latitudes beyond +/-89.8 are saturated, not rejected."""
    assert GeoCoordinate(95.0, 10.0).latitude == 89.8
    assert GeoCoordinate(-120.0, 10.0).latitude == -89.8
    assert GeoCoordinate(51.5, 400.0).longitude == 400.0


def test_geo_coordinate_rejects_non_finite_values() -> None:
    """NaN and infinite coordinates are rejected."""
    with pytest.raises(ValueError, match="finite"):
        GeoCoordinate(float("nan"), 0.0)
    with pytest.raises(ValueError, match="finite"):
        GeoCoordinate(0.0, float("inf"))


def test_solar_event_depression_signs() -> None:
    """Begin events use positive depressions, end events negative, noon none."""
    assert SolarEvent.SUNRISE.depression_deg == 0.833
    assert SolarEvent.SUNSET.depression_deg == -0.833
    assert SolarEvent.CIVIL_TWILIGHT_BEGIN.depression_deg == 6.0
    assert SolarEvent.NAUTICAL_TWILIGHT_END.depression_deg == -12.0
    assert SolarEvent.ASTRONOMICAL_TWILIGHT_END.depression_deg == -18.0
    assert SolarEvent.SOLAR_NOON.depression_deg is None


def test_solar_day_serializes_instants_and_polar_outcomes() -> None:
    """to_dict emits ISO strings and never_reaches markers that survive JSON."""
    rise = datetime(2024, 3, 20, 6, 2, tzinfo=UTC)
    fall = datetime(2024, 3, 20, 18, 13, tzinfo=UTC)
    day = SolarDay(
        date=CalendarDate(2024, 3, 20),
        coordinate=GeoCoordinate(51.5, 0.0),
        timezone_id=None,
        events={
            SolarEvent.SUNRISE: rise,
            SolarEvent.SUNSET: fall,
            SolarEvent.ASTRONOMICAL_TWILIGHT_END: NeverReachesDepression(Extreme.ALWAYS_ABOVE, -18.0),
        },
    )
    payload = json.loads(json.dumps(day.to_dict()))

    assert payload["events"]["sunrise"] == "2024-03-20T06:02:00+00:00"
    assert payload["events"]["astronomical_twilight_end"] == {"never_reaches": "always_above"}
    assert payload["day_length_minutes"] == 731.0


def test_solar_day_length_is_none_without_sunset() -> None:
    """Day length is undefined when sunrise or sunset is missing."""
    day = SolarDay(
        date=CalendarDate(2024, 6, 21),
        coordinate=GeoCoordinate(78.0, 15.0),
        timezone_id=None,
        events={SolarEvent.SUNSET: NeverReachesDepression(Extreme.ALWAYS_ABOVE, -0.833)},
    )
    assert day.day_length_minutes is None
