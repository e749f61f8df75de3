"""Core data contracts for solar event calculations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from math import isfinite
from typing import Any

MAX_LATITUDE = 89.8
MIN_LATITUDE = -89.8

SUNRISE_DEPRESSION = 0.833
CIVIL_DEPRESSION = 6.0
NAUTICAL_DEPRESSION = 12.0
ASTRONOMICAL_DEPRESSION = 18.0


class InvalidDateError(ValueError):
    """Raised when calendar components do not form a valid Gregorian date."""


class UnknownTimezoneError(ValueError):
    """Raised when a timezone identifier cannot be resolved."""


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """Validated Gregorian calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate components against the Gregorian calendar."""
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise InvalidDateError(
                f"invalid calendar date: {self.year}-{self.month}-{self.day}"
            ) from exc

    @classmethod
    def coerce(cls, value: CalendarDate | date) -> CalendarDate:
        """Build a CalendarDate from a CalendarDate, date or datetime."""
        if isinstance(value, CalendarDate):
            return value
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            return cls(value.year, value.month, value.day)
        raise InvalidDateError(f"unsupported date value: {value!r}")

    def to_date(self) -> date:
        """Return the equivalent `datetime.date`."""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return self.to_date().isoformat()


def clamp_latitude(latitude: float) -> float:
    """Saturate latitude to the supported [-89.8, 89.8] band."""
    return min(MAX_LATITUDE, max(MIN_LATITUDE, latitude))


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    """WGS84 point with latitude saturated near the poles (east-positive longitude)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Reject non-finite values and saturate latitude."""
        if not isfinite(self.latitude) or not isfinite(self.longitude):
            raise ValueError("latitude and longitude must be finite.")
        object.__setattr__(self, "latitude", clamp_latitude(float(self.latitude)))
        object.__setattr__(self, "longitude", float(self.longitude))


class Extreme(StrEnum):
    """Which side of a depression threshold the sun stays on all day."""

    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"


@dataclass(frozen=True, slots=True)
class NeverReachesDepression:
    """Outcome for a date/latitude where the sun never crosses the requested depression."""

    extreme: Extreme
    depression_deg: float


class SolarEvent(StrEnum):
    """Named solar events computed for a day."""

    ASTRONOMICAL_TWILIGHT_BEGIN = "astronomical_twilight_begin"
    NAUTICAL_TWILIGHT_BEGIN = "nautical_twilight_begin"
    CIVIL_TWILIGHT_BEGIN = "civil_twilight_begin"
    SUNRISE = "sunrise"
    SOLAR_NOON = "solar_noon"
    SUNSET = "sunset"
    CIVIL_TWILIGHT_END = "civil_twilight_end"
    NAUTICAL_TWILIGHT_END = "nautical_twilight_end"
    ASTRONOMICAL_TWILIGHT_END = "astronomical_twilight_end"

    @property
    def depression_deg(self) -> float | None:
        """Signed depression angle for the event, None for solar noon."""
        return _EVENT_DEPRESSIONS.get(self)


_EVENT_DEPRESSIONS: dict[SolarEvent, float] = {
    SolarEvent.ASTRONOMICAL_TWILIGHT_BEGIN: ASTRONOMICAL_DEPRESSION,
    SolarEvent.NAUTICAL_TWILIGHT_BEGIN: NAUTICAL_DEPRESSION,
    SolarEvent.CIVIL_TWILIGHT_BEGIN: CIVIL_DEPRESSION,
    SolarEvent.SUNRISE: SUNRISE_DEPRESSION,
    SolarEvent.SUNSET: -SUNRISE_DEPRESSION,
    SolarEvent.CIVIL_TWILIGHT_END: -CIVIL_DEPRESSION,
    SolarEvent.NAUTICAL_TWILIGHT_END: -NAUTICAL_DEPRESSION,
    SolarEvent.ASTRONOMICAL_TWILIGHT_END: -ASTRONOMICAL_DEPRESSION,
}


EventOutcome = datetime | NeverReachesDepression


def _outcome_to_dict(outcome: EventOutcome) -> Any:
    if isinstance(outcome, NeverReachesDepression):
        return {"never_reaches": outcome.extreme.value}
    return outcome.isoformat()


@dataclass(frozen=True, slots=True)
class SolarDay:
    """All solar events for one date and location."""

    date: CalendarDate
    coordinate: GeoCoordinate
    timezone_id: str | None
    events: dict[SolarEvent, EventOutcome] = field(default_factory=dict)

    @property
    def day_length_minutes(self) -> float | None:
        """Minutes between sunrise and sunset, None when either does not occur."""
        rise = self.events.get(SolarEvent.SUNRISE)
        fall = self.events.get(SolarEvent.SUNSET)
        if not isinstance(rise, datetime) or not isinstance(fall, datetime):
            return None
        return (fall - rise).total_seconds() / 60.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize the solar day to a JSON-compatible dictionary."""
        return {
            "date": self.date.isoformat(),
            "lat": self.coordinate.latitude,
            "lon": self.coordinate.longitude,
            "timezone": self.timezone_id,
            "events": {event.value: _outcome_to_dict(outcome) for event, outcome in self.events.items()},
            "day_length_minutes": self.day_length_minutes,
        }
