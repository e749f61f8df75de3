"""Hour angle at which the sun reaches a depression below the horizon."""

from __future__ import annotations

from math import acos, cos, radians, tan

from solar_events.contracts import Extreme, NeverReachesDepression


def hour_angle(
    latitude_deg: float,
    declination_deg: float,
    depression_deg: float,
) -> float | NeverReachesDepression:
    """Solve the hour angle (radians) for a signed depression angle.

    Positive depressions give the morning solution, negative ones the evening
    solution (negative hour angle). When the sun never crosses the threshold
    that day a `NeverReachesDepression` is returned instead.
    """
    lat = radians(latitude_deg)
    decl = radians(declination_deg)
    magnitude = abs(depression_deg)

    cos_h = cos(radians(90.0 + magnitude)) / (cos(lat) * cos(decl)) - tan(lat) * tan(decl)

    if cos_h > 1.0:
        return NeverReachesDepression(Extreme.ALWAYS_BELOW, depression_deg)
    if cos_h < -1.0:
        return NeverReachesDepression(Extreme.ALWAYS_ABOVE, depression_deg)

    angle = acos(cos_h)
    if depression_deg < 0:
        return -angle
    return angle
