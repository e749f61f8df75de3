"""Equation of time (apparent minus mean solar time)."""

from __future__ import annotations

from math import cos, degrees, radians, sin, tan

from solar_events.astro.ephemeris import (
    corrected_obliquity,
    eccentricity_of_orbit,
    mean_anomaly,
    mean_longitude,
)


def equation_of_time(jc: float) -> float:
    """Return the equation of time in minutes for a Julian Century."""
    l0 = radians(mean_longitude(jc))
    m = radians(mean_anomaly(jc))
    e = eccentricity_of_orbit(jc)
    y = tan(radians(corrected_obliquity(jc)) / 2.0)
    y *= y

    sin_m = sin(m)
    eot = (
        y * sin(2.0 * l0)
        - 2.0 * e * sin_m
        + 4.0 * e * y * sin_m * cos(2.0 * l0)
        - 0.5 * y * y * sin(4.0 * l0)
        - 1.25 * e * e * sin(2.0 * m)
    )
    return degrees(eot) * 4.0
