"""Low-precision solar ephemeris as functions of Julian Century.

Formulas follow the NOAA solar calculator. Inputs and outputs are in degrees;
trigonometry is done in radians internally.
"""

from __future__ import annotations

from math import asin, cos, degrees, radians, sin


def wrap_degrees(angle_deg: float) -> float:
    """Wrap an angle to [0, 360), for negative inputs as well."""
    wrapped = angle_deg % 360.0
    # -1e-14 % 360.0 rounds up to 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def clamp_unit(value: float) -> float:
    """Clamp a sine/cosine argument to [-1, 1]."""
    return min(1.0, max(-1.0, value))


def _omega(jc: float) -> float:
    """Longitude of the Moon's ascending node, used for nutation."""
    return 125.04 - 1934.136 * jc


def mean_obliquity_of_ecliptic(jc: float) -> float:
    """Mean obliquity of the ecliptic in degrees."""
    seconds = 21.448 - jc * (46.8150 + jc * (0.00059 - jc * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def corrected_obliquity(jc: float) -> float:
    """Obliquity of the ecliptic corrected for nutation, degrees."""
    return mean_obliquity_of_ecliptic(jc) + 0.00256 * cos(radians(_omega(jc)))


def mean_anomaly(jc: float) -> float:
    """Geometric mean anomaly of the sun, degrees (not wrapped)."""
    return 357.52911 + jc * (35999.05029 - 0.0001537 * jc)


def mean_longitude(jc: float) -> float:
    """Geometric mean longitude of the sun, degrees in [0, 360)."""
    return wrap_degrees(280.46646 + jc * (36000.76983 + 0.0003032 * jc))


def eccentricity_of_orbit(jc: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - jc * (0.000042037 + 0.0000001267 * jc)


def equation_of_center(jc: float) -> float:
    """Equation of center of the sun, degrees."""
    m = radians(mean_anomaly(jc))
    return (
        sin(m) * (1.914602 - jc * (0.004817 + 0.000014 * jc))
        + sin(2.0 * m) * (0.019993 - 0.000101 * jc)
        + sin(3.0 * m) * 0.000289
    )


def true_longitude(jc: float) -> float:
    """True ecliptic longitude of the sun, degrees."""
    return mean_longitude(jc) + equation_of_center(jc)


def apparent_longitude(jc: float) -> float:
    """Apparent longitude of the sun corrected for aberration and nutation, degrees."""
    return true_longitude(jc) - 0.00569 - 0.00478 * sin(radians(_omega(jc)))


def declination(jc: float) -> float:
    """Solar declination in degrees."""
    sin_decl = sin(radians(corrected_obliquity(jc))) * sin(radians(apparent_longitude(jc)))
    return degrees(asin(clamp_unit(sin_decl)))
