# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric solar ephemeris.

Low-precision Sun position using Meeus "Astronomical Algorithms" Ch. 7
(Julian Day), Ch. 12 (sidereal time), Ch. 13 (horizontal coordinates),
Ch. 16 (refraction) and Ch. 25 (solar coordinates). Accuracy ~1 arcminute,
which is ample for day/night and cabin-side classification.

The Earth-Sun distance is held at 1 AU; no orbital eccentricity modeling.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

from sunside.domain.angles import normalize_azimuth, validate_coordinates

J2000_JD: float = 2451545.0
DAYS_PER_JULIAN_CENTURY: float = 36525.0
SUN_DISTANCE_AU: float = 1.0

# Below this cos(lat)*cos(alt) the azimuth is undefined (pole or zenith)
_AZIMUTH_DEGENERACY_EPS = 1e-12


@dataclass(frozen=True)
class SunPosition:
    """Sun position seen by an observer at a given instant."""
    azimuth_deg: float  # 0 = North, 90 = East, clockwise, [0, 360)
    altitude_deg: float  # refracted, negative below horizon
    zenith_deg: float  # 90 - altitude_deg
    distance_au: float
    right_ascension_hours: float  # [0, 24)
    declination_deg: float


def as_utc(instant: datetime) -> datetime:
    """Return the instant expressed in UTC.

    Raises:
        ValueError: If the datetime is naive.
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError(f"Instant must be timezone-aware, got naive {instant.isoformat()}")
    return instant.astimezone(timezone.utc)


def julian_day(instant: datetime) -> float:
    """Julian Day for a UTC instant (Gregorian calendar, Meeus Ch. 7).

    The integer part is the day number at noon; the time of day is folded
    in as a fraction referenced to that noon epoch.
    """
    t = as_utc(instant)
    a = (14 - t.month) // 12
    y = t.year + 4800 - a
    m = t.month + 12 * a - 3

    jdn = (t.day + (153 * m + 2) // 5 + 365 * y
           + y // 4 - y // 100 + y // 400 - 32045)

    seconds = t.second + t.microsecond / 1e6
    fraction = (t.hour - 12) / 24.0 + t.minute / 1440.0 + seconds / 86400.0
    return jdn + fraction


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def mean_anomaly_deg(T: float) -> float:
    """Mean anomaly of the Sun (degrees) at Julian century T."""
    return (357.52911 + T * (35999.05029 - T * 0.0001537)) % 360.0


def solar_coordinates(jd: float) -> tuple[float, float]:
    """Apparent equatorial coordinates of the Sun.

    Returns:
        (right ascension in hours [0, 24), declination in degrees).
    """
    T = julian_century(jd)

    L0 = (280.46646 + T * (36000.76983 + T * 0.0003032)) % 360.0
    M_rad = float(np.radians(mean_anomaly_deg(T)))

    # Equation of center
    C = ((1.914602 - T * (0.004817 + T * 0.000014)) * float(np.sin(M_rad))
         + (0.019993 - T * 0.000101) * float(np.sin(2.0 * M_rad))
         + 0.000289 * float(np.sin(3.0 * M_rad)))
    true_longitude = L0 + C

    # Nutation and aberration
    omega_rad = float(np.radians(125.04 - 1934.136 * T))
    lambda_rad = float(np.radians(true_longitude - 0.00569 - 0.00478 * float(np.sin(omega_rad))))

    eps0 = 23.439291 - T * (0.0130042 + T * (0.00000016 - T * 0.000000504))
    eps_rad = float(np.radians(eps0 + 0.00256 * float(np.cos(omega_rad))))

    ra_deg = float(np.degrees(np.arctan2(
        np.cos(eps_rad) * np.sin(lambda_rad),
        np.cos(lambda_rad),
    )))
    dec_deg = float(np.degrees(np.arcsin(np.sin(eps_rad) * np.sin(lambda_rad))))

    ra_hours = normalize_azimuth(ra_deg) / 15.0
    return ra_hours, dec_deg


def greenwich_sidereal_time_deg(jd: float) -> float:
    """Greenwich Mean Sidereal Time in degrees [0, 360)."""
    T = julian_century(jd)
    gmst = (280.46061837
            + 360.98564736629 * (jd - J2000_JD)
            + T * T * (0.000387933 - T / 38710000.0))
    return normalize_azimuth(gmst)


def refraction_correction(altitude_deg: float) -> float:
    """Atmospheric refraction (degrees) to add to a geometric altitude.

    Piecewise model: zero above 85°, tan-series between 5° and 85°,
    quartic near the horizon down to -0.575°, and -20.774"/tan(h) below.
    """
    if altitude_deg > 85.0:
        return 0.0

    if altitude_deg > 5.0:
        tan_alt = math.tan(math.radians(altitude_deg))
        arcsec = 58.1 / tan_alt - 0.07 / tan_alt ** 3 + 0.000086 / tan_alt ** 5
        return arcsec / 3600.0

    if altitude_deg > -0.575:
        h = altitude_deg
        arcsec = 1735.0 + h * (-518.2 + h * (103.4 + h * (-12.79 + h * 0.711)))
        return arcsec / 3600.0

    return -20.774 / math.tan(math.radians(altitude_deg)) / 3600.0


def sun_position(lat_deg: float, lon_deg: float, instant: datetime) -> SunPosition:
    """Sun azimuth/altitude for an observer at a UTC instant.

    Pipeline: Julian Day -> apparent RA/Dec -> GMST -> local hour angle
    -> horizontal coordinates -> refraction.

    Near the poles (or with the Sun at the zenith) the azimuth is
    numerically undefined; the altitude remains valid and the azimuth
    is returned as an arbitrary finite value.

    Args:
        lat_deg: Observer latitude (degrees, [-90, 90]).
        lon_deg: Observer longitude (degrees, [-180, 180], east positive).
        instant: Timezone-aware datetime.

    Returns:
        SunPosition with refracted altitude and zenith = 90 - altitude.

    Raises:
        ValueError: If coordinates are out of range or the instant is naive.
    """
    validate_coordinates(lat_deg, lon_deg)

    jd = julian_day(instant)
    ra_hours, dec_deg = solar_coordinates(jd)

    lst_deg = normalize_azimuth(greenwich_sidereal_time_deg(jd) + lon_deg)
    hour_angle_rad = float(np.radians(lst_deg - ra_hours * 15.0))

    lat_rad = float(np.radians(lat_deg))
    dec_rad = float(np.radians(dec_deg))

    sin_alt = (float(np.sin(lat_rad)) * float(np.sin(dec_rad))
               + float(np.cos(lat_rad)) * float(np.cos(dec_rad)) * float(np.cos(hour_angle_rad)))
    sin_alt = max(-1.0, min(1.0, sin_alt))
    alt_rad = float(np.arcsin(sin_alt))

    denom = float(np.cos(lat_rad)) * float(np.cos(alt_rad))
    if abs(denom) < _AZIMUTH_DEGENERACY_EPS:
        cos_az = 1.0
    else:
        cos_az = (float(np.sin(dec_rad)) - float(np.sin(lat_rad)) * sin_alt) / denom
    azimuth_deg = float(np.degrees(np.arccos(max(-1.0, min(1.0, cos_az)))))

    # Western half of the sky
    if float(np.sin(hour_angle_rad)) > 0.0:
        azimuth_deg = 360.0 - azimuth_deg

    geometric_alt_deg = float(np.degrees(alt_rad))
    altitude_deg = geometric_alt_deg + refraction_correction(geometric_alt_deg)

    return SunPosition(
        azimuth_deg=normalize_azimuth(azimuth_deg),
        altitude_deg=altitude_deg,
        zenith_deg=90.0 - altitude_deg,
        distance_au=SUN_DISTANCE_AU,
        right_ascension_hours=ra_hours,
        declination_deg=dec_deg,
    )
