# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunrise, sunset, solar noon and twilight.

Solar noon comes from the longitude plus the equation of time; rise/set
and twilight instants are found by bisection on the refracted solar
altitude returned by the ephemeris.

Each half-day window is assumed to contain a single monotone crossing.
Close to the polar-day/polar-night boundary the Sun can already be above
the threshold at the window edge; the daylight record then falls back to
that edge as a best-effort rise or set instant rather than raising.
"""
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum

from sunside.domain.angles import validate_coordinates
from sunside.domain.solar import (
    as_utc,
    julian_century,
    julian_day,
    mean_anomaly_deg,
    sun_position,
)

logger = logging.getLogger(__name__)

# Refraction (~34') plus the solar semi-diameter (~16')
SUNRISE_SUNSET_ALTITUDE_DEG: float = -0.833
CIVIL_TWILIGHT_ALTITUDE_DEG: float = -6.0

MAX_BISECTION_ITERATIONS: int = 20
BISECTION_PRECISION_S: float = 10.0

_HALF_DAY = timedelta(hours=12)


class TwilightKind(Enum):
    """Solar depression angle that bounds each twilight."""
    CIVIL = -6.0
    NAUTICAL = -12.0
    ASTRONOMICAL = -18.0


@dataclass(frozen=True)
class DaylightInfo:
    """Daylight record for one location and calendar date."""
    sunrise: datetime | None  # None in polar day/night
    sunset: datetime | None
    solar_noon: datetime
    solar_midnight: datetime
    civil_twilight_start: datetime | None  # None in polar conditions or white nights
    civil_twilight_end: datetime | None
    day_length_hours: float
    night_length_hours: float
    is_always_day: bool
    is_always_night: bool


def _utc_date(day: date | datetime) -> date:
    if isinstance(day, datetime):
        return as_utc(day).date()
    return day


def equation_of_time_minutes(jd: float) -> float:
    """Equation of time (apparent minus mean solar time) in minutes."""
    M_rad = math.radians(mean_anomaly_deg(julian_century(jd)))
    return 229.18 * (0.000075
                     + 0.001868 * math.cos(M_rad)
                     - 0.032077 * math.sin(M_rad)
                     - 0.014615 * math.cos(2.0 * M_rad)
                     - 0.040849 * math.sin(2.0 * M_rad))


def solar_noon(lat_deg: float, lon_deg: float, day: date | datetime) -> datetime:
    """UTC instant of local solar noon on a UTC calendar date.

    12h - longitude/15, shifted by the equation of time. Rounded to the
    second.
    """
    validate_coordinates(lat_deg, lon_deg)
    midnight = datetime.combine(_utc_date(day), time(0, 0), tzinfo=timezone.utc)
    eot = equation_of_time_minutes(julian_day(midnight + _HALF_DAY))
    noon_hours = 12.0 - lon_deg / 15.0 - eot / 60.0
    return midnight + timedelta(seconds=round(noon_hours * 3600.0))


def solar_midnight(lat_deg: float, lon_deg: float, day: date | datetime) -> datetime:
    """Twelve hours after solar noon."""
    return solar_noon(lat_deg, lon_deg, day) + _HALF_DAY


def find_altitude_crossing(
    lat_deg: float,
    lon_deg: float,
    start: datetime,
    end: datetime,
    target_altitude_deg: float,
    rising: bool,
) -> datetime | None:
    """Bisect for the instant the Sun crosses a target altitude.

    A rising search expects the Sun below the target at ``start`` and
    above it at ``end``; a setting search the reverse. Stops after
    MAX_BISECTION_ITERATIONS or once the bracket is narrower than
    BISECTION_PRECISION_S, returning the bracket bound on the far side
    of the crossing.

    Returns:
        Crossing instant, or None when the window endpoints do not
        straddle the target (no crossing to find).
    """
    alt_start = sun_position(lat_deg, lon_deg, start).altitude_deg
    alt_end = sun_position(lat_deg, lon_deg, end).altitude_deg
    if rising and not (alt_start < target_altitude_deg <= alt_end):
        return None
    if not rising and not (alt_start > target_altitude_deg >= alt_end):
        return None

    low, high = start, end
    for _ in range(MAX_BISECTION_ITERATIONS):
        if (high - low).total_seconds() < BISECTION_PRECISION_S:
            break
        mid = low + (high - low) / 2
        altitude = sun_position(lat_deg, lon_deg, mid).altitude_deg
        below = altitude < target_altitude_deg if rising else altitude > target_altitude_deg
        if below:
            low = mid
        else:
            high = mid

    width_s = (high - low).total_seconds()
    if width_s >= BISECTION_PRECISION_S:
        logger.debug(
            "Bisection for %.3f° at (%.4f, %.4f) stopped with %.1f s bracket",
            target_altitude_deg, lat_deg, lon_deg, width_s,
        )
    return high


def twilight_bounds(
    lat_deg: float,
    lon_deg: float,
    day: date | datetime,
    kind: TwilightKind = TwilightKind.CIVIL,
) -> tuple[datetime | None, datetime | None]:
    """Morning start and evening end of a twilight around solar noon."""
    noon = solar_noon(lat_deg, lon_deg, day)
    depression = kind.value
    start = find_altitude_crossing(
        lat_deg, lon_deg, noon - _HALF_DAY, noon, depression, rising=True,
    )
    end = find_altitude_crossing(
        lat_deg, lon_deg, noon, noon + _HALF_DAY, depression, rising=False,
    )
    return start, end


def _rise_or_set(
    lat_deg: float,
    lon_deg: float,
    start: datetime,
    end: datetime,
    rising: bool,
) -> datetime:
    """Sunrise/sunset crossing, or the window edge where the Sun is still up.

    Only called outside polar day/night, so the Sun is above the
    threshold at noon. A missing crossing means it is also above at the
    far edge of the half-day window (the adjacent midnight).
    """
    crossing = find_altitude_crossing(
        lat_deg, lon_deg, start, end, SUNRISE_SUNSET_ALTITUDE_DEG, rising=rising,
    )
    if crossing is not None:
        return crossing
    edge = start if rising else end
    logger.debug(
        "No %s crossing at (%.4f, %.4f); using window edge %s",
        'rising' if rising else 'setting', lat_deg, lon_deg, edge.isoformat(),
    )
    return edge


def compute_daylight_info(
    lat_deg: float,
    lon_deg: float,
    day: date | datetime,
) -> DaylightInfo:
    """Sunrise/sunset/twilight for a location on a UTC calendar date.

    Polar day is declared when the Sun at solar midnight is still above
    the rise/set threshold; polar night when it stays below at solar
    noon. In either case there is no sunrise, sunset or civil twilight.
    Otherwise both rise and set are always reported, falling back to the
    adjacent solar midnight when the Sun is still up there.

    Args:
        lat_deg: Latitude (degrees).
        lon_deg: Longitude (degrees, east positive).
        day: Calendar date, or a timezone-aware datetime whose UTC date
            is used.

    Returns:
        DaylightInfo with day and night lengths in hours.

    Raises:
        ValueError: On out-of-range coordinates or a naive datetime.
    """
    validate_coordinates(lat_deg, lon_deg)

    noon = solar_noon(lat_deg, lon_deg, day)
    midnight = noon + _HALF_DAY

    noon_alt = sun_position(lat_deg, lon_deg, noon).altitude_deg
    midnight_alt = sun_position(lat_deg, lon_deg, midnight).altitude_deg

    is_always_day = midnight_alt > SUNRISE_SUNSET_ALTITUDE_DEG
    is_always_night = not is_always_day and noon_alt < SUNRISE_SUNSET_ALTITUDE_DEG

    sunrise = sunset = None
    twilight_start = twilight_end = None
    if is_always_day:
        day_length = 24.0
    elif is_always_night:
        day_length = 0.0
    else:
        sunrise = _rise_or_set(lat_deg, lon_deg, noon - _HALF_DAY, noon, rising=True)
        sunset = _rise_or_set(lat_deg, lon_deg, noon, midnight, rising=False)
        day_length = (sunset - sunrise).total_seconds() / 3600.0
        twilight_start, twilight_end = twilight_bounds(
            lat_deg, lon_deg, day, TwilightKind.CIVIL,
        )

    return DaylightInfo(
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=noon,
        solar_midnight=midnight,
        civil_twilight_start=twilight_start,
        civil_twilight_end=twilight_end,
        day_length_hours=day_length,
        night_length_hours=24.0 - day_length,
        is_always_day=is_always_day,
        is_always_night=is_always_night,
    )
