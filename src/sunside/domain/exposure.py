# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Cabin-side sun exposure.

Classifies which side of the aircraft the Sun illuminates from the
heading and the Sun's azimuth/altitude, and rolls the per-point
classification up over a flight timeline.

Both decision trees are ordered guard clauses returning a message key;
text is resolved from lookup tables keyed by (side, band).
"""
import math
from dataclasses import dataclass
from enum import Enum

from sunside.domain.angles import normalize_relative_bearing
from sunside.domain.daylight import CIVIL_TWILIGHT_ALTITUDE_DEG
from sunside.domain.formatting import format_duration
from sunside.domain.timeline import FlightTimeline, SunEventType

# Sun higher than this is treated as overhead
OVERHEAD_ALTITUDE_DEG: float = 70.0
# Twilight above this is read as the approach to sunrise
SUNRISE_TWILIGHT_ALTITUDE_DEG: float = -3.0
AHEAD_SECTOR_DEG: float = 30.0
BEHIND_SECTOR_DEG: float = 150.0
LOW_SUN_AHEAD_ALTITUDE_DEG: float = 15.0
GOLDEN_HOUR_ALTITUDE_DEG: float = 20.0
GLARE_INTENSITY: float = 0.7
GLARE_BROADSIDE_DEG: float = 30.0
GOOD_LIGHT_INTENSITY: float = 0.5

RED_EYE_NO_SUN_SHARE: float = 0.8
TROPICAL_OVERHEAD_SHARE: float = 0.4
DOMINANT_SIDE_RATIO: float = 2.0
HEAVY_SIDE_SHARE: float = 0.7
FULL_DAYTIME_PERCENT: float = 80.0


class CabinSide(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    OVERHEAD = "OVERHEAD"
    NONE = "NONE"


@dataclass(frozen=True)
class CabinExposure:
    """Sun exposure of the cabin at one instant."""
    side: CabinSide
    relative_bearing_deg: float  # (-180, 180], 0 = ahead, +90 = right
    sun_angle_deg: float  # |relative_bearing_deg|
    intensity: float  # [0, 1]
    recommendation: str


@dataclass(frozen=True)
class FlightSunAnalysis:
    """Side exposure totals over a whole flight."""
    left_minutes: float
    right_minutes: float
    overhead_minutes: float
    no_sun_minutes: float
    recommendation: str
    breakdown: tuple[str, ...]


_SIDED_MESSAGES = {
    'twilight_sunrise': "Sunrise approaching on {side} side - perfect for golden hour photography!",
    'twilight_sunset': "Sunset colors visible on {side} side - grab your camera!",
    'glare': "Intense sun on {side} - choose {other} side if you need to rest or work on screen",
    'golden_hour': "{side} side has beautiful low-angle sunlight - great for aerial photography!",
    'good_light': "{side} side has good natural light - ideal for sightseeing and photos",
    'gentle': "Gentle sunlight on {side} side - comfortable viewing conditions",
    'heavy': (
        "{side} side has most sun exposure. Choose {other} for work/rest, "
        "{side} for sightseeing and natural light"
    ),
    'more': (
        "{side} side has more sunlight - good for photography and scenic views. "
        "{other} is quieter"
    ),
}

_MESSAGES = {
    'night': "Nighttime flight - ideal for rest or stargazing from either side",
    'overhead': (
        "Tropical route - sun overhead, both sides have similar lighting "
        "for cloud photography"
    ),
    'ahead_low': "Low sun ahead - beautiful atmospheric views from either side",
    'ahead': "Sun ahead - balanced lighting on both sides",
    'behind': "Sun behind - great lighting for forward views, either side works well",
    'red_eye': (
        "Red-eye flight - minimal sun exposure. Perfect for sleeping or "
        "catching sunrise/sunset moments!"
    ),
    'tropical': (
        "Tropical route with overhead sun - both sides great for cloud "
        "photography and ocean views"
    ),
    'full_daytime': "Full daytime flight - great visibility on both sides. Enjoy the aerial views!",
    'includes_sunrise': (
        "Flight includes sunrise! Check sun events below for best viewing side and timing"
    ),
    'includes_sunset': (
        "Flight includes sunset! Check sun events below for best viewing side and timing"
    ),
    'balanced': (
        "Balanced sun exposure - both sides offer good views. Choose based on your preference!"
    ),
}

_OPPOSITE = {CabinSide.LEFT: CabinSide.RIGHT, CabinSide.RIGHT: CabinSide.LEFT}


def _message(key: str, side: CabinSide | None = None) -> str:
    if side is None:
        return _MESSAGES[key]
    return _SIDED_MESSAGES[key].format(side=side.value, other=_OPPOSITE[side].value)


def _side_of(relative_bearing_deg: float) -> CabinSide:
    return CabinSide.RIGHT if relative_bearing_deg > 0 else CabinSide.LEFT


def _classify(
    relative_bearing_deg: float,
    sun_altitude_deg: float,
    intensity: float,
) -> tuple[CabinSide, str, CabinSide | None]:
    """Ordered guard clauses -> (side, message key, side named in the message)."""
    abs_bearing = abs(relative_bearing_deg)

    if sun_altitude_deg < CIVIL_TWILIGHT_ALTITUDE_DEG:
        return CabinSide.NONE, 'night', None

    if sun_altitude_deg < 0.0:
        key = ('twilight_sunrise' if sun_altitude_deg > SUNRISE_TWILIGHT_ALTITUDE_DEG
               else 'twilight_sunset')
        return CabinSide.NONE, key, _side_of(relative_bearing_deg)

    if sun_altitude_deg > OVERHEAD_ALTITUDE_DEG:
        return CabinSide.OVERHEAD, 'overhead', None

    if abs_bearing <= AHEAD_SECTOR_DEG:
        key = 'ahead_low' if sun_altitude_deg < LOW_SUN_AHEAD_ALTITUDE_DEG else 'ahead'
        return CabinSide.NONE, key, None

    if abs_bearing >= BEHIND_SECTOR_DEG:
        return CabinSide.NONE, 'behind', None

    side = _side_of(relative_bearing_deg)
    off_broadside = abs(abs_bearing - 90.0)
    if intensity > GLARE_INTENSITY and off_broadside < GLARE_BROADSIDE_DEG:
        key = 'glare'
    elif sun_altitude_deg < GOLDEN_HOUR_ALTITUDE_DEG:
        key = 'golden_hour'
    elif intensity > GOOD_LIGHT_INTENSITY:
        key = 'good_light'
    else:
        key = 'gentle'
    return side, key, side


def compute_cabin_exposure(
    heading_deg: float,
    sun_azimuth_deg: float,
    sun_altitude_deg: float,
) -> CabinExposure:
    """Which side of the aircraft the Sun lights, and how strongly.

    Intensity is ``(1 - directness) * sin(altitude)`` for a Sun above the
    horizon, where directness is 0 with the Sun exactly broadside and 1
    with it dead ahead or behind.

    Args:
        heading_deg: Aircraft heading (degrees from North).
        sun_azimuth_deg: Sun azimuth (degrees from North).
        sun_altitude_deg: Sun altitude (degrees).

    Returns:
        CabinExposure with side, relative bearing and recommendation.
    """
    relative_bearing = normalize_relative_bearing(sun_azimuth_deg - heading_deg)
    directness = abs(abs(relative_bearing) - 90.0) / 90.0
    if sun_altitude_deg > 0.0:
        intensity = (1.0 - directness) * math.sin(math.radians(sun_altitude_deg))
    else:
        intensity = 0.0

    side, key, named_side = _classify(relative_bearing, sun_altitude_deg, intensity)
    return CabinExposure(
        side=side,
        relative_bearing_deg=relative_bearing,
        sun_angle_deg=abs(relative_bearing),
        intensity=intensity,
        recommendation=_message(key, named_side),
    )


def _flight_recommendation_key(
    timeline: FlightTimeline,
    left: float,
    right: float,
    overhead: float,
    no_sun: float,
) -> tuple[str, CabinSide | None]:
    total = timeline.total_duration_minutes
    sunlit = left + right + overhead
    sunlit_percent = sunlit / total * 100.0 if total > 0 else 0.0

    if no_sun > total * RED_EYE_NO_SUN_SHARE:
        return 'red_eye', None
    if overhead > total * TROPICAL_OVERHEAD_SHARE:
        return 'tropical', None
    for side, mine, theirs in ((CabinSide.LEFT, left, right), (CabinSide.RIGHT, right, left)):
        if mine > theirs * DOMINANT_SIDE_RATIO:
            key = 'heavy' if mine / sunlit > HEAVY_SIDE_SHARE else 'more'
            return key, side
    if sunlit_percent > FULL_DAYTIME_PERCENT:
        return 'full_daytime', None
    if timeline.sun_events:
        if timeline.sun_events[0].event_type is SunEventType.SUNRISE:
            return 'includes_sunrise', None
        return 'includes_sunset', None
    return 'balanced', None


def _share_line(label: str, minutes: float, total: float) -> str:
    percent = minutes / total * 100.0 if total > 0 else 0.0
    return f"{label}: {format_duration(minutes)} ({percent:.0f}%)"


def analyze_flight_exposure(timeline: FlightTimeline) -> FlightSunAnalysis:
    """Roll per-point cabin exposure up into side totals for the flight.

    Every point carries an equal slice of the total duration
    (``total / len(points)``), so the four totals add up to the flight
    duration.

    Args:
        timeline: FlightTimeline from build_timeline.

    Returns:
        FlightSunAnalysis with minute totals, a recommendation and a
        per-side breakdown.
    """
    total = timeline.total_duration_minutes
    slice_minutes = total / len(timeline.points)

    minutes = {side: 0.0 for side in CabinSide}
    for point in timeline.points:
        exposure = compute_cabin_exposure(
            point.heading_deg, point.sun_azimuth_deg, point.sun_altitude_deg,
        )
        minutes[exposure.side] += slice_minutes

    left = minutes[CabinSide.LEFT]
    right = minutes[CabinSide.RIGHT]
    overhead = minutes[CabinSide.OVERHEAD]
    no_sun = minutes[CabinSide.NONE]

    key, side = _flight_recommendation_key(timeline, left, right, overhead, no_sun)

    breakdown = (
        _share_line("Left side exposure", left, total),
        _share_line("Right side exposure", right, total),
        _share_line("Overhead sun", overhead, total),
        _share_line("No sun (night/ahead/behind)", no_sun, total),
    )

    return FlightSunAnalysis(
        left_minutes=left,
        right_minutes=right,
        overhead_minutes=overhead,
        no_sun_minutes=no_sun,
        recommendation=_message(key, side),
        breakdown=breakdown,
    )
