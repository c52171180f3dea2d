# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Flight timeline with per-waypoint solar data.

Samples the great-circle route, assigns each waypoint an instant assuming
constant cruise speed, evaluates the Sun there, and derives sunrise/sunset
events and daylight statistics.

Solar evaluations are independent per waypoint; event detection is a
sequential scan over the finished points in index order.
"""
import bisect
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

import numpy as np

from sunside.domain.angles import validate_coordinates, wrap_longitude
from sunside.domain.daylight import SUNRISE_SUNSET_ALTITUDE_DEG
from sunside.domain.formatting import format_coordinates
from sunside.domain.geodesic import GeoPoint, generate_waypoints
from sunside.domain.solar import as_utc, sun_position

# Upper bound on route samples per timeline; work is linear in it
MAX_POINT_COUNT: int = 10_000


@dataclass(frozen=True)
class TimelineConfig:
    """Sampling and aircraft parameters for a timeline."""
    point_count: int = 150
    cruise_speed_kmh: float = 850.0
    cruise_altitude_ft: float = 37000.0


@dataclass(frozen=True)
class TimelinePoint:
    """One route sample with its instant and the Sun seen from there."""
    lat_deg: float
    lon_deg: float  # unwrapped, may leave [-180, 180]
    distance_km: float
    timestamp: datetime
    elapsed_minutes: float
    sun_azimuth_deg: float
    sun_altitude_deg: float
    sun_zenith_deg: float
    is_daylight: bool
    heading_deg: float
    speed_kmh: float
    altitude_ft: float


class SunEventType(Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"


@dataclass(frozen=True)
class SunEvent:
    """Day/night transition between two consecutive timeline points."""
    event_type: SunEventType
    timestamp: datetime
    lat_deg: float
    lon_deg: float
    point_index: int  # index of the later point of the pair
    description: str


@dataclass(frozen=True)
class TimelineStatistics:
    """Daylight totals and solar altitude summary over a timeline."""
    daylight_minutes: float
    darkness_minutes: float
    daylight_percentage: float
    average_sun_altitude_deg: float
    max_sun_altitude_deg: float
    min_sun_altitude_deg: float


@dataclass(frozen=True)
class FlightTimeline:
    """Complete time-indexed route."""
    origin: GeoPoint
    destination: GeoPoint
    departure: datetime
    points: tuple[TimelinePoint, ...]
    total_distance_km: float
    total_duration_minutes: float
    sun_events: tuple[SunEvent, ...]
    statistics: TimelineStatistics


def _validate_config(config: TimelineConfig) -> None:
    if isinstance(config.point_count, bool) or not isinstance(config.point_count, int):
        raise ValueError(f"point_count must be an integer, got {config.point_count!r}")
    if not 1 <= config.point_count <= MAX_POINT_COUNT:
        raise ValueError(
            f"point_count must be in [1, {MAX_POINT_COUNT}], got {config.point_count}"
        )
    if not config.cruise_speed_kmh > 0:
        raise ValueError(f"cruise_speed_kmh must be positive, got {config.cruise_speed_kmh}")


def detect_sun_events(points: list[TimelinePoint] | tuple[TimelinePoint, ...]) -> list[SunEvent]:
    """Find daylight flips between consecutive points.

    False -> True is a sunrise, True -> False a sunset. The event takes the
    instant, position and index of the later point.
    """
    events: list[SunEvent] = []
    for i in range(1, len(points)):
        prev = points[i - 1]
        curr = points[i]
        if prev.is_daylight == curr.is_daylight:
            continue
        event_type = SunEventType.SUNRISE if curr.is_daylight else SunEventType.SUNSET
        label = "Sunrise" if event_type is SunEventType.SUNRISE else "Sunset"
        coords = format_coordinates(curr.lat_deg, wrap_longitude(curr.lon_deg))
        events.append(SunEvent(
            event_type=event_type,
            timestamp=curr.timestamp,
            lat_deg=curr.lat_deg,
            lon_deg=curr.lon_deg,
            point_index=i,
            description=f"{label} at {coords}",
        ))
    return events


def compute_statistics(
    points: list[TimelinePoint] | tuple[TimelinePoint, ...],
    total_duration_minutes: float,
) -> TimelineStatistics:
    """Daylight share and altitude summary.

    Daylight minutes are the fraction of points flagged as daylight times
    the total duration (a point-count approximation, not a time integral).
    """
    if not points:
        raise ValueError("Cannot compute statistics of an empty timeline")

    altitudes = np.array([p.sun_altitude_deg for p in points], dtype=float)
    daylight_mask = np.array([p.is_daylight for p in points], dtype=bool)

    daylight_fraction = float(np.count_nonzero(daylight_mask)) / len(points)
    daylight_minutes = daylight_fraction * total_duration_minutes

    return TimelineStatistics(
        daylight_minutes=daylight_minutes,
        darkness_minutes=total_duration_minutes - daylight_minutes,
        daylight_percentage=daylight_fraction * 100.0,
        average_sun_altitude_deg=float(np.mean(altitudes)),
        max_sun_altitude_deg=float(np.max(altitudes)),
        min_sun_altitude_deg=float(np.min(altitudes)),
    )


def build_timeline(
    origin: GeoPoint,
    destination: GeoPoint,
    departure: datetime,
    config: TimelineConfig | None = None,
) -> FlightTimeline:
    """Build the time-indexed route between two points.

    1. Sample ``point_count + 1`` great-circle waypoints.
    2. Duration = distance / cruise speed.
    3. Waypoint i is reached after ``duration * i / point_count`` minutes;
       the Sun is evaluated at its position and instant.
    4. Detect sunrise/sunset transitions and summarize.

    Args:
        origin: Departure point.
        destination: Arrival point.
        departure: Timezone-aware departure instant.
        config: Sampling and aircraft parameters (defaults if None).

    Returns:
        FlightTimeline.

    Raises:
        ValueError: On invalid coordinates, a naive departure, or a
            point_count/speed outside the accepted range.
    """
    config = config or TimelineConfig()
    _validate_config(config)
    validate_coordinates(origin.lat_deg, origin.lon_deg)
    validate_coordinates(destination.lat_deg, destination.lon_deg)
    departure_utc = as_utc(departure)

    waypoints = generate_waypoints(origin, destination, config.point_count)
    total_distance_km = waypoints[-1].distance_km
    total_duration_minutes = total_distance_km / config.cruise_speed_kmh * 60.0

    points: list[TimelinePoint] = []
    for i, wp in enumerate(waypoints):
        elapsed = total_duration_minutes * i / config.point_count
        timestamp = departure_utc + timedelta(minutes=elapsed)
        sun = sun_position(wp.lat_deg, wrap_longitude(wp.lon_deg), timestamp)
        points.append(TimelinePoint(
            lat_deg=wp.lat_deg,
            lon_deg=wp.lon_deg,
            distance_km=wp.distance_km,
            timestamp=timestamp,
            elapsed_minutes=elapsed,
            sun_azimuth_deg=sun.azimuth_deg,
            sun_altitude_deg=sun.altitude_deg,
            sun_zenith_deg=sun.zenith_deg,
            is_daylight=sun.altitude_deg > SUNRISE_SUNSET_ALTITUDE_DEG,
            heading_deg=wp.bearing_deg,
            speed_kmh=config.cruise_speed_kmh,
            altitude_ft=config.cruise_altitude_ft,
        ))

    return FlightTimeline(
        origin=origin,
        destination=destination,
        departure=departure_utc,
        points=tuple(points),
        total_distance_km=total_distance_km,
        total_duration_minutes=total_duration_minutes,
        sun_events=tuple(detect_sun_events(points)),
        statistics=compute_statistics(points, total_duration_minutes),
    )


def point_at_elapsed(timeline: FlightTimeline, elapsed_minutes: float) -> TimelinePoint:
    """Latest point reached at ``elapsed_minutes`` (clamped to the route)."""
    elapsed = [p.elapsed_minutes for p in timeline.points]
    index = bisect.bisect_right(elapsed, elapsed_minutes) - 1
    index = max(0, min(index, len(timeline.points) - 1))
    return timeline.points[index]


def first_event(timeline: FlightTimeline, event_type: SunEventType) -> SunEvent | None:
    """Earliest event of a given type, if any."""
    for event in timeline.sun_events:
        if event.event_type is event_type:
            return event
    return None
