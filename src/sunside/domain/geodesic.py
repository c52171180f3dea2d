# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Great-circle route generation on a spherical Earth.

Haversine distance, forward azimuth, and slerp interpolation along the
arc between two surface points. Longitudes of the generated route are
unwrapped across the antimeridian, so they may leave [-180, 180].

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass, replace

from sunside.domain.angles import normalize_azimuth, validate_coordinates

EARTH_RADIUS_KM: float = 6371.0

# Angular separation (rad) below which the endpoints are treated as coincident
_COINCIDENT_ANGLE_RAD = 1e-5


@dataclass(frozen=True)
class GeoPoint:
    """A point on the Earth's surface."""
    lat_deg: float
    lon_deg: float


@dataclass(frozen=True)
class Waypoint:
    """Route sample with cumulative distance and bearing to the next sample."""
    lat_deg: float
    lon_deg: float
    distance_km: float
    bearing_deg: float


def haversine_distance_km(
    lat1_deg: float, lon1_deg: float,
    lat2_deg: float, lon2_deg: float,
) -> float:
    """Great-circle distance (km) between two points."""
    phi1 = math.radians(lat1_deg)
    phi2 = math.radians(lat2_deg)
    dphi = math.radians(lat2_deg - lat1_deg)
    dlam = math.radians(lon2_deg - lon1_deg)

    a = (math.sin(dphi / 2.0) ** 2
         + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2.0) ** 2)
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1.0 - a)))
    return EARTH_RADIUS_KM * c


def initial_bearing_deg(
    lat1_deg: float, lon1_deg: float,
    lat2_deg: float, lon2_deg: float,
) -> float:
    """Forward azimuth (degrees, [0, 360), 0 = North) from point 1 to point 2."""
    phi1 = math.radians(lat1_deg)
    phi2 = math.radians(lat2_deg)
    dlam = math.radians(lon2_deg - lon1_deg)

    y = math.sin(dlam) * math.cos(phi2)
    x = (math.cos(phi1) * math.sin(phi2)
         - math.sin(phi1) * math.cos(phi2) * math.cos(dlam))
    return normalize_azimuth(math.degrees(math.atan2(y, x)))


def intermediate_point(origin: GeoPoint, destination: GeoPoint, fraction: float) -> GeoPoint:
    """Point at ``fraction`` of the way along the great-circle arc.

    Spherical linear interpolation on unit vectors. Coincident endpoints
    return the origin.
    """
    distance = haversine_distance_km(
        origin.lat_deg, origin.lon_deg, destination.lat_deg, destination.lon_deg,
    )
    delta = distance / EARTH_RADIUS_KM
    if delta < _COINCIDENT_ANGLE_RAD:
        return GeoPoint(origin.lat_deg, origin.lon_deg)

    phi1 = math.radians(origin.lat_deg)
    lam1 = math.radians(origin.lon_deg)
    phi2 = math.radians(destination.lat_deg)
    lam2 = math.radians(destination.lon_deg)

    sin_delta = math.sin(delta)
    a = math.sin((1.0 - fraction) * delta) / sin_delta
    b = math.sin(fraction * delta) / sin_delta

    x = a * math.cos(phi1) * math.cos(lam1) + b * math.cos(phi2) * math.cos(lam2)
    y = a * math.cos(phi1) * math.sin(lam1) + b * math.cos(phi2) * math.sin(lam2)
    z = a * math.sin(phi1) + b * math.sin(phi2)

    lat = math.degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    lon = math.degrees(math.atan2(y, x))
    return GeoPoint(lat, lon)


def unwrap_antimeridian(waypoints: list[Waypoint]) -> list[Waypoint]:
    """Shift longitudes by ±360° so consecutive samples never jump > 180°.

    Sequential scan: each correction is relative to the already-corrected
    previous sample.
    """
    if not waypoints:
        return []
    unwrapped = [waypoints[0]]
    for wp in waypoints[1:]:
        diff = wp.lon_deg - unwrapped[-1].lon_deg
        if diff > 180.0:
            wp = replace(wp, lon_deg=wp.lon_deg - 360.0)
        elif diff < -180.0:
            wp = replace(wp, lon_deg=wp.lon_deg + 360.0)
        unwrapped.append(wp)
    return unwrapped


def generate_waypoints(
    origin: GeoPoint,
    destination: GeoPoint,
    num_segments: int = 100,
) -> list[Waypoint]:
    """Sample the great-circle route into ``num_segments + 1`` waypoints.

    Both endpoints are included. Each waypoint carries the cumulative
    distance from the origin and the bearing toward the next waypoint;
    the last waypoint repeats the bearing of the final segment.

    Args:
        origin: Departure point.
        destination: Arrival point.
        num_segments: Number of equal-angle segments (>= 1).

    Returns:
        List of Waypoint, longitudes unwrapped across the antimeridian.

    Raises:
        ValueError: If coordinates are invalid or num_segments < 1.
    """
    validate_coordinates(origin.lat_deg, origin.lon_deg)
    validate_coordinates(destination.lat_deg, destination.lon_deg)
    if num_segments < 1:
        raise ValueError(f"num_segments must be >= 1, got {num_segments}")

    total_km = haversine_distance_km(
        origin.lat_deg, origin.lon_deg, destination.lat_deg, destination.lon_deg,
    )
    points = [
        intermediate_point(origin, destination, i / num_segments)
        for i in range(num_segments + 1)
    ]

    waypoints: list[Waypoint] = []
    for i, point in enumerate(points):
        if i < num_segments:
            nxt = points[i + 1]
            bearing = initial_bearing_deg(point.lat_deg, point.lon_deg, nxt.lat_deg, nxt.lon_deg)
        else:
            bearing = waypoints[i - 1].bearing_deg
        waypoints.append(Waypoint(
            lat_deg=point.lat_deg,
            lon_deg=point.lon_deg,
            distance_km=total_km * i / num_segments,
            bearing_deg=bearing,
        ))

    return unwrap_antimeridian(waypoints)
