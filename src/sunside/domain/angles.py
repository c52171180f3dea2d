# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle normalization and coordinate validation.

No external dependencies — only stdlib math.
"""
import math

_COMPASS_POINTS = ('N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW')


def normalize_azimuth(angle_deg: float) -> float:
    """Reduce an angle into [0, 360)."""
    wrapped = angle_deg % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def normalize_relative_bearing(angle_deg: float) -> float:
    """Reduce an angle into (-180, 180]."""
    wrapped = normalize_azimuth(angle_deg)
    if wrapped > 180.0:
        wrapped -= 360.0
    return wrapped


def wrap_longitude(lon_deg: float) -> float:
    """Bring an unwrapped longitude back into [-180, 180)."""
    return normalize_azimuth(lon_deg + 180.0) - 180.0


def compass_direction(bearing_deg: float) -> str:
    """Eight-point compass name for a bearing (45° sectors centred on each point)."""
    index = int(math.floor(normalize_azimuth(bearing_deg) / 45.0 + 0.5)) % 8
    return _COMPASS_POINTS[index]


def validate_coordinates(lat_deg: float, lon_deg: float) -> None:
    """Reject non-finite or out-of-range surface coordinates.

    Raises:
        ValueError: If latitude is outside [-90, 90], longitude outside
            [-180, 180], or either is NaN/inf.
    """
    if not (math.isfinite(lat_deg) and math.isfinite(lon_deg)):
        raise ValueError(f"Coordinates must be finite, got ({lat_deg}, {lon_deg})")
    if not -90.0 <= lat_deg <= 90.0:
        raise ValueError(f"Latitude must be in [-90, 90], got {lat_deg}")
    if not -180.0 <= lon_deg <= 180.0:
        raise ValueError(f"Longitude must be in [-180, 180], got {lon_deg}")
