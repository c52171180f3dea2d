# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Human-readable formatting for coordinates, distances and durations."""
import math


def format_coordinates(lat_deg: float, lon_deg: float) -> str:
    """'33.94°N, 118.41°W' style coordinate string."""
    lat_dir = 'N' if lat_deg >= 0 else 'S'
    lon_dir = 'E' if lon_deg >= 0 else 'W'
    return f"{abs(lat_deg):.2f}°{lat_dir}, {abs(lon_deg):.2f}°{lon_dir}"


def format_distance(km: float) -> str:
    """Metres below 1 km, one decimal below 1000 km, then thousands."""
    if km < 1.0:
        return f"{round(km * 1000.0)} m"
    if km < 1000.0:
        return f"{km:.1f} km"
    return f"{km / 1000.0:.0f}k km"


def format_duration(minutes: float) -> str:
    """'5h 3m' style duration, truncated to whole minutes."""
    hours = int(math.floor(minutes / 60.0))
    mins = int(math.floor(minutes % 60.0))
    return f"{hours}h {mins}m"
