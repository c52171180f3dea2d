# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunside

Which side of the aircraft gets the sun. Generates a great-circle route
between two points, time-stamps it at cruise speed, evaluates a
low-precision solar ephemeris at every sample, and classifies cabin-side
sun exposure along the way. Also computes sunrise, sunset and twilight
for a location and date.
"""

from sunside.domain.solar import (
    SunPosition,
    julian_day,
    julian_century,
    solar_coordinates,
    sun_position,
)
from sunside.domain.daylight import (
    DaylightInfo,
    TwilightKind,
    compute_daylight_info,
    solar_noon,
    solar_midnight,
    twilight_bounds,
)
from sunside.domain.geodesic import (
    GeoPoint,
    Waypoint,
    haversine_distance_km,
    initial_bearing_deg,
    generate_waypoints,
)
from sunside.domain.timeline import (
    TimelineConfig,
    TimelinePoint,
    SunEventType,
    SunEvent,
    TimelineStatistics,
    FlightTimeline,
    build_timeline,
    point_at_elapsed,
)
from sunside.domain.exposure import (
    CabinSide,
    CabinExposure,
    FlightSunAnalysis,
    compute_cabin_exposure,
    analyze_flight_exposure,
)

__version__ = "0.1.0"
