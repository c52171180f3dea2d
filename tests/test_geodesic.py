# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for great-circle route generation.

Verifies Haversine distances against known city pairs, forward azimuth,
slerp waypoints, and antimeridian unwrapping.
"""
import pytest

from sunside.domain.geodesic import (
    EARTH_RADIUS_KM,
    GeoPoint,
    Waypoint,
    generate_waypoints,
    haversine_distance_km,
    initial_bearing_deg,
    intermediate_point,
    unwrap_antimeridian,
)

LAX = GeoPoint(33.9416, -118.4085)
JFK = GeoPoint(40.6413, -73.7781)
SFO = GeoPoint(37.6213, -122.3790)
NRT = GeoPoint(35.7648, 140.3864)


class TestHaversineDistance:
    """Great-circle distances on a 6371 km sphere."""

    def test_lax_jfk(self):
        d = haversine_distance_km(LAX.lat_deg, LAX.lon_deg, JFK.lat_deg, JFK.lon_deg)
        assert 3964.0 < d < 3984.0

    def test_jfk_lhr(self):
        d = haversine_distance_km(40.6413, -73.7781, 51.4700, -0.4543)
        assert 5531.0 < d < 5551.0

    def test_sfo_nrt_transpacific(self):
        d = haversine_distance_km(SFO.lat_deg, SFO.lon_deg, NRT.lat_deg, NRT.lon_deg)
        assert 8217.0 < d < 8237.0

    def test_sin_jfk_ultra_long_haul(self):
        d = haversine_distance_km(1.3644, 103.9915, 40.6413, -73.7781)
        assert 15300.0 < d < 15400.0

    def test_lax_sfo_short(self):
        d = haversine_distance_km(33.9416, -118.4085, 37.6213, -122.3790)
        assert 533.0 < d < 553.0

    def test_same_point_zero(self):
        assert haversine_distance_km(33.9416, -118.4085, 33.9416, -118.4085) == 0.0

    def test_equator_crossing(self):
        d = haversine_distance_km(10.0, 0.0, -10.0, 0.0)
        assert 2200.0 < d < 2230.0

    def test_symmetric(self):
        a = haversine_distance_km(LAX.lat_deg, LAX.lon_deg, NRT.lat_deg, NRT.lon_deg)
        b = haversine_distance_km(NRT.lat_deg, NRT.lon_deg, LAX.lat_deg, LAX.lon_deg)
        assert a == pytest.approx(b)

    def test_half_circumference(self):
        d = haversine_distance_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)


class TestInitialBearing:
    """Forward azimuth, 0 = North, clockwise."""

    def test_east(self):
        assert initial_bearing_deg(0.0, 0.0, 0.0, 90.0) == pytest.approx(90.0)

    def test_north(self):
        assert initial_bearing_deg(0.0, 0.0, 45.0, 0.0) == pytest.approx(0.0, abs=1e-9)

    def test_west(self):
        assert initial_bearing_deg(0.0, 90.0, 0.0, 0.0) == pytest.approx(270.0)

    def test_south(self):
        assert initial_bearing_deg(10.0, 0.0, -10.0, 0.0) == pytest.approx(180.0)

    def test_lax_jfk_northeast(self):
        b = initial_bearing_deg(LAX.lat_deg, LAX.lon_deg, JFK.lat_deg, JFK.lon_deg)
        assert 60.0 < b < 80.0

    def test_range(self):
        b = initial_bearing_deg(40.0, -100.0, 50.0, 100.0)
        assert 0.0 <= b < 360.0


class TestIntermediatePoint:
    """Slerp along the arc."""

    def test_midpoint_on_equator(self):
        p = intermediate_point(GeoPoint(0.0, 0.0), GeoPoint(0.0, 90.0), 0.5)
        assert p.lat_deg == pytest.approx(0.0, abs=1e-9)
        assert p.lon_deg == pytest.approx(45.0)

    def test_endpoints(self):
        start = intermediate_point(LAX, JFK, 0.0)
        end = intermediate_point(LAX, JFK, 1.0)
        assert start.lat_deg == pytest.approx(LAX.lat_deg)
        assert start.lon_deg == pytest.approx(LAX.lon_deg)
        assert end.lat_deg == pytest.approx(JFK.lat_deg)
        assert end.lon_deg == pytest.approx(JFK.lon_deg)

    def test_coincident_returns_origin(self):
        p = intermediate_point(LAX, LAX, 0.5)
        assert p == LAX

    def test_equal_arc_spacing(self):
        a = intermediate_point(LAX, JFK, 0.25)
        b = intermediate_point(LAX, JFK, 0.5)
        first = haversine_distance_km(LAX.lat_deg, LAX.lon_deg, a.lat_deg, a.lon_deg)
        second = haversine_distance_km(a.lat_deg, a.lon_deg, b.lat_deg, b.lon_deg)
        assert first == pytest.approx(second, rel=1e-6)


class TestGenerateWaypoints:
    """Route sampling."""

    def test_count(self):
        assert len(generate_waypoints(LAX, JFK, 100)) == 101

    def test_first_is_origin(self):
        wps = generate_waypoints(LAX, JFK, 50)
        assert wps[0].lat_deg == pytest.approx(LAX.lat_deg)
        assert wps[0].lon_deg == pytest.approx(LAX.lon_deg)
        assert wps[0].distance_km == 0.0

    def test_last_is_destination(self):
        wps = generate_waypoints(LAX, JFK, 50)
        assert wps[-1].lat_deg == pytest.approx(JFK.lat_deg)
        assert wps[-1].lon_deg == pytest.approx(JFK.lon_deg)
        total = haversine_distance_km(LAX.lat_deg, LAX.lon_deg, JFK.lat_deg, JFK.lon_deg)
        assert wps[-1].distance_km == pytest.approx(total)

    def test_distance_strictly_increasing(self):
        wps = generate_waypoints(LAX, JFK, 50)
        for prev, curr in zip(wps, wps[1:]):
            assert curr.distance_km > prev.distance_km

    def test_bearings_in_range(self):
        for wp in generate_waypoints(LAX, JFK, 50):
            assert 0.0 <= wp.bearing_deg < 360.0

    def test_last_bearing_repeats_previous(self):
        wps = generate_waypoints(LAX, JFK, 20)
        assert wps[-1].bearing_deg == wps[-2].bearing_deg

    def test_bearing_points_to_next(self):
        wps = generate_waypoints(LAX, JFK, 20)
        expected = initial_bearing_deg(
            wps[3].lat_deg, wps[3].lon_deg, wps[4].lat_deg, wps[4].lon_deg,
        )
        assert wps[3].bearing_deg == pytest.approx(expected)

    def test_antimeridian_sfo_nrt(self):
        wps = generate_waypoints(SFO, NRT, 50)
        for prev, curr in zip(wps, wps[1:]):
            assert abs(curr.lon_deg - prev.lon_deg) < 180.0
        # Westbound across the date line: longitudes run past -180
        assert min(wp.lon_deg for wp in wps) < -180.0
        assert wps[-1].lon_deg == pytest.approx(NRT.lon_deg - 360.0)

    def test_short_route(self):
        wps = generate_waypoints(LAX, GeoPoint(34.0, -118.5), 10)
        assert len(wps) == 11
        assert wps[-1].distance_km < 20.0

    def test_polar_route_arcs_north(self):
        wps = generate_waypoints(GeoPoint(60.0, -120.0), GeoPoint(65.0, 30.0), 50)
        assert len(wps) == 51
        assert max(wp.lat_deg for wp in wps) > 65.0

    def test_coincident_endpoints(self):
        wps = generate_waypoints(LAX, LAX, 5)
        assert len(wps) == 6
        for wp in wps:
            assert wp.lat_deg == LAX.lat_deg
            assert wp.lon_deg == LAX.lon_deg
            assert wp.distance_km == 0.0

    def test_single_segment(self):
        wps = generate_waypoints(LAX, JFK, 1)
        assert len(wps) == 2
        assert wps[0].bearing_deg == wps[1].bearing_deg

    def test_zero_segments_rejected(self):
        with pytest.raises(ValueError):
            generate_waypoints(LAX, JFK, 0)

    def test_invalid_origin_rejected(self):
        with pytest.raises(ValueError):
            generate_waypoints(GeoPoint(95.0, 0.0), JFK, 10)

    def test_idempotent(self):
        assert generate_waypoints(SFO, NRT, 30) == generate_waypoints(SFO, NRT, 30)


class TestUnwrapAntimeridian:

    def test_eastbound_crossing(self):
        wps = [
            Waypoint(0.0, 179.0, 0.0, 90.0),
            Waypoint(0.0, -179.0, 222.0, 90.0),
            Waypoint(0.0, -177.0, 444.0, 90.0),
        ]
        lons = [wp.lon_deg for wp in unwrap_antimeridian(wps)]
        assert lons == [179.0, 181.0, 183.0]

    def test_no_crossing_unchanged(self):
        wps = [Waypoint(0.0, 10.0, 0.0, 90.0), Waypoint(0.0, 20.0, 1.0, 90.0)]
        assert unwrap_antimeridian(wps) == wps

    def test_empty(self):
        assert unwrap_antimeridian([]) == []

    def test_input_not_mutated(self):
        wps = [Waypoint(0.0, 179.0, 0.0, 90.0), Waypoint(0.0, -179.0, 1.0, 90.0)]
        unwrap_antimeridian(wps)
        assert wps[1].lon_deg == -179.0


class TestWaypointValueObject:

    def test_frozen(self):
        wp = Waypoint(1.0, 2.0, 3.0, 4.0)
        with pytest.raises(AttributeError):
            wp.lat_deg = 0.0

    def test_geopoint_frozen(self):
        with pytest.raises(AttributeError):
            LAX.lat_deg = 0.0
