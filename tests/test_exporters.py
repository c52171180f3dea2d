# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for JSON, CSV and GeoJSON timeline export.

Verifies port compliance, output format, and adapter behavior.
"""
import csv
import json
import logging
from datetime import datetime, timezone

import pytest

from sunside.adapters import CsvTimelineExporter, GeoJsonTimelineExporter, JsonTimelineExporter
from sunside.adapters.serialization import analysis_to_dict, timeline_to_dict
from sunside.domain.exposure import analyze_flight_exposure
from sunside.domain.geodesic import GeoPoint
from sunside.domain.timeline import TimelineConfig, build_timeline
from sunside.ports import TimelineExporter


@pytest.fixture(scope="module")
def timeline():
    return build_timeline(
        GeoPoint(33.9416, -118.4085), GeoPoint(40.6413, -73.7781),
        datetime(2024, 6, 21, 8, 0, tzinfo=timezone.utc),
        TimelineConfig(point_count=20),
    )


@pytest.fixture(scope="module")
def pacific_timeline():
    # SFO -> NRT crosses the antimeridian
    return build_timeline(
        GeoPoint(37.6213, -122.3790), GeoPoint(35.7648, 140.3864),
        datetime(2024, 6, 21, 20, 0, tzinfo=timezone.utc),
        TimelineConfig(point_count=30),
    )


class TestPortCompliance:
    """Exporters implement the TimelineExporter port."""

    @pytest.mark.parametrize("cls", [
        JsonTimelineExporter, CsvTimelineExporter, GeoJsonTimelineExporter,
    ])
    def test_is_timeline_exporter(self, cls):
        assert issubclass(cls, TimelineExporter)
        assert isinstance(cls(), TimelineExporter)


class TestJsonExporter:

    def test_document_shape(self, timeline, tmp_path):
        path = tmp_path / "flight.json"
        count = JsonTimelineExporter().export(timeline, str(path))
        assert count == 21
        doc = json.loads(path.read_text(encoding="utf-8"))
        assert set(doc) == {"timeline", "analysis"}
        assert len(doc["timeline"]["points"]) == 21
        assert doc["timeline"]["departure"] == "2024-06-21T08:00:00+00:00"
        assert doc["timeline"]["sun_events"][0]["event_type"] == "sunrise"
        assert len(doc["analysis"]["breakdown"]) == 4

    def test_without_analysis(self, timeline, tmp_path):
        path = tmp_path / "flight.json"
        JsonTimelineExporter(include_analysis=False).export(timeline, str(path))
        doc = json.loads(path.read_text(encoding="utf-8"))
        assert set(doc) == {"timeline"}

    def test_statistics_round_trip(self, timeline, tmp_path):
        path = tmp_path / "flight.json"
        JsonTimelineExporter().export(timeline, str(path))
        stats = json.loads(path.read_text(encoding="utf-8"))["timeline"]["statistics"]
        assert stats["daylight_percentage"] == pytest.approx(
            timeline.statistics.daylight_percentage
        )


class TestCsvExporter:

    def test_header_row(self, timeline, tmp_path):
        path = tmp_path / "flight.csv"
        CsvTimelineExporter().export(timeline, str(path))
        with open(path, newline="", encoding="utf-8") as f:
            header = next(csv.reader(f))
        assert header == [
            'index', 'timestamp', 'elapsed_min', 'lat_deg', 'lon_deg', 'distance_km',
            'heading_deg', 'sun_azimuth_deg', 'sun_altitude_deg', 'is_daylight',
            'cabin_side', 'intensity',
        ]

    def test_row_count(self, timeline, tmp_path):
        path = tmp_path / "flight.csv"
        count = CsvTimelineExporter().export(timeline, str(path))
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert count == 21
        assert len(rows) == 22  # header + 21 points

    def test_row_values(self, timeline, tmp_path):
        path = tmp_path / "flight.csv"
        CsvTimelineExporter().export(timeline, str(path))
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        first, last = rows[0], rows[-1]
        assert float(first["lat_deg"]) == pytest.approx(33.9416, abs=1e-6)
        assert float(first["elapsed_min"]) == 0.0
        assert first["is_daylight"] == "0"
        assert last["is_daylight"] == "1"
        assert {r["cabin_side"] for r in rows} <= {"LEFT", "RIGHT", "OVERHEAD", "NONE"}


class TestGeoJsonExporter:

    def test_feature_collection(self, timeline, tmp_path):
        path = tmp_path / "flight.geojson"
        GeoJsonTimelineExporter().export(timeline, str(path))
        doc = json.loads(path.read_text(encoding="utf-8"))
        assert doc["type"] == "FeatureCollection"
        route = doc["features"][0]
        assert route["geometry"]["type"] == "LineString"
        assert route["properties"]["kind"] == "route"
        assert len(route["geometry"]["coordinates"]) == 21
        assert len(doc["features"]) == 1 + len(timeline.sun_events)

    def test_lon_lat_order(self, timeline, tmp_path):
        path = tmp_path / "flight.geojson"
        GeoJsonTimelineExporter().export(timeline, str(path))
        doc = json.loads(path.read_text(encoding="utf-8"))
        lon, lat = doc["features"][0]["geometry"]["coordinates"][0]
        assert lon == pytest.approx(-118.4085)
        assert lat == pytest.approx(33.9416)

    def test_event_points(self, timeline, tmp_path):
        path = tmp_path / "flight.geojson"
        GeoJsonTimelineExporter().export(timeline, str(path))
        doc = json.loads(path.read_text(encoding="utf-8"))
        events = doc["features"][1:]
        assert events
        assert all(f["geometry"]["type"] == "Point" for f in events)
        assert events[0]["properties"]["kind"] == "sunrise"

    def test_route_longitudes_continuous(self, pacific_timeline, tmp_path):
        path = tmp_path / "pacific.geojson"
        GeoJsonTimelineExporter().export(pacific_timeline, str(path))
        doc = json.loads(path.read_text(encoding="utf-8"))
        lons = [c[0] for c in doc["features"][0]["geometry"]["coordinates"]]
        assert all(abs(b - a) < 180.0 for a, b in zip(lons, lons[1:]))


class TestSerialization:

    def test_timeline_dict_is_json_ready(self, timeline):
        data = timeline_to_dict(timeline)
        json.dumps(data)
        assert data["origin"] == {"lat_deg": 33.9416, "lon_deg": -118.4085}

    def test_analysis_dict(self, timeline):
        data = analysis_to_dict(analyze_flight_exposure(timeline))
        json.dumps(data)
        assert set(data) == {
            "left_minutes", "right_minutes", "overhead_minutes", "no_sun_minutes",
            "recommendation", "breakdown",
        }
        assert isinstance(data["breakdown"], list)


class TestExportLogging:
    """Every file exporter reports what it wrote at debug level."""

    @pytest.mark.parametrize("cls,suffix", [
        (JsonTimelineExporter, ".json"),
        (CsvTimelineExporter, ".csv"),
        (GeoJsonTimelineExporter, ".geojson"),
    ])
    def test_debug_record(self, cls, suffix, timeline, tmp_path, caplog):
        path = tmp_path / f"flight{suffix}"
        with caplog.at_level(logging.DEBUG, logger="sunside.adapters"):
            cls().export(timeline, str(path))
        records = [r for r in caplog.records if r.name.startswith("sunside.adapters")]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert str(path) in records[0].getMessage()
        assert "21" in records[0].getMessage()
