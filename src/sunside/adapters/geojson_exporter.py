# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
GeoJSON timeline exporter.

Exports the route as a LineString feature plus one Point feature per
sun event. Coordinates follow the GeoJSON spec: [lon, lat]. Route
longitudes stay unwrapped so the line does not jump across the
antimeridian. External dependencies (json, file I/O) are confined to
this adapter.
"""
import json
import logging

from sunside.ports import TimelineExporter
from sunside.domain.timeline import FlightTimeline

logger = logging.getLogger(__name__)


class GeoJsonTimelineExporter(TimelineExporter):
    """Exports a timeline as a GeoJSON FeatureCollection."""

    def export(self, timeline: FlightTimeline, path: str) -> int:
        stats = timeline.statistics
        route = {
            'type': 'Feature',
            'geometry': {
                'type': 'LineString',
                'coordinates': [
                    [round(p.lon_deg, 6), round(p.lat_deg, 6)]
                    for p in timeline.points
                ],
            },
            'properties': {
                'kind': 'route',
                'departure': timeline.departure.isoformat(),
                'total_distance_km': round(timeline.total_distance_km, 3),
                'total_duration_min': round(timeline.total_duration_minutes, 3),
                'daylight_percentage': round(stats.daylight_percentage, 2),
            },
        }

        features = [route]
        for event in timeline.sun_events:
            features.append({
                'type': 'Feature',
                'geometry': {
                    'type': 'Point',
                    'coordinates': [round(event.lon_deg, 6), round(event.lat_deg, 6)],
                },
                'properties': {
                    'kind': event.event_type.value,
                    'timestamp': event.timestamp.isoformat(),
                    'point_index': event.point_index,
                    'description': event.description,
                },
            })

        collection = {
            'type': 'FeatureCollection',
            'features': features,
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(collection, f, indent=2, ensure_ascii=False)

        logger.debug(
            "Wrote %d route points and %d sun events to %s",
            len(timeline.points), len(timeline.sun_events), path,
        )
        return len(timeline.points)
