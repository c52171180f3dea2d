# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV timeline exporter.

One row per timeline point with the cabin side classification.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from sunside.ports import TimelineExporter
from sunside.domain.exposure import compute_cabin_exposure
from sunside.domain.timeline import FlightTimeline

logger = logging.getLogger(__name__)

_HEADER = [
    'index', 'timestamp', 'elapsed_min', 'lat_deg', 'lon_deg', 'distance_km',
    'heading_deg', 'sun_azimuth_deg', 'sun_altitude_deg', 'is_daylight',
    'cabin_side', 'intensity',
]


class CsvTimelineExporter(TimelineExporter):
    """Exports timeline points to CSV."""

    def export(self, timeline: FlightTimeline, path: str) -> int:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for i, point in enumerate(timeline.points):
                exposure = compute_cabin_exposure(
                    point.heading_deg, point.sun_azimuth_deg, point.sun_altitude_deg,
                )
                writer.writerow([
                    i,
                    point.timestamp.isoformat(),
                    f'{point.elapsed_minutes:.3f}',
                    f'{point.lat_deg:.6f}',
                    f'{point.lon_deg:.6f}',
                    f'{point.distance_km:.3f}',
                    f'{point.heading_deg:.4f}',
                    f'{point.sun_azimuth_deg:.4f}',
                    f'{point.sun_altitude_deg:.4f}',
                    int(point.is_daylight),
                    exposure.side.value,
                    f'{exposure.intensity:.4f}',
                ])

        logger.debug("Wrote %d CSV rows to %s", len(timeline.points), path)
        return len(timeline.points)
