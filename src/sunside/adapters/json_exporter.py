# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON timeline exporter.

Writes the full timeline record, optionally with the cabin exposure
analysis alongside it. External dependencies (json, file I/O) are
confined to this adapter.
"""
import json
import logging

from sunside.ports import TimelineExporter
from sunside.domain.exposure import analyze_flight_exposure
from sunside.domain.timeline import FlightTimeline
from sunside.adapters.serialization import analysis_to_dict, timeline_to_dict

logger = logging.getLogger(__name__)


class JsonTimelineExporter(TimelineExporter):
    """Exports a timeline (and its exposure analysis) as JSON."""

    def __init__(self, include_analysis: bool = True) -> None:
        self._include_analysis = include_analysis

    def export(self, timeline: FlightTimeline, path: str) -> int:
        document = {'timeline': timeline_to_dict(timeline)}
        if self._include_analysis:
            document['analysis'] = analysis_to_dict(analyze_flight_exposure(timeline))

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)

        logger.debug("Wrote %d timeline points to %s", len(timeline.points), path)
        return len(timeline.points)
