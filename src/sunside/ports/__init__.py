# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for timeline export.

Adapters implement this to write a flight timeline in various formats
(JSON, CSV, GeoJSON).
"""
from typing import Protocol, runtime_checkable

from sunside.domain.timeline import FlightTimeline


@runtime_checkable
class TimelineExporter(Protocol):
    """Port for exporting a flight timeline to file."""

    def export(self, timeline: FlightTimeline, path: str) -> int:
        """
        Export a timeline to a file.

        Args:
            timeline: FlightTimeline from build_timeline.
            path: Output file path.

        Returns:
            Number of timeline points exported.
        """
        ...
