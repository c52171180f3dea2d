# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for timeline export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from sunside.adapters.csv_exporter import CsvTimelineExporter
from sunside.adapters.geojson_exporter import GeoJsonTimelineExporter
from sunside.adapters.json_exporter import JsonTimelineExporter

__all__ = [
    'CsvTimelineExporter',
    'GeoJsonTimelineExporter',
    'JsonTimelineExporter',
]
