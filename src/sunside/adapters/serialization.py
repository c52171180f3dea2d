# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Plain-dict rendering of domain records for JSON-style boundaries.

Datetimes become ISO 8601 strings and enums their values.
"""
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from typing import Any

from sunside.domain.exposure import FlightSunAnalysis
from sunside.domain.timeline import FlightTimeline


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def timeline_to_dict(timeline: FlightTimeline) -> dict[str, Any]:
    """Full timeline as nested plain dicts/lists."""
    return _plain(asdict(timeline))


def analysis_to_dict(analysis: FlightSunAnalysis) -> dict[str, Any]:
    """Cabin exposure totals, recommendation and breakdown as plain values."""
    return _plain(asdict(analysis))
