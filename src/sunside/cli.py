# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for flight sun-exposure analysis.

Usage:
    # LAX -> JFK, summary to stdout
    sunside --origin 33.9416 -118.4085 --destination 40.6413 -73.7781 \\
        --departure 2024-06-21T08:00:00Z

    # Finer sampling and exports
    sunside --origin 37.6213 -122.3790 --destination 35.7648 140.3864 \\
        --departure 2024-06-21T20:00:00Z --points 300 \\
        --export-json flight.json --export-csv flight.csv \\
        --export-geojson flight.geojson

    # Sunrise/sunset for one place and date
    sunside --daylight 40.7128 -74.0060 --date 2024-06-21
"""
import argparse
import logging
import sys
from datetime import date, datetime, timezone

from sunside.adapters.csv_exporter import CsvTimelineExporter
from sunside.adapters.geojson_exporter import GeoJsonTimelineExporter
from sunside.adapters.json_exporter import JsonTimelineExporter
from sunside.domain.angles import compass_direction
from sunside.domain.daylight import DaylightInfo, compute_daylight_info
from sunside.domain.exposure import FlightSunAnalysis, analyze_flight_exposure
from sunside.domain.formatting import format_distance, format_duration
from sunside.domain.geodesic import GeoPoint
from sunside.domain.timeline import FlightTimeline, TimelineConfig, build_timeline


def parse_instant(text: str) -> datetime:
    """ISO 8601 instant; a trailing 'Z' or no offset both mean UTC."""
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    instant = datetime.fromisoformat(text)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


def _fmt_time(instant: datetime | None) -> str:
    if instant is None:
        return '-'
    return instant.strftime('%Y-%m-%d %H:%M:%S UTC')


def format_flight_report(timeline: FlightTimeline, analysis: FlightSunAnalysis) -> str:
    """Multi-line human summary of a timeline and its exposure analysis."""
    stats = timeline.statistics
    first = timeline.points[0]
    lines = [
        f"Distance:  {format_distance(timeline.total_distance_km)} "
        f"({timeline.total_distance_km:.1f} km)",
        f"Duration:  {format_duration(timeline.total_duration_minutes)}",
        f"Departure: {_fmt_time(timeline.departure)}, "
        f"initial heading {first.heading_deg:.0f}° ({compass_direction(first.heading_deg)})",
        f"Daylight:  {format_duration(stats.daylight_minutes)} "
        f"({stats.daylight_percentage:.0f}%), darkness {format_duration(stats.darkness_minutes)}",
        f"Sun altitude: avg {stats.average_sun_altitude_deg:.1f}°, "
        f"min {stats.min_sun_altitude_deg:.1f}°, max {stats.max_sun_altitude_deg:.1f}°",
    ]
    if timeline.sun_events:
        lines.append("Sun events:")
        for event in timeline.sun_events:
            lines.append(f"  {_fmt_time(event.timestamp)}  {event.description}")
    else:
        lines.append("Sun events: none")
    lines.append("Cabin exposure:")
    lines.extend(f"  {line}" for line in analysis.breakdown)
    lines.append(f"Recommendation: {analysis.recommendation}")
    return "\n".join(lines)


def format_daylight_report(info: DaylightInfo) -> str:
    """Multi-line human summary of a daylight record."""
    if info.is_always_day:
        status = "polar day (sun never sets)"
    elif info.is_always_night:
        status = "polar night (sun never rises)"
    else:
        status = "normal"
    return "\n".join([
        f"Conditions:     {status}",
        f"Civil dawn:     {_fmt_time(info.civil_twilight_start)}",
        f"Sunrise:        {_fmt_time(info.sunrise)}",
        f"Solar noon:     {_fmt_time(info.solar_noon)}",
        f"Sunset:         {_fmt_time(info.sunset)}",
        f"Civil dusk:     {_fmt_time(info.civil_twilight_end)}",
        f"Solar midnight: {_fmt_time(info.solar_midnight)}",
        f"Day length:     {info.day_length_hours:.2f} h",
        f"Night length:   {info.night_length_hours:.2f} h",
    ])


def run(
    origin: GeoPoint,
    destination: GeoPoint,
    departure: datetime,
    config: TimelineConfig | None = None,
) -> tuple[FlightTimeline, FlightSunAnalysis]:
    """
    Build a timeline and its cabin exposure analysis.

    Returns:
        (timeline, analysis)
    """
    timeline = build_timeline(origin, destination, departure, config)
    return timeline, analyze_flight_exposure(timeline)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Which side of the aircraft gets the sun on a great-circle flight"
    )
    parser.add_argument(
        '--origin', nargs=2, type=float, metavar=('LAT', 'LON'),
        help="Departure latitude and longitude (degrees)"
    )
    parser.add_argument(
        '--destination', nargs=2, type=float, metavar=('LAT', 'LON'),
        help="Arrival latitude and longitude (degrees)"
    )
    parser.add_argument(
        '--departure',
        help="Departure instant, ISO 8601 (UTC if no offset), e.g. 2024-06-21T08:00:00Z"
    )
    parser.add_argument(
        '--points', type=int, default=TimelineConfig.point_count,
        help=f"Route segments to sample (default: {TimelineConfig.point_count})"
    )
    parser.add_argument(
        '--speed', type=float, default=TimelineConfig.cruise_speed_kmh,
        help=f"Cruise speed in km/h (default: {TimelineConfig.cruise_speed_kmh:.0f})"
    )
    parser.add_argument(
        '--altitude', type=float, default=TimelineConfig.cruise_altitude_ft,
        help=f"Cruise altitude in feet (default: {TimelineConfig.cruise_altitude_ft:.0f})"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    daylight_group = parser.add_argument_group('daylight query')
    daylight_group.add_argument(
        '--daylight', nargs=2, type=float, metavar=('LAT', 'LON'),
        help="Print sunrise/sunset/twilight for a location instead of a flight"
    )
    daylight_group.add_argument(
        '--date', help="UTC calendar date for --daylight, YYYY-MM-DD (default: today)"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument('--export-json', help="Write timeline + analysis as JSON")
    export_group.add_argument('--export-csv', help="Write timeline points as CSV")
    export_group.add_argument('--export-geojson', help="Write route and sun events as GeoJSON")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.daylight:
            day = date.fromisoformat(args.date) if args.date else datetime.now(timezone.utc).date()
            info = compute_daylight_info(args.daylight[0], args.daylight[1], day)
            print(format_daylight_report(info))
            return

        if not args.origin:
            parser.error("the following arguments are required: --origin")
        if not args.destination:
            parser.error("the following arguments are required: --destination")
        if not args.departure:
            parser.error("the following arguments are required: --departure")

        config = TimelineConfig(
            point_count=args.points,
            cruise_speed_kmh=args.speed,
            cruise_altitude_ft=args.altitude,
        )
        timeline, analysis = run(
            GeoPoint(*args.origin),
            GeoPoint(*args.destination),
            parse_instant(args.departure),
            config,
        )
        print(format_flight_report(timeline, analysis))

        if args.export_json:
            n = JsonTimelineExporter().export(timeline, args.export_json)
            print(f"Exported {n} points to {args.export_json} (JSON)")

        if args.export_csv:
            n = CsvTimelineExporter().export(timeline, args.export_csv)
            print(f"Exported {n} points to {args.export_csv} (CSV)")

        if args.export_geojson:
            n = GeoJsonTimelineExporter().export(timeline, args.export_geojson)
            print(f"Exported {n} points to {args.export_geojson} (GeoJSON)")

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
