"""Command line interface for the meeting point finder."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from meeting_point.adapters.config import AppConfig, MemberConfigurationLoader
from meeting_point.adapters.formatters import ResultFormatter
from meeting_point.adapters.osrm_api import OsrmHttpClient, OsrmRoadRouter
from meeting_point.adapters.station_catalog import CsvStationCatalog, StationCatalogError
from meeting_point.application.services import (
    MeetingPointService,
    TravelTimeService,
    nearest_stations,
)
from meeting_point.domain.errors import MeetingPointError
from meeting_point.domain.models import CandidateResult, Coordinate, Station, TransportMode

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace) -> AppConfig:
    """Build the app config: CLI flags override the TOML file, which overrides the environment."""
    config = AppConfig(**({"config_file": args.config} if args.config else {}))
    config = config.with_toml_overrides()

    cli_overrides: dict[str, Any] = {}
    if args.stations:
        cli_overrides["stations_csv"] = args.stations
    if getattr(args, "mode", None):
        cli_overrides["optimization_mode"] = args.mode
    if getattr(args, "candidates", None) is not None:
        cli_overrides["candidate_count"] = args.candidates
    if getattr(args, "results", None) is not None:
        cli_overrides["result_count"] = args.results
    if not cli_overrides:
        return config
    return AppConfig(**{**config.model_dump(), **cli_overrides})


async def run_search(config: AppConfig) -> list[CandidateResult]:
    """Load members and stations from the config and run a meeting point search."""
    if not config.config_file:
        raise ValueError("A config file with [[members]] is required (--config or CONFIG_FILE)")

    members = MemberConfigurationLoader.load(config)
    logger.info(f"Loaded {len(members)} member(s) from {config.config_file}")
    catalog = CsvStationCatalog(config.stations_csv)

    async with aiohttp.ClientSession() as session:
        road_router = None
        if any(member.transport_mode is TransportMode.CAR for member in members):
            road_router = OsrmRoadRouter(
                OsrmHttpClient(
                    session=session,
                    base_url=config.osrm_base_url,
                    profile=config.osrm_profile,
                    timeout_seconds=config.osrm_timeout_seconds,
                    min_delay_seconds=config.osrm_min_delay_seconds,
                )
            )
        service = MeetingPointService(
            catalog,
            TravelTimeService(road_router),
            max_concurrency=config.max_concurrent_routes,
        )
        return await service.search(members, config.search_settings())


async def run_nearest(
    config: AppConfig, latitude: float, longitude: float, limit: int
) -> list[Station]:
    """List the stations nearest to a coordinate."""
    stations = await CsvStationCatalog(config.stations_csv).all_stations()
    return nearest_stations(Coordinate(latitude=latitude, longitude=longitude), stations, limit)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the transit station that is best for a group to meet at",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rank meeting stations for the members in members.toml
  meeting-point search --config members.toml --stations stations.csv

  # Minimize the longest trip instead of the total
  meeting-point search --config members.toml --mode max --results 3

  # Show the stations nearest to a coordinate
  meeting-point nearest 35.681 139.767 --stations stations.csv
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Find the best meeting stations")
    search_parser.add_argument("--config", help="TOML file with [[members]] and [search]")
    search_parser.add_argument("--stations", help="Station CSV file")
    search_parser.add_argument("--mode", choices=["total", "max"], help="Ranking mode")
    search_parser.add_argument("--candidates", type=int, help="Candidate stations (30-100)")
    search_parser.add_argument("--results", type=int, help="Results to show (3-10)")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearest_parser = subparsers.add_parser("nearest", help="List stations nearest to a point")
    nearest_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    nearest_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    nearest_parser.add_argument("--config", help="TOML config file")
    nearest_parser.add_argument("--stations", help="Station CSV file")
    nearest_parser.add_argument("--limit", type=int, default=5, help="Number of stations")
    nearest_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.verbose)

    try:
        config = build_config(args)

        if args.command == "search":
            results = await run_search(config)
            formatter = ResultFormatter(config.search_settings().mode)
            if args.json:
                print(formatter.format_json(results))
            else:
                print(formatter.format_text(results))

        elif args.command == "nearest":
            if args.limit <= 0:
                raise ValueError("--limit must be positive")
            stations = await run_nearest(config, args.latitude, args.longitude, args.limit)
            if args.json:
                payload = [ResultFormatter.station_to_dict(station) for station in stations]
                print(json.dumps(payload, indent=2, ensure_ascii=False))
            elif not stations:
                print("No stations in the catalog.", file=sys.stderr)
                return 1
            else:
                print(ResultFormatter.format_stations(stations))

    except (MeetingPointError, StationCatalogError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
