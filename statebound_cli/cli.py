"""
Statebound CLI - Main entry point.

Loads regions from configuration into an in-memory RegionStore and answers
queries against it. Results are printed to stdout as JSON; structured logs
go to stderr.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from statebound_geo import Coordinate, Polygon, RegionError, lat_lng
from statebound_geojson import collection_from_regions, feature_from_region
from statebound_store import RegionStore
from statebound_store.logging import LogEvent, StructuredLogger, create_logger

from .config import AppConfig


def build_store(config: AppConfig, logger: StructuredLogger) -> RegionStore:
    """
    Create a store seeded with every region in the configuration.

    Raises:
        InvalidRegionError: If a configured region is invalid
        DuplicateRegionError: If two configured regions share a name
    """
    store = RegionStore(logger=create_logger("store", level=config.logging_level))
    for region in config.load_regions():
        store.create(region)

    logger.info(
        event=LogEvent.STORE_SEEDED,
        message=f"Seeded {len(store)} regions",
        metadata={'count': len(store)}
    )
    return store


def load_ring(path: str) -> Polygon:
    """
    Read a JSON [[lng, lat], ...] ring without validating or repairing it.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a list of [lng, lat] pairs
    """
    ring_path = Path(path)
    if not ring_path.exists():
        raise FileNotFoundError(f"Ring file not found: {path}")

    with open(ring_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Invalid ring in {path}: expected a list of [lng, lat] pairs")
    return Polygon(tuple(Coordinate.from_list(item) for item in data))


def check_ring(polygon: Polygon) -> int:
    """Strictly validate a raw ring; prints the verdict as JSON."""
    try:
        polygon.validate()
    except RegionError as e:
        _print_json({'valid': False, 'kind': e.kind.value, 'error': str(e)})
        return 1

    _print_json({'valid': True, 'turning_angle': polygon.turning_angle})
    return 0


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statebound-cli",
        description="Statebound CLI - Find which region contains a point",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all configured regions as a GeoJSON FeatureCollection
  statebound-cli --config config/states.yaml list

  # Show one region (name is case-insensitive)
  statebound-cli --config config/states.yaml show pennsylvania

  # Which regions contain latitude 40.16, longitude -75.06?
  statebound-cli --config config/states.yaml locate 40.16 -75.06

  # Check the winding order of a ring without repairing it
  statebound-cli check-ring ring.json
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Path to YAML configuration (default: empty store)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log_level from the configuration"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list', help='List all regions')

    show = subparsers.add_parser('show', help='Show one region by name')
    show.add_argument('name', help='Region name (case-insensitive)')

    locate = subparsers.add_parser('locate', help='Find regions containing a point')
    locate.add_argument('latitude', type=float, help='Latitude in degrees')
    locate.add_argument('longitude', type=float, help='Longitude in degrees')

    check = subparsers.add_parser('check-ring', help='Validate a JSON ring (no auto-repair)')
    check.add_argument('ring', help='Path to JSON file with [[lng, lat], ...]')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli")

    try:
        config = AppConfig.from_yaml(Path(args.config)) if args.config else AppConfig()
        if args.log_level:
            config = AppConfig(
                log_level=args.log_level,
                seed_geojson=config.seed_geojson,
                regions=config.regions,
            )
        logger.set_level(config.logging_level)
        if args.config:
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message=f"Configuration loaded from {args.config}",
                metadata={'path': args.config, 'inline_regions': len(config.regions)}
            )

        if args.command == 'check-ring':
            return check_ring(load_ring(args.ring))

        store = build_store(config, logger)

        if args.command == 'list':
            _print_json(collection_from_regions(store.get_all()).to_dict())

        elif args.command == 'show':
            _print_json(feature_from_region(store.get_by_name(args.name)).to_dict())

        elif args.command == 'locate':
            point = lat_lng(args.latitude, args.longitude)
            names = store.locate(point)
            if not names:
                print(f"Error: {point} not within any region", file=sys.stderr)
                return 1
            _print_json(names)

    except (RegionError, ValueError, OSError) as e:
        logger.error(
            event=LogEvent.COMMAND_FAILED,
            message=f"Command '{args.command}' failed",
            metadata={'command': args.command},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
