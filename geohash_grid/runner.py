"""
Command-line runner for geohash operations.

Subcommands:
1. encode   - coordinate to geohash
2. decode   - geohash to bounding box
3. neighbor - adjacent cell in one direction
4. adjacent - all four cardinal neighbours

Usage:
    python -m geohash_grid.runner encode 53.3498 -6.2603 --tolerance 0.001

    # Bounding box as JSON
    python -m geohash_grid.runner decode gc7x3r4 --json

    # Step one cell east
    python -m geohash_grid.runner neighbor gc7x3r4 east
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from geohash_grid.core import Direction, encode, decode, neighbor, adjacent
from geohash_grid.utils.config import GridConfig, LOG_LEVELS, load_config, get_default_config
from geohash_grid.utils.exceptions import ConfigurationError, GeohashError
from geohash_grid.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def run_encode(args: argparse.Namespace, config: GridConfig) -> str:
    """Encode a coordinate using CLI tolerances, falling back to config."""
    lat_tol = args.lat_tol if args.lat_tol is not None else args.tolerance
    lon_tol = args.lon_tol if args.lon_tol is not None else args.tolerance
    if lat_tol is None:
        lat_tol = config.precision.lat_tol
    if lon_tol is None:
        lon_tol = config.precision.lon_tol

    geohash = encode(args.latitude, args.longitude, lat_tol, lon_tol)
    logger.info(
        "Coordinate encoded",
        latitude=args.latitude,
        longitude=args.longitude,
        lat_tol=lat_tol,
        lon_tol=lon_tol,
        length=len(geohash),
    )
    return str(geohash)


def run_decode(args: argparse.Namespace, config: GridConfig) -> str:
    """Decode a geohash to its bounding box."""
    box = decode(args.geohash)
    logger.info("Geohash decoded", geohash=args.geohash)

    if args.json:
        center_lat, center_lon = box.center
        return json.dumps({
            'geohash': args.geohash,
            'lat_min': box.lat_min,
            'lat_delta': box.lat_delta,
            'lon_min': box.lon_min,
            'lon_delta': box.lon_delta,
            'center': [center_lat, center_lon],
        })
    return " ".join(repr(value) for value in box)


def run_neighbor(args: argparse.Namespace, config: GridConfig) -> str:
    """Step one cell in the requested direction."""
    result = neighbor(args.geohash, args.direction)
    logger.info("Neighbor resolved", geohash=args.geohash, direction=args.direction, result=str(result))
    return str(result)


def run_adjacent(args: argparse.Namespace, config: GridConfig) -> str:
    """List the four cardinal neighbours."""
    cells = adjacent(args.geohash)
    logger.info("Adjacent cells resolved", geohash=args.geohash, count=len(cells))

    if args.json:
        return json.dumps({direction.name: str(cell) for direction, cell in cells.items()})
    return "\n".join(f"{direction.name} {cell}" for direction, cell in cells.items())


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        description='geohash-grid - geohash encoding, decoding and neighbours',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode to ~100 m cells
  geohash-grid encode 53.3498 -6.2603 --tolerance 0.001

  # Decode to a bounding box
  geohash-grid decode gc7x3r4 --json

  # Neighbour to the north
  geohash-grid neighbor gc7x3r4 north
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML config file with default precision and logging settings'
    )

    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default=None,
        help='Override the configured log level'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Render logs as JSON'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode', help='Encode latitude/longitude to a geohash')
    encode_parser.add_argument('latitude', type=float, help='Latitude in decimal degrees')
    encode_parser.add_argument('longitude', type=float, help='Longitude in decimal degrees')
    encode_parser.add_argument(
        '--tolerance',
        type=float,
        default=None,
        help='Maximum cell height and width in degrees'
    )
    encode_parser.add_argument('--lat-tol', type=float, default=None, help='Maximum cell height in degrees')
    encode_parser.add_argument('--lon-tol', type=float, default=None, help='Maximum cell width in degrees')
    encode_parser.set_defaults(handler=run_encode)

    decode_parser = subparsers.add_parser('decode', help='Decode a geohash to its bounding box')
    decode_parser.add_argument('geohash', help='Geohash string')
    decode_parser.add_argument('--json', action='store_true', help='Print the box as JSON')
    decode_parser.set_defaults(handler=run_decode)

    neighbor_parser = subparsers.add_parser('neighbor', help='Adjacent geohash in one direction')
    neighbor_parser.add_argument('geohash', help='Geohash string')
    neighbor_parser.add_argument(
        'direction',
        help=f'Direction name or initial: {[d.name.lower() for d in Direction]}'
    )
    neighbor_parser.set_defaults(handler=run_neighbor)

    adjacent_parser = subparsers.add_parser('adjacent', help='All four cardinal neighbours')
    adjacent_parser.add_argument('geohash', help='Geohash string')
    adjacent_parser.add_argument('--json', action='store_true', help='Print neighbours as JSON')
    adjacent_parser.set_defaults(handler=run_adjacent)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except (FileNotFoundError, ConfigurationError) as e:
        parser.error(str(e))

    configure_logging(
        log_level=args.log_level or config.logging.level,
        log_file=config.logging.log_file,
        json_output=args.json_logs or config.logging.json_output,
    )

    try:
        output = args.handler(args, config)
    except GeohashError as e:
        logger.error("Command failed", command=args.command, error=str(e))
        return 1

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
