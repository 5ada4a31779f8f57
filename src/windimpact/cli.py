"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from windimpact.config import get_api_key, get_data_dir, get_units, list_paths, load_path
from windimpact.digest.text import format_analysis
from windimpact.errors import WindImpactError
from windimpact.fetch.openweathermap import OpenWeatherMapClient
from windimpact.models import Coordinate, CyclingPath, WindObservation
from windimpact.pipeline import analyze_path, fetch_weather_impact_analysis
from windimpact.storage.results import save_analysis

logger = logging.getLogger(__name__)


def _parse_coordinate(text: str) -> Coordinate:
    """Parse 'LAT,LON' into a Coordinate."""
    try:
        lat_s, lon_s = text.split(",")
        return Coordinate(lat=float(lat_s), lon=float(lon_s))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid coordinate '{text}' (expected LAT,LON)") from exc


def _build_path(args: argparse.Namespace) -> CyclingPath:
    """Build CyclingPath from CLI arguments (inline coordinates or --path)."""
    if args.path:
        return load_path(args.path)

    if len(args.coordinates) < 2:
        print("Error: At least 2 coordinates required (or use --path).")
        sys.exit(1)

    return CyclingPath(name="Inline path", coordinates=args.coordinates)


def _manual_observation(args: argparse.Namespace) -> WindObservation | None:
    """Observation from --wind-dir/--wind-speed/--temperature, if all were given."""
    values = (args.wind_dir, args.wind_speed, args.temperature)
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        print("Error: --wind-dir, --wind-speed and --temperature must be given together.")
        sys.exit(1)
    try:
        return WindObservation(
            direction_deg=args.wind_dir % 360, speed=args.wind_speed, temperature=args.temperature
        )
    except ValidationError as exc:
        print(f"Error: Invalid wind observation: {exc.errors()[0]['msg']}")
        sys.exit(1)


def run_analyze(args: argparse.Namespace) -> None:
    """Analyze a path and print the report."""
    path = _build_path(args)
    observation = _manual_observation(args)

    try:
        if observation is not None:
            analysis = analyze_path(path, observation)
        else:
            api_key = get_api_key()
            if not api_key:
                print("Error: OPENWEATHERMAP_API_KEY is required unless the wind is given manually.")
                sys.exit(1)
            client = OpenWeatherMapClient(api_key, units=get_units())
            analysis = fetch_weather_impact_analysis(path, client)
    except WindImpactError as exc:
        logger.debug("Analysis failed", exc_info=True)
        print(f"Error: {exc}")
        sys.exit(1)

    output_paths: list[str] = []
    if args.save:
        out_path = save_analysis(analysis, get_data_dir())
        output_paths.append(str(out_path))

    print(format_analysis(analysis, output_paths=output_paths))


def main() -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="windimpact",
        description="Headwind, tailwind and crosswind impact along a cycling path",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Compute wind impact for a path"
    )
    analyze_parser.add_argument(
        "coordinates", nargs="*", default=[], metavar="LAT,LON", type=_parse_coordinate,
        help="Inline path coordinates (min 2; put '--' first if a latitude is negative)",
    )
    analyze_parser.add_argument(
        "--path", help="Named path from paths.yaml (alternative to inline coordinates)"
    )
    analyze_parser.add_argument(
        "--wind-dir", type=int, help="Wind direction in degrees (skips the fetch)"
    )
    analyze_parser.add_argument("--wind-speed", type=float, help="Wind speed")
    analyze_parser.add_argument("--temperature", type=float, help="Air temperature")
    analyze_parser.add_argument(
        "--save", action="store_true", help="Save the analysis as JSON"
    )

    subparsers.add_parser("paths", help="List available named paths")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "paths":
        for name in list_paths():
            print(f"  {name}")
    elif args.command == "analyze":
        if not args.coordinates and not args.path:
            print("Error: Provide coordinates or --path NAME.")
            sys.exit(1)
        run_analyze(args)
