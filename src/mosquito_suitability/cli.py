"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import sys
from functools import partial
from pathlib import Path

import requests
from pydantic import ValidationError

from mosquito_suitability import __version__
from mosquito_suitability.config import get_settings
from mosquito_suitability.reaction_norm import evaluate, thermal_optimum
from mosquito_suitability.reference import load_species


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mosquito-suitability",
        description="Compare mosquito thermal suitability with Briere reaction norms",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("species", help="List species parameter sets")

    # 'evaluate' command - development rate at given temperatures
    eval_parser = subparsers.add_parser(
        "evaluate", help="Print development rates for temperatures (deg C)"
    )
    eval_parser.add_argument("temperatures", type=float, nargs="+", help="Temperatures in deg C")
    eval_parser.add_argument(
        "--species",
        type=str,
        default=None,
        help="Species key (default: all species)",
    )

    year_help = "Climate year (default: climate_year from settings)"
    fetch_parser = subparsers.add_parser("fetch", help="Fetch the monthly temperature grid")
    fetch_parser.add_argument("--year", type=int, default=None, help=year_help)

    build_parser = subparsers.add_parser("build", help="Build the report from cached data")
    build_parser.add_argument("--year", type=int, default=None, help=year_help)

    refresh_parser = subparsers.add_parser("refresh", help="Fetch data and build report")
    refresh_parser.add_argument("--year", type=int, default=None, help=year_help)

    # 'serve' command - serve built report locally
    serve_parser = subparsers.add_parser("serve", help="Serve report locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    bbox = settings.bbox
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data dir: {settings.data_dir}")
    print(f"Region: {bbox.south}..{bbox.north} N, {bbox.west}..{bbox.east} E")
    print(f"Resolution: {settings.resolution} deg")
    print(f"Climate year: {settings.climate_year}")
    return 0


def cmd_species(_args: argparse.Namespace) -> int:
    """Handle the 'species' command."""
    settings = get_settings()
    try:
        species = load_species(settings.species_file)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        print(f"Error: could not load species: {e}", file=sys.stderr)
        return 1

    for s in species:
        p = s.parameters
        print(
            f"{s.key}: {s.name} (tmin={p.tmin:g}, tmax={p.tmax:g}, scale={p.scale:.3g}, "
            f"t_opt={thermal_optimum(p):.1f})"
        )
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Handle the 'evaluate' command."""
    settings = get_settings()
    try:
        species = load_species(settings.species_file)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        print(f"Error: could not load species: {e}", file=sys.stderr)
        return 1

    if args.species is not None:
        species = [s for s in species if s.key == args.species]
        if not species:
            print(f"Error: unknown species '{args.species}'", file=sys.stderr)
            return 1

    for s in species:
        for temp in args.temperatures:
            rate = evaluate(temp, s.parameters)
            print(f"{s.key}\t{temp:g}\t{rate:.4f}")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    from mosquito_suitability.flows.fetch import fetch_all

    try:
        result = fetch_all(year=args.year)
    except (ValidationError, ValueError, requests.RequestException) as e:
        print(f"Error: could not fetch climate grid: {e}", file=sys.stderr)
        return 1

    print(f"Fetched {result['cells']} cells x {result['months']} months for {result['year']}.")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    from mosquito_suitability.flows.build import build_all

    try:
        result = build_all(year=args.year)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Report: {result['output']}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build report."""
    settings = get_settings()
    if settings.grid_file is None:
        print(f"Fetching climate grid ({settings.resolution} deg)...")
        status = cmd_fetch(args)
        if status != 0:
            return status

    print("Building report...")
    status = cmd_build(args)
    if status == 0:
        print("Done.")
    return status


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built report locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.data_dir) / "derived" / "site"

    if not site_dir.exists():
        print("No site directory found. Run 'mosquito-suitability refresh' first.", file=sys.stderr)
        return 1

    handler = partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving report on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    if args.debug:
        print(f"Debug mode enabled. Settings: {get_settings()}")

    commands = {
        "info": cmd_info,
        "species": cmd_species,
        "evaluate": cmd_evaluate,
        "fetch": cmd_fetch,
        "build": cmd_build,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
