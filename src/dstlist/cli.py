"""CLI entrypoint for the dstlist client."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dstlist.config.loader import (
    DEFAULT_CONFIG_PATH,
    build_query_options,
    build_service_settings,
    load_config,
    resolve_credentials,
)
from dstlist.errors import DstListError, InvalidArgument
from dstlist.output.dst_report import render_json, render_text
from dstlist.services.dst_service import DSTService
from dstlist.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENT = 2


def _load_optional_config(path: Optional[Path]) -> dict:
    """Load the config file; a missing default file is not an error."""
    try:
        return load_config(path)
    except FileNotFoundError:
        if path is not None:
            raise
        logger.debug(f"No {DEFAULT_CONFIG_PATH} found, using defaults and environment")
        return {}


def build_service(args: argparse.Namespace) -> DSTService:
    config = _load_optional_config(args.config)
    access_key, secret_key = resolve_credentials(config)
    service = DSTService(
        access_key,
        secret_key,
        settings=build_service_settings(config),
        options=build_query_options(config),
    )

    if args.time_changes:
        service.include_time_changes = True
    if args.no_places:
        service.include_places_for_every_country = False
    if args.all_countries:
        service.include_only_dst_countries = False
    return service


def cmd_list(args: argparse.Namespace) -> int:
    """Fetch and print DST entries."""
    try:
        service = build_service(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        if args.country is not None and args.year is not None:
            records = service.get_daylight_saving_time_by_country_and_year(args.country, args.year)
        elif args.country is not None:
            records = service.get_daylight_saving_time_by_country(args.country)
        elif args.year is not None:
            records = service.get_daylight_saving_time_by_year(args.year)
        else:
            records = service.get_daylight_saving_time()
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except DstListError as e:
        logger.error(f"DST lookup failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.format == "json":
        print(render_json(records))
    else:
        print(render_text(records, show_places=service.include_places_for_every_country))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dstlist", description="Daylight saving time lookups")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List DST entries by country and/or year")
    list_parser.add_argument("--country", help="ISO 3166-1 alpha-2 country code")
    list_parser.add_argument("--year", type=int, help="Year to query (defaults to the current year)")
    list_parser.add_argument("--time-changes", action="store_true", help="Include time changes per entry")
    list_parser.add_argument("--no-places", action="store_true", help="Do not list places per entry")
    list_parser.add_argument(
        "--all-countries",
        action="store_true",
        help="Include countries that do not observe DST",
    )
    list_parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    list_parser.add_argument("--config", type=Path, default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    list_parser.set_defaults(func=cmd_list)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
