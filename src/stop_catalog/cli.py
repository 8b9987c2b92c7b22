"""Command line interface for the stop catalog."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from stop_catalog.adapters.config import AppConfig
from stop_catalog.adapters.hsl_api import HslGraphQLClient
from stop_catalog.adapters.persistence import (
    SqlAlchemyRoutePatternStore,
    SqlAlchemyStopStore,
    create_engine_from_config,
    create_schema,
    create_session_factory,
)
from stop_catalog.application import StopRepository
from stop_catalog.domain.exceptions import StopCatalogError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the stop-catalog command."""
    parser = argparse.ArgumentParser(
        prog="stop-catalog",
        description="Local catalog of HSL stops and their route patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the database tables
  stop-catalog init-db

  # Fetch a stop from the HSL API and store it
  stop-catalog create HSL:1040129

  # Show stored stops
  stop-catalog list --ids HSL:1040129 HSL:1040130

  # Link a stored stop to a stored route pattern
  stop-catalog associate HSL:1040129 HSL:1009:0:01

  # Show which stops a route pattern serves
  stop-catalog stops-of HSL:1009:0:01
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("init-db", help="Create the database tables")

    list_parser = subparsers.add_parser("list", help="List stored stops")
    list_parser.add_argument("--ids", nargs="+", metavar="STOP_ID", help="Only these stops")

    get_parser = subparsers.add_parser("get", help="Show a stored stop")
    get_parser.add_argument("stop_id", help="Stop ID")

    create_parser = subparsers.add_parser("create", help="Fetch a stop from upstream and store it")
    create_parser.add_argument("stop_id", help="Stop ID")

    associate_parser = subparsers.add_parser(
        "associate", help="Link a stored stop to a stored route pattern"
    )
    associate_parser.add_argument("stop_id", help="Stop ID")
    associate_parser.add_argument("route_pattern_id", help="Route pattern ID")

    stops_of_parser = subparsers.add_parser(
        "stops-of", help="List the stop IDs linked to a route pattern"
    )
    stops_of_parser.add_argument("route_pattern_id", help="Route pattern ID")

    return parser


def _print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


async def run(args: argparse.Namespace, config: AppConfig) -> None:
    """Execute a parsed command against the configured database and API."""
    engine = create_engine_from_config(config)
    try:
        if args.command == "init-db":
            await create_schema(engine)
            return

        session_factory = create_session_factory(engine)
        stop_store = SqlAlchemyStopStore(session_factory)
        route_pattern_store = SqlAlchemyRoutePatternStore(session_factory)

        if args.command == "stops-of":
            stop_ids = await route_pattern_store.find_stop_ids(args.route_pattern_id)
            _print_json(sorted(stop_ids))
            return

        async with aiohttp.ClientSession() as session:
            client = HslGraphQLClient(
                session,
                url=config.hsl_api_url,
                api_key=config.hsl_api_key,
                timeout_seconds=config.hsl_api_timeout,
                min_delay_seconds=config.hsl_api_min_delay_seconds,
            )
            repository = StopRepository(stop_store, route_pattern_store, client)

            if args.command == "list":
                if args.ids:
                    stops = await repository.list_stops_by_ids(args.ids)
                else:
                    stops = await repository.list_stops()
                _print_json([asdict(stop) for stop in stops])

            elif args.command == "get":
                _print_json(asdict(await repository.get_by_id(args.stop_id)))

            elif args.command == "create":
                _print_json(asdict(await repository.create_by_id(args.stop_id)))

            elif args.command == "associate":
                await repository.associate_to_route_pattern(args.stop_id, args.route_pattern_id)
                print(f"Linked stop {args.stop_id} to route pattern {args.route_pattern_id}")
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the command and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    configure_logging(args.log_level.upper() if args.log_level else config.log_level)

    try:
        asyncio.run(run(args, config))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except StopCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
