"""Command line interface: show the next connections home."""

import argparse
import asyncio
import logging
import sys
from datetime import datetime

from pydantic import ValidationError

from mvg_home import __version__
from mvg_home.adapters.cache import FileConnectionCacheStore
from mvg_home.adapters.config import AppConfig, ConnectionConfigurationLoader
from mvg_home.adapters.display import ConnectionFormatter
from mvg_home.adapters.mvg_api import (
    MvgConnectionRepository,
    MvgHttpClient,
    MvgStationRepository,
    create_session,
)
from mvg_home.application.services import CommuteService
from mvg_home.domain.errors import MvgHomeError

logger = logging.getLogger(__name__)


def parse_start_time(value: str) -> datetime:
    """Parse an ISO 8601 start time; times without offset are local time."""
    try:
        start_time = datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid start time {value!r}: {e}") from e
    return start_time.astimezone()


def positive_int(value: str) -> int:
    """Parse a positive number of connections."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid number {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"number must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mvg-home",
        description="MVG connections for the way home.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the next 10 connections
  mvg-home

  # Show 3 connections, ignoring cached connections
  mvg-home -n 3 --fresh

  # Plan for tomorrow morning
  mvg-home --start-time 2026-10-18T08:00
        """,
    )
    parser.add_argument(
        "--config", metavar="FILE", help="Use a different configuration file"
    )
    parser.add_argument(
        "-n",
        "--connections",
        type=positive_int,
        default=10,
        metavar="N",
        help="Number of connections to show (default: 10)",
    )
    parser.add_argument("--fresh", action="store_true", help="Get fresh connections")
    parser.add_argument(
        "--dump-cache", action="store_true", help="Show contents of the cache and exit"
    )
    parser.add_argument(
        "-s",
        "--start-time",
        type=parse_start_time,
        default=None,
        metavar="TIME",
        help="Start at the given time (ISO 8601) instead of now",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_app_config(args: argparse.Namespace) -> AppConfig:
    """Load app config, letting ``--config`` take precedence over the environment."""
    if args.config:
        return AppConfig(config_file=args.config)
    return AppConfig()


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def show_connections(args: argparse.Namespace, config: AppConfig) -> list[str]:
    """Run the connection pipeline and render the first connections.

    Returns:
        One line per connection, earliest leave time first.
    """
    desired_connections = ConnectionConfigurationLoader.load(config)
    logger.info(f"Loaded {len(desired_connections)} desired connection(s)")
    now = args.start_time or datetime.now().astimezone()

    async with create_session(config) as session:
        http_client = MvgHttpClient(session, config.mvg_api_base_url)
        service = CommuteService(
            station_repository=MvgStationRepository(http_client),
            connection_repository=MvgConnectionRepository(http_client),
            cache_store=FileConnectionCacheStore(config.cache_path),
        )
        connections = await service.next_connections(
            desired_connections,
            now,
            fresh=args.fresh,
            dump_cache=args.dump_cache,
        )

    formatter = ConnectionFormatter(config)
    return [
        formatter.format_connection(scheduled, now)
        for scheduled in connections[: args.connections]
    ]


async def main(argv: list[str] | None = None) -> None:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_app_config(args)
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(config)

    try:
        lines = await show_connections(args, config)
    except MvgHomeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in lines:
        print(line)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
