"""Command-line front end for the shuttle transfer bot."""

import argparse
import logging
import sys
from datetime import datetime

from transfer_bot.adapters.config import AppConfig, ScheduleLoader
from transfer_bot.adapters.formatters import TripTextFormatter
from transfer_bot.adapters.schedule_store import ScheduleStore
from transfer_bot.application.services import ShuttleInfoService
from transfer_bot.domain.errors import ScheduleParseError

logger = logging.getLogger(__name__)

MOMENT_FORMAT = "%d.%m.%Y %H:%M"
DIRECTIONS = ("to-office", "from-office")


def parse_moment(value: str, config: AppConfig) -> datetime:
    """Parse a --at value in the configured timezone."""
    try:
        moment = datetime.strptime(value, MOMENT_FORMAT)
    except ValueError as e:
        raise ValueError(f"Invalid --at value '{value}', expected DD.MM.YYYY HH:MM") from e
    return moment.replace(tzinfo=config.zone)


def build_service(config: AppConfig) -> ShuttleInfoService:
    """Load the schedule and wire the service."""
    store = ScheduleStore(ScheduleLoader.load(config))
    formatter = TripTextFormatter(config.monetization_message)
    return ShuttleInfoService(store, formatter, wait_horizon=config.wait_horizon)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shuttle timetable between the office and Геологическая",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Nearest shuttles home right now
  transfer-bot next from-office

  # Nearest shuttles to work at a given moment
  transfer-bot next to-office --at "12.08.2016 07:00"

  # Whole timetable from the metro
  transfer-bot schedule to-office

  # Check a schedule file before deploying it
  transfer-bot validate --schedule schedule.yaml
        """,
    )
    parser.add_argument("--schedule", help="Path to the schedule YAML (overrides config)")
    parser.add_argument("--config", help="Path to a TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    next_parser = subparsers.add_parser("next", help="Show the nearest shuttles")
    next_parser.add_argument("direction", choices=DIRECTIONS)
    next_parser.add_argument("--at", help="Moment to ask about, DD.MM.YYYY HH:MM (default: now)")

    schedule_parser = subparsers.add_parser("schedule", help="Show the whole timetable")
    schedule_parser.add_argument("direction", choices=DIRECTIONS)

    subparsers.add_parser("validate", help="Parse the schedule file and report its size")

    return parser


def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute a parsed command and return the process exit code."""
    if args.command == "validate":
        schedule = ScheduleLoader.load(config)
        print(
            f"Schedule OK: to office {len(schedule.work_day_route_to_office)} workday / "
            f"{len(schedule.holiday_route_to_office)} holiday, "
            f"from office {len(schedule.work_day_route_from_office)} workday / "
            f"{len(schedule.holiday_route_from_office)} holiday"
        )
        return 0

    service = build_service(config)

    if args.command == "next":
        now = parse_moment(args.at, config) if args.at else datetime.now(config.zone)
        logger.debug(f"Answering {args.direction} query for {now:%d.%m.%Y %H:%M}")
        if args.direction == "to-office":
            print(service.best_trip_to_office_text(now))
        else:
            print(service.best_trip_from_office_text(now))
        return 0

    if args.direction == "to-office":
        texts = service.full_to_office_texts()
    else:
        texts = service.full_from_office_texts()
    print("\n".join(texts), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
        if args.config:
            config.config_file = args.config
        config.load_toml_overrides()
        if args.schedule:
            config.schedule_file = args.schedule
    except (ValueError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        return run(args, config)
    except ScheduleParseError as e:
        print(f"Invalid schedule: {e}", file=sys.stderr)
        return 1
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
