"""
Command line entry point.

Prompts for the departure station, arrival station and criterion, runs one
lookup and prints the result. Every failure is reported on stdout.
"""

import argparse
import sys
from pathlib import Path
from typing import IO, Optional, Sequence

import structlog

from .config.loader import ConfigLoadError, ConfigLoader
from .config.validation import ConfigValidator, LOG_LEVELS, OUTPUT_FORMATS
from .data.models import SelectionCriterion
from .delivery.console import ConsoleDelivery
from .engine import TrainFinder
from .errors import InputReadError, QueryValidationError, SystemFailureError
from .logging.config import configure_logging

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="train-finder",
        description="Find the best scheduled trains between two stations",
    )
    parser.add_argument("--data-file", help="Schedule JSON file (default: data.json)")
    parser.add_argument("--config-dir", help="Directory holding finder.yaml")
    parser.add_argument("--format", choices=sorted(OUTPUT_FORMATS), help="Output format")
    parser.add_argument("--limit", type=int, help="Maximum number of trains to print")
    parser.add_argument("--log-level", type=str.upper, choices=sorted(LOG_LEVELS), help="Diagnostic log level")
    parser.add_argument("--departure", help="Departure station id; prompted for when omitted")
    parser.add_argument("--arrival", help="Arrival station id; prompted for when omitted")
    parser.add_argument(
        "--criteria",
        help=f"One of {', '.join(sorted(SelectionCriterion.values()))}; prompted for when omitted",
    )
    return parser


def prompt_value(
    parameter: str,
    input_stream: Optional[IO[str]] = None,
    output_stream: Optional[IO[str]] = None,
) -> str:
    """
    Ask for one value and read a line from the console.

    Raises:
        InputReadError: If the input is closed or cannot be read
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    print(f"Enter {parameter}: ", end="", file=output_stream, flush=True)

    try:
        line = input_stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"readInput for {parameter} failed: {e}", parameter=parameter) from e

    if not line:
        raise InputReadError(f"readInput for {parameter} failed: end of input", parameter=parameter)

    return line.rstrip("\r\n")


def _cli_overrides(args: argparse.Namespace) -> dict:
    return {
        "lookup": {"data_file": args.data_file, "max_results": args.limit},
        "output": {"format": args.format},
        "logging": {"level": args.log_level},
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one lookup and return the process exit code."""
    args = build_parser().parse_args(argv)

    loader = ConfigLoader.create(Path(args.config_dir) if args.config_dir else None)
    try:
        config = loader.merge_config(_cli_overrides(args))
    except ConfigLoadError as e:
        print(f"invalid configuration: {e}")
        return EXIT_FAILURE

    config_errors = ConfigValidator.validate_config(config)
    if config_errors:
        for err in config_errors:
            print(f"invalid configuration: {err.field}: {err.message} (got: {err.value!r})")
        return EXIT_FAILURE

    configure_logging(
        level=config["logging"]["level"],
        format_json=config["logging"]["format_json"],
    )

    finder = TrainFinder(config)
    delivery = ConsoleDelivery(config["output"]["format"])

    try:
        departure = args.departure if args.departure is not None else prompt_value("departureStation")
        arrival = args.arrival if args.arrival is not None else prompt_value("arrivalStation")
        criteria = args.criteria if args.criteria is not None else prompt_value("criteria")

        trains = finder.find_trains(departure, arrival, criteria)
        delivery.deliver(trains)
    except QueryValidationError as e:
        logger.info("Lookup rejected", field=e.field, value=e.value, error=str(e))
        print(f"\nfind trains failed: {e}")
        return EXIT_INVALID_INPUT
    except SystemFailureError as e:
        logger.error("Lookup failed", error_type=type(e).__name__, error=str(e))
        print(f"\nfind trains failed: {e}")
        return EXIT_FAILURE

    return EXIT_OK
