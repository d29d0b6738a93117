"""Command-line entry point - parse report PDFs and export hours as CSV."""

import argparse
import logging
import sys
from pathlib import Path

from toggl_reports.batch import BatchResult, process_batch
from toggl_reports.config import settings
from toggl_reports.csv_export import save_csv, to_csv
from toggl_reports.formatting import format_decimal_hours, format_duration

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for a precision of 0 or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="toggl-reports",
        description="Extract total hours from time-tracking report PDFs and export them as CSV.",
        epilog="Example: toggl-reports reports/2023 --csv \"Toggl Reports.csv\"",
    )

    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Report PDFs and/or directories containing them, in processing order",
    )

    parser.add_argument(
        "--csv",
        dest="csv_output",
        type=str,
        default=None,
        help="Write CSV to this file ('-' for stdout)",
    )

    parser.add_argument(
        "--combine",
        action=argparse.BooleanOptionalAction,
        default=settings.combine_by_month,
        help="Combine consecutive periods of the same month",
    )

    parser.add_argument(
        "--decimal-places",
        type=_non_negative_int,
        default=settings.decimal_places,
        help="Fixed precision for decimal hours (default: shortest representation)",
    )

    parser.add_argument(
        "--separator",
        type=str,
        default=settings.csv_separator,
        help=f"CSV field separator (default: {settings.csv_separator!r})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the command-line tool."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.getLogger("toggl_reports").setLevel(level)


def print_summary(result: BatchResult, decimal_places: int | None = None) -> None:
    """Print one line per reported row plus the batch total."""
    for aggregate in result.aggregates:
        suffix = f" ({len(aggregate.records)} reports)" if aggregate.is_combined else ""
        print(f"{aggregate}{suffix}")

    total_hours = result.total_seconds / 3600.0
    print(
        f"Total: {format_duration(result.total_seconds)} "
        f"({format_decimal_hours(total_hours, decimal_places)} h) "
        f"from {len(result.records)} of {result.documents} documents"
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    result = process_batch(args.paths, combine=args.combine)

    for error in result.errors:
        print(error, file=sys.stderr)

    if not result.aggregates:
        print("No reports parsed", file=sys.stderr)
        return 1

    csv_output = args.csv_output or settings.csv_output
    if str(csv_output) != "-":
        print_summary(result, args.decimal_places)

    if csv_output:
        csv_text = to_csv(
            result.aggregates,
            separator=args.separator,
            decimal_places=args.decimal_places,
        )
        if str(csv_output) == "-":
            sys.stdout.write(csv_text)
        else:
            output_path = Path(csv_output)
            if output_path.is_dir():
                output_path = output_path / settings.default_csv_name
            save_csv(csv_text, output_path)
            print(f"CSV saved to: {output_path}")

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
