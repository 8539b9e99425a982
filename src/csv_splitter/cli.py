"""Command-line interface for the CSV splitter."""

import argparse
import logging
import sys

from csv_splitter.config import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_MAX_RECORDS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_PREFIX,
    ConfigError,
    SplitConfig,
    parse_delimiter,
)
from csv_splitter.runner import describe_error, main_split
from csv_splitter.split import SplitError

EPILOG = """\
examples:
  csv-splitter --input data.csv --limit 5000
  csv-splitter -i data.csv -o chunk --dir ./output -l 1000 -v
"""


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csv-splitter",
        description="Split large CSV files into smaller chunks while preserving headers.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--input",
        "-i",
        default="",
        help="Path to the input CSV file (required)",
    )

    parser.add_argument(
        "--out",
        "-o",
        default=DEFAULT_OUTPUT_PREFIX,
        help=f"Prefix for the output files (default: {DEFAULT_OUTPUT_PREFIX})",
    )

    parser.add_argument(
        "--dir",
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory for split files, created if missing (default: .)",
    )

    parser.add_argument(
        "--limit",
        "-l",
        type=int,
        default=DEFAULT_MAX_RECORDS,
        help=f"Maximum number of records per output file (default: {DEFAULT_MAX_RECORDS})",
    )

    parser.add_argument(
        "--buffer",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        help=f"Buffer size for file I/O in bytes (default: {DEFAULT_BUFFER_SIZE})",
    )

    parser.add_argument(
        "--skip-empty",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Skip records whose fields are all empty (default: on)",
    )

    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help="CSV delimiter character; anything but one character means ',' (default: ,)",
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Text encoding for input and output files (default: {DEFAULT_ENCODING})",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print progress information",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: WARNING, or INFO with --verbose)",
    )

    return parser


def build_config(args: argparse.Namespace) -> SplitConfig:
    """Turn parsed arguments into a SplitConfig."""
    return SplitConfig(
        input_path=args.input,
        output_prefix=args.out,
        output_dir=args.dir,
        max_records=args.limit,
        buffer_size=args.buffer,
        skip_empty=args.skip_empty,
        delimiter=parse_delimiter(args.delimiter),
        verbose=args.verbose,
        encoding=args.encoding,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # --log-level wins over --verbose.
    if args.log_level is not None:
        log_level = getattr(logging, args.log_level)
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    configure_logging(log_level)

    config = build_config(args)

    try:
        main_split(config)
    except ConfigError as err:
        print(f"Error: {err}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    except SplitError as err:
        print(f"Error: {describe_error(err)}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
