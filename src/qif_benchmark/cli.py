"""Command-line entry point for the QIF parser benchmark.

Usage:
    qif-benchmark
    qif-benchmark --count 50000
    qif-benchmark --memory --verbose
"""

import argparse
import logging
import sys

from qif_benchmark.benchmark import BenchmarkConfig, BenchmarkRunner
from qif_benchmark.benchmark.runner import DEFAULT_COUNT, DEFAULT_PREFIX
from qif_benchmark.benchmark.workload import DEFAULT_ACCOUNT_TYPE
from qif_benchmark.models import DateFormat
from qif_benchmark.parsers import QuiffenParser

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="qif-benchmark",
        description="Time one parse of a synthetic QIF ledger and project the cost of 1M records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    arg_parser.add_argument(
        "--count", "-n",
        type=int,
        default=DEFAULT_COUNT,
        help=f"Number of transaction blocks in the ledger (default: {DEFAULT_COUNT})"
    )
    arg_parser.add_argument(
        "--date-format", "-d",
        choices=[f.value for f in DateFormat],
        default=DateFormat.MONTH_FIRST.value,
        help="Date encoding passed to the parser (default: %(default)s)"
    )
    arg_parser.add_argument(
        "--account-type",
        default=DEFAULT_ACCOUNT_TYPE,
        help="Account type written in the !Type header (default: %(default)s)"
    )
    arg_parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help="Label printed at the start of the result line (default: %(default)s)"
    )
    arg_parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        help="Skip the record-count and split checks after timing"
    )
    arg_parser.add_argument(
        "--memory", "-m",
        action="store_true",
        help="Profile peak memory with an extra, untimed parse"
    )
    arg_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )
    return arg_parser


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout carries only the result line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = BenchmarkConfig(
            count=args.count,
            date_format=args.date_format,
            account_type=args.account_type,
            prefix=args.prefix,
            validate=args.validate,
            measure_memory=args.memory,
        )
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    parser = QuiffenParser()
    logger.debug("Benchmarking %r with %s", parser, config)

    report = BenchmarkRunner(config).run(parser)
    print(report.format_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
