"""Benchmark runner: one timed parse of a synthetic ledger."""

import logging
import math
import time
from dataclasses import dataclass, field

from qif_benchmark.benchmark.memory import MemoryStats, profile_parse
from qif_benchmark.benchmark.metrics import ValidationReport, validate_result
from qif_benchmark.benchmark.workload import DEFAULT_ACCOUNT_TYPE, build_workload
from qif_benchmark.models import DateFormat
from qif_benchmark.parsers.base import BaseParser

logger = logging.getLogger(__name__)

PROJECTION_RECORDS = 1_000_000
DEFAULT_COUNT = 10_000
DEFAULT_PREFIX = "PYTHON"


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    count: int = DEFAULT_COUNT
    date_format: DateFormat = DateFormat.MONTH_FIRST
    account_type: str = DEFAULT_ACCOUNT_TYPE
    prefix: str = DEFAULT_PREFIX
    validate: bool = True
    measure_memory: bool = False

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(f"Repetition count must be an integer, got {self.count!r}")
        if self.count <= 0:
            raise ValueError(
                f"Repetition count must be positive, got {self.count}; "
                "the projection divides by it"
            )
        self.date_format = DateFormat.from_value(self.date_format)


@dataclass
class BenchmarkReport:
    """Complete result from a benchmark run."""
    parser_name: str
    prefix: str
    count: int
    parsed_count: int
    elapsed_ms: float
    projected_ms_per_million: int
    account_types: list[str] = field(default_factory=list)
    validation: ValidationReport | None = None
    memory: MemoryStats | None = None

    def format_line(self) -> str:
        """Render the one-line summary printed by the CLI."""
        return (
            f"{self.prefix}: Done processing {self.parsed_count} items. "
            f"Time it would take to process 1M items: "
            f"{self.projected_ms_per_million}ms"
        )


def project_ms_per_million(elapsed_ms: float, count: int) -> int:
    """Scale one elapsed sample linearly to a million records.

    Args:
        elapsed_ms: Measured duration for ``count`` records.
        count: Number of records the sample covered.

    Returns:
        Projected milliseconds, rounded half-to-even.

    Raises:
        ValueError: If count is not positive or elapsed_ms is negative or
            not finite.
    """
    if count <= 0:
        raise ValueError(f"Cannot project from {count} records")
    if not math.isfinite(elapsed_ms) or elapsed_ms < 0:
        raise ValueError(f"Elapsed time must be finite and non-negative, got {elapsed_ms}")
    return round(elapsed_ms * PROJECTION_RECORDS / count)


class BenchmarkRunner:
    """Times a single parser call over a synthetic QIF ledger."""

    def __init__(self, config: BenchmarkConfig | None = None):
        """Initialize the benchmark runner.

        Args:
            config: Benchmark configuration.
        """
        self.config = config or BenchmarkConfig()

    def run(self, parser: BaseParser) -> BenchmarkReport:
        """Run the benchmark on a parser.

        The workload is built before the clock starts and exactly one parse
        call is timed. Parser errors are not caught: a failed parse aborts
        the run.

        Args:
            parser: Parser to benchmark.

        Returns:
            BenchmarkReport with timing, projection and optional checks.
        """
        config = self.config
        workload = build_workload(config.count, config.account_type)
        logger.info(
            "Built %d-record %s workload (%d bytes) for %s",
            config.count, config.account_type, len(workload), parser.name,
        )

        start = time.perf_counter()
        try:
            result = parser.parse(workload, config.date_format)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug("Parse call returned after %.3f ms", elapsed_ms)

        parsed_count = result.num_transactions
        logger.debug(
            "Parsed %d records from section type(s): %s",
            parsed_count, ", ".join(result.account_types) or "none",
        )
        report = BenchmarkReport(
            parser_name=parser.name,
            prefix=config.prefix,
            count=config.count,
            parsed_count=parsed_count,
            elapsed_ms=elapsed_ms,
            projected_ms_per_million=project_ms_per_million(elapsed_ms, config.count),
            account_types=result.account_types,
        )

        if config.validate:
            report.validation = validate_result(
                config.count, result, parser.to_transactions(result)
            )
            for issue in report.validation.issues:
                logger.warning(issue)

        if config.measure_memory:
            report.memory = profile_parse(parser, workload, config.date_format)
            logger.info(
                "Untimed parse peaked at %.1f MB (%.0f bytes/record, %d allocation sites)",
                report.memory.peak_mb,
                report.memory.peak_bytes_per_record,
                report.memory.allocation_sites,
            )

        return report
