"""Benchmark harness for QIF parser throughput."""

from .runner import BenchmarkConfig, BenchmarkReport, BenchmarkRunner, project_ms_per_million
from .workload import TRANSACTION_TEMPLATE, build_workload, count_records
from .metrics import ValidationReport, check_record_count, check_split_consistency
from .memory import MemoryStats, profile_parse

__all__ = [
    "BenchmarkConfig",
    "BenchmarkReport",
    "BenchmarkRunner",
    "project_ms_per_million",
    "TRANSACTION_TEMPLATE",
    "build_workload",
    "count_records",
    "ValidationReport",
    "check_record_count",
    "check_split_consistency",
    "MemoryStats",
    "profile_parse",
]
