"""Throughput benchmark for QIF ledger parsers."""

__version__ = "0.1.0"
