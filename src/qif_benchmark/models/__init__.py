"""Data models for QIF ledgers and parse results.

This module provides Pydantic-validated models for:
- DateFormat: supported date encodings
- LedgerTransaction / LedgerSplit: normalized transaction records
- ParseResult: outcome of a single parser call
"""

from .ledger import DateFormat, LedgerSplit, LedgerTransaction, ParseResult

__all__ = ["DateFormat", "LedgerSplit", "LedgerTransaction", "ParseResult"]
