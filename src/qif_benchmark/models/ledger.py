"""Data models for QIF ledger records and parse results.

This module provides Pydantic models for:
- DateFormat: date encodings a QIF parser can be asked to read
- LedgerSplit / LedgerTransaction: a parser-independent view of one record
- ParseResult: what a parser hands back to the benchmark harness

The harness only reads ``ParseResult.num_transactions`` on the timed path.
The ledger models are built afterwards, when a run is validated.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class DateFormat(str, Enum):
    """Date encodings used in the ``D`` field lines of a QIF file."""

    MONTH_FIRST = "MM/DD/YYYY"
    DAY_FIRST = "DD/MM/YYYY"

    @property
    def day_first(self) -> bool:
        return self is DateFormat.DAY_FIRST

    @classmethod
    def from_value(cls, value: "str | DateFormat") -> "DateFormat":
        """Resolve a selector string such as ``"MM/DD/YYYY"``.

        Raises:
            ValueError: If the selector is not a supported format.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError):
            supported = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unsupported date format {value!r} (supported: {supported})"
            ) from None


class LedgerSplit(BaseModel):
    """A portion of a transaction allocated to one category.

    Attributes:
        category: Category (or transfer account) of the split.
        memo: Split memo; QIF files often store the percentage here.
        amount: Amount allocated to this split.
        percent: Percentage of the total, when the file provides one.
    """

    category: str | None = None
    memo: str | None = None
    amount: Decimal = Field(default=Decimal("0"))
    percent: Decimal | None = None


class LedgerTransaction(BaseModel):
    """A single ``^``-terminated QIF record.

    Example:
        >>> txn = LedgerTransaction(amount="-100.00", payee="Amazon.com")
        >>> txn.split_total
        Decimal('0')
    """

    date: dt.date | None = None
    amount: Decimal = Field(default=Decimal("0"))
    payee: str | None = None
    memo: str | None = None
    category: str | None = None
    cleared: str | None = None
    address: list[str] = Field(default_factory=list)
    splits: list[LedgerSplit] = Field(default_factory=list)

    model_config = {"str_strip_whitespace": True}

    @property
    def has_splits(self) -> bool:
        return len(self.splits) > 0

    @property
    def split_total(self) -> Decimal:
        """Sum of all split amounts."""
        return sum((split.amount for split in self.splits), Decimal("0"))


class ParseResult(BaseModel):
    """Result of one parser invocation.

    ``transactions`` holds the parser's own record objects, in input order.
    They are left untouched so that building the result costs no more than
    the parse itself; use ``BaseParser.to_transaction`` to normalize them.

    Attributes:
        transactions: Parser-native transaction records.
        account_types: Account type of every section seen (e.g. ``Bank``).
        parser_name: Name of the parser that produced this result.
    """

    transactions: list[Any] = Field(default_factory=list)
    account_types: list[str] = Field(default_factory=list)
    parser_name: str | None = Field(default=None)

    model_config = {"arbitrary_types_allowed": True}

    @field_validator("account_types")
    @classmethod
    def dedupe_account_types(cls, v: list[str]) -> list[str]:
        """Keep the first occurrence of each account type."""
        return list(dict.fromkeys(v))

    @property
    def num_transactions(self) -> int:
        """Return the number of transaction records produced."""
        return len(self.transactions)
