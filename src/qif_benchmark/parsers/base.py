"""Abstract base class for all QIF parser adapters."""

from abc import ABC, abstractmethod
from typing import Any

from qif_benchmark.models import DateFormat, LedgerTransaction, ParseResult


class BaseParser(ABC):
    """Abstract base class that all parser adapters must inherit from.

    Defines the narrow capability the benchmark depends on: given QIF text
    and a date format, return a result exposing a sequence of records.

    Example:
        class MyParser(BaseParser):
            @property
            def name(self) -> str:
                return "my-parser"

            def parse(self, text: str, date_format=DateFormat.MONTH_FIRST) -> ParseResult:
                # Implementation here
                pass

            def to_transaction(self, record) -> LedgerTransaction:
                # Implementation here
                pass
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this parser.

        Used in benchmark reports and logging.
        """
        pass

    @abstractmethod
    def parse(
        self,
        text: str,
        date_format: DateFormat | str = DateFormat.MONTH_FIRST,
    ) -> ParseResult:
        """Parse QIF text into transaction records.

        Args:
            text: Full QIF document.
            date_format: Encoding of the dates in the ``D`` field lines.

        Returns:
            ParseResult holding one record per ``^``-terminated block.
        """
        pass

    @abstractmethod
    def to_transaction(self, record: Any) -> LedgerTransaction:
        """Normalize one parser-native record into a LedgerTransaction."""
        pass

    def to_transactions(self, result: ParseResult) -> list[LedgerTransaction]:
        """Normalize every record of a parse result, keeping input order."""
        return [self.to_transaction(record) for record in result.transactions]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
