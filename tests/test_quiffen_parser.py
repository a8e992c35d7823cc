"""Tests for the quiffen parser adapter."""

import datetime as dt
from decimal import Decimal

import pytest

from qif_benchmark.benchmark.workload import build_workload
from qif_benchmark.models import DateFormat, LedgerTransaction, ParseResult
from qif_benchmark.parsers import QuiffenParser


@pytest.fixture
def parser():
    """Create a parser instance for tests."""
    return QuiffenParser()


class TestQuiffenParserBasics:
    """Basic functionality tests."""

    def test_parser_name(self, parser):
        """Test parser has correct name."""
        assert parser.name == "quiffen"

    def test_repr(self, parser):
        """Test repr includes the parser name."""
        assert repr(parser) == "QuiffenParser(name='quiffen')"

    def test_returns_parse_result(self, parser):
        """Test parse returns ParseResult."""
        result = parser.parse(build_workload(1))
        assert isinstance(result, ParseResult)
        assert result.parser_name == "quiffen"

    def test_unsupported_date_format(self, parser):
        """Test an unknown date selector raises before parsing."""
        with pytest.raises(ValueError, match="Unsupported date format"):
            parser.parse(build_workload(1), "YYYY.MM.DD")


class TestRecordCounts:
    """Tests for the one-record-per-block invariant."""

    @pytest.mark.parametrize("count", [1, 2, 25, 200])
    def test_count_matches_blocks(self, parser, count):
        """Test the parser reports exactly N records."""
        result = parser.parse(build_workload(count), DateFormat.MONTH_FIRST)
        assert result.num_transactions == count

    def test_default_benchmark_size(self, parser):
        """Test the default 10000-block ledger parses from a string."""
        result = parser.parse(build_workload(10_000), DateFormat.MONTH_FIRST)
        assert result.num_transactions == 10_000

    def test_header_only(self, parser):
        """Test an empty ledger parses to zero records."""
        result = parser.parse(build_workload(0), DateFormat.MONTH_FIRST)
        assert result.num_transactions == 0

    def test_deterministic(self, parser):
        """Test repeated parses agree on the count."""
        text = build_workload(30)
        assert parser.parse(text).num_transactions == parser.parse(text).num_transactions


class TestSingleRecord:
    """Tests for the content of one parsed template block."""

    @pytest.fixture
    def transaction(self, parser) -> LedgerTransaction:
        result = parser.parse(build_workload(1), "MM/DD/YYYY")
        return parser.to_transaction(result.transactions[0])

    def test_amount(self, transaction):
        """Test the total amount."""
        assert transaction.amount == Decimal("-100.00")

    def test_date_month_first(self, transaction):
        """Test the date is read month-first."""
        assert transaction.date == dt.date(2020, 2, 10)

    def test_payee_and_memo(self, transaction):
        """Test payee and memo fields."""
        assert transaction.payee == "Amazon.com"
        assert transaction.memo == "test order 1"

    def test_splits(self, transaction):
        """Test the four splits and their amounts."""
        assert [s.amount for s in transaction.splits] == [
            Decimal("-50.00"),
            Decimal("-25.00"),
            Decimal("-10.00"),
            Decimal("-15.00"),
        ]

    def test_split_total_matches_amount(self, transaction):
        """Test splits add up to the transaction amount."""
        assert transaction.split_total == transaction.amount


class TestDateFormats:
    """Tests for the date format selector."""

    def test_day_first(self, parser):
        """Test the same literal read day-first."""
        result = parser.parse(build_workload(1), DateFormat.DAY_FIRST)
        transaction = parser.to_transaction(result.transactions[0])
        assert transaction.date == dt.date(2020, 10, 2)

    def test_to_transactions_keeps_order(self, parser):
        """Test bulk normalization covers every record."""
        result = parser.parse(build_workload(3))
        transactions = parser.to_transactions(result)
        assert len(transactions) == 3
        assert all(t.amount == Decimal("-100.00") for t in transactions)
