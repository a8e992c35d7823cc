"""Adapter exposing the quiffen QIF library through BaseParser."""

import datetime as dt
import logging
from decimal import Decimal
from enum import Enum
from typing import Any

from quiffen import Qif

from qif_benchmark.models import DateFormat, LedgerSplit, LedgerTransaction, ParseResult
from qif_benchmark.parsers.base import BaseParser

logger = logging.getLogger(__name__)


def _enum_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _as_date(value: Any) -> dt.date | None:
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def _address_lines(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return value.splitlines()
    return [str(line) for line in value]


def _category_name(record: Any) -> str | None:
    category = getattr(record, "category", None)
    if category is not None:
        return category.name
    to_account = getattr(record, "to_account", None)
    if to_account:
        # Transfers are written as [Account] in the L/S field
        return f"[{to_account}]"
    return None


class QuiffenParser(BaseParser):
    """Parser backed by ``quiffen.Qif.parse_string``.

    quiffen only distinguishes month-first from day-first dates, so the
    DateFormat selector is mapped onto its ``day_first`` flag.

    Attributes:
        name: Parser identifier used in benchmark reports and logging.
    """

    @property
    def name(self) -> str:
        return "quiffen"

    def parse(
        self,
        text: str,
        date_format: DateFormat | str = DateFormat.MONTH_FIRST,
    ) -> ParseResult:
        """Parse a QIF document with quiffen.

        Records from every account and every ``!Type`` section are
        returned in the order quiffen stores them. Errors raised by quiffen
        are not caught.

        Raises:
            ValueError: If ``date_format`` is not supported.
        """
        date_format = DateFormat.from_value(date_format)
        qif = Qif.parse_string(text, day_first=date_format.day_first)

        transactions: list[Any] = []
        account_types: list[str] = []
        for account in qif.accounts.values():
            for account_type, records in account.transactions.items():
                account_types.append(_enum_value(account_type))
                transactions.extend(records)

        logger.debug(
            "quiffen returned %d records from %d account(s)",
            len(transactions), len(qif.accounts),
        )
        return ParseResult(
            transactions=transactions,
            account_types=account_types,
            parser_name=self.name,
        )

    def to_transaction(self, record: Any) -> LedgerTransaction:
        """Convert a quiffen Transaction (or Investment) into a LedgerTransaction.

        Investment records carry no payee, address or splits; those fields
        are left empty.
        """
        cleared = getattr(record, "cleared", None)
        splits = [
            LedgerSplit(
                category=_category_name(split),
                memo=split.memo,
                amount=split.amount or Decimal("0"),
                percent=split.percent,
            )
            for split in getattr(record, "splits", None) or []
        ]
        return LedgerTransaction(
            date=_as_date(record.date),
            amount=record.amount or Decimal("0"),
            payee=getattr(record, "payee", None),
            memo=record.memo,
            category=_category_name(record),
            cleared=_enum_value(cleared) if cleared is not None else None,
            address=_address_lines(getattr(record, "payee_address", None)),
            splits=splits,
        )
