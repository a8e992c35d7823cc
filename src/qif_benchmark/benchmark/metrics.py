"""Correctness checks run after a timed parse."""

from dataclasses import dataclass, field

from qif_benchmark.models import LedgerTransaction, ParseResult


@dataclass
class ValidationReport:
    """Outcome of the post-run sanity checks."""
    expected_records: int
    parsed_records: int
    checked_transactions: int = 0
    issues: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def check_record_count(expected: int, result: ParseResult) -> str | None:
    """Compare the parsed record count with the number of blocks fed in.

    Returns:
        A description of the mismatch, or None when the counts agree.
    """
    parsed = result.num_transactions
    if parsed == expected:
        return None
    verb = "dropped or merged" if parsed < expected else "split or duplicated"
    return (
        f"Parser {result.parser_name or '?'} returned {parsed} records for "
        f"{expected} blocks ({verb} {abs(expected - parsed)})"
    )


def check_split_consistency(transaction: LedgerTransaction, index: int = 0) -> str | None:
    """Check that a split transaction's parts add up to its amount.

    Transactions without splits always pass.
    """
    if not transaction.has_splits:
        return None
    total = transaction.split_total
    if total == transaction.amount:
        return None
    return (
        f"Transaction #{index}: splits sum to {total}, "
        f"transaction amount is {transaction.amount}"
    )


def validate_result(
    expected: int,
    result: ParseResult,
    transactions: list[LedgerTransaction],
) -> ValidationReport:
    """Run every check and collect the issues found.

    Args:
        expected: Number of template blocks in the workload.
        result: Raw parse result.
        transactions: Normalized records of ``result``.

    Returns:
        ValidationReport listing all issues.
    """
    report = ValidationReport(
        expected_records=expected,
        parsed_records=result.num_transactions,
        checked_transactions=len(transactions),
    )

    issue = check_record_count(expected, result)
    if issue:
        report.issues.append(issue)

    for index, transaction in enumerate(transactions):
        issue = check_split_consistency(transaction, index)
        if issue:
            report.issues.append(issue)

    return report
