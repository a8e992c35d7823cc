"""Synthetic QIF workloads for throughput measurement."""

DEFAULT_ACCOUNT_TYPE = "Bank"

# One fully split bank transaction. Copies are byte-identical.
TRANSACTION_TEMPLATE = (
    "D02/10/2020\n"
    "C*\n"
    "Mtest order 1\n"
    "T-100.00\n"
    "PAmazon.com\n"
    "LFood:Groceries\n"
    "SFood:Groceries\n"
    "E50%\n"
    "$-50.00\n"
    "STransportation:Automobile\n"
    "E25%\n"
    "$-25.00\n"
    "SPersonal Care:Haircare\n"
    "E10%\n"
    "$-10.00\n"
    "SHealthcare:Prescriptions\n"
    "E15%\n"
    "$-15.00\n"
    "^\n"
)

RECORD_TERMINATOR = "^"


def type_header(account_type: str = DEFAULT_ACCOUNT_TYPE) -> str:
    """Return the ``!Type:`` header line for an account section."""
    return f"!Type:{account_type}\n"


def build_workload(count: int, account_type: str = DEFAULT_ACCOUNT_TYPE) -> str:
    """Build a QIF document holding ``count`` copies of the template.

    Args:
        count: Number of transaction blocks. Zero yields the header alone.
        account_type: Account type written in the section header.

    Returns:
        The complete QIF text.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"Repetition count cannot be negative, got {count}")
    return type_header(account_type) + TRANSACTION_TEMPLATE * count


def count_records(text: str) -> int:
    """Count the record terminator lines in a QIF document."""
    return sum(1 for line in text.splitlines() if line == RECORD_TERMINATOR)
