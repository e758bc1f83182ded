#!/usr/bin/env python3
"""
Split Builder for CSV Transactions.

Turns the CSV rows a user selected into one YNAB parent transaction with one
subtransaction per row. Uses integer milliunits throughout.

Key Features:
- Each row's outflow is rounded to milliunits exactly once
- Parent amount is the sum of the rounded row amounts, so it can never drift
- Sum verification before anything is posted
"""

from collections.abc import Sequence
from typing import Any

from ..core.currency import parse_dollars_to_milliunits, validate_sum_equals_total
from ..core.dates import FinancialDate
from ..core.errors import SplitCalculationError
from ..core.money import Money
from ..csv_import.models import CsvRow
from .models import NewSubtransaction, NewTransaction


def default_parent_memo(item_count: int) -> str:
    """Memo suggested for the parent transaction."""
    return f"Split transaction with {item_count} items"


def parse_outflow_milliunits(outflow: str) -> int:
    """
    Convert an outflow cell to a non-negative milliunit amount.

    Outflows are spending, so the sign in the export is ignored; the caller
    negates the result for YNAB.

    Raises:
        SplitCalculationError: If the cell is empty or not a number
    """
    try:
        return abs(parse_dollars_to_milliunits(outflow))
    except ValueError as e:
        raise SplitCalculationError(f"Invalid outflow amount {outflow!r}: {e}") from e


def build_subtransaction(row: CsvRow) -> NewSubtransaction:
    """
    Build the split line for one selected row.

    Raises:
        SplitCalculationError: If the row's outflow cannot be parsed
    """
    try:
        milliunits = parse_outflow_milliunits(row.outflow)
    except SplitCalculationError as e:
        raise SplitCalculationError(f"Row {row.index + 1} ({row.date} {row.payee}): {e}") from e

    return NewSubtransaction(
        memo=f"{row.date} - {row.memo}",
        amount=Money.from_milliunits(-milliunits),
        category_id=None,  # categories are assigned in YNAB afterwards
    )


def build_split_transaction(
    rows: Sequence[CsvRow],
    account_id: str,
    memo: str,
    today: FinancialDate | None = None,
) -> NewTransaction:
    """
    Build the parent transaction for the selected rows.

    Args:
        rows: Selected rows, in the order they should appear as splits
        account_id: YNAB account receiving the transaction
        memo: Parent transaction memo
        today: Transaction date (default: today)

    Returns:
        NewTransaction, uncleared and unapproved, dated today. Zero rows give
        an amount of 0 and no subtransactions.

    Raises:
        SplitCalculationError: If an outflow is invalid or the splits don't sum to the total
    """
    subtransactions = tuple(build_subtransaction(row) for row in rows)

    total = Money.zero()
    for sub in subtransactions:
        total = total + sub.amount

    # Outflows re-read from the rows, independent of the split lines
    expected = -sum(parse_outflow_milliunits(row.outflow) for row in rows)
    split_dicts = [sub.to_api_dict() for sub in subtransactions]
    if not validate_sum_equals_total(split_dicts, expected):
        raise SplitCalculationError(
            f"Splits sum to {total.to_milliunits()} but selected outflows total {expected}"
        )

    return NewTransaction(
        account_id=account_id,
        memo=memo,
        amount=total,
        date=today or FinancialDate.today(),
        cleared="uncleared",
        approved=False,
        subtransactions=subtransactions,
    )


def create_split_summary(transaction: NewTransaction) -> dict[str, Any]:
    """
    Create a summary of a built split transaction.

    Returns:
        Dictionary with split count, total and the largest/smallest split (milliunits)
    """
    if not transaction.subtransactions:
        return {
            "split_count": 0,
            "total_amount": 0,
            "largest_split": 0,
            "smallest_split": 0,
        }

    amounts = [abs(sub.amount.to_milliunits()) for sub in transaction.subtransactions]
    return {
        "split_count": len(transaction.subtransactions),
        "total_amount": transaction.amount.to_milliunits(),
        "largest_split": max(amounts),
        "smallest_split": min(amounts),
    }
