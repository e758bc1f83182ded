#!/usr/bin/env python3
"""
Terminal Rendering Helpers

Choice labels and summary tables for the interactive flow. Truncation here
only affects what is shown; the underlying row values are never altered.
"""

from collections.abc import Sequence

import pandas as pd

from .csv_import.models import CsvRow
from .ynab.models import YnabAccount, YnabBudget

PAYEE_WIDTH = 25
MEMO_WIDTH = 40
TABLE_MEMO_WIDTH = 30


def fit_width(text: str, width: int) -> str:
    """Pad to width, or cut to width with a trailing ellipsis."""
    if len(text) > width:
        return text[: width - 3] + "..."
    return text.ljust(width)


def truncate(text: str, width: int) -> str:
    """Cut to width plus an ellipsis, without padding."""
    if len(text) > width:
        return text[:width] + "..."
    return text


def budget_label(budget: YnabBudget) -> str:
    return f"{budget.name} ({budget.currency_iso_code}) - Last modified: {budget.last_modified_date}"


def account_label(account: YnabAccount) -> str:
    return f"{account.name} ({account.type}) - {account.balance}"


def row_label(row: CsvRow) -> str:
    return f"{row.date} | {fit_width(row.payee, PAYEE_WIDTH)} | {fit_width(row.memo, MEMO_WIDTH)} | ${row.outflow}"


def selected_rows_table(rows: Sequence[CsvRow]) -> str:
    """
    Render the selected rows as a plain-text table.

    Returns:
        Table text, or a placeholder line when nothing is selected
    """
    if not rows:
        return "(no transactions selected)"

    df = pd.DataFrame(
        [
            {
                "Date": row.date,
                "Payee": row.payee,
                "Memo": truncate(row.memo, TABLE_MEMO_WIDTH),
                "Amount": f"${row.outflow}",
            }
            for row in rows
        ]
    )
    df.index = pd.RangeIndex(start=1, stop=len(rows) + 1)
    return df.to_string()
