#!/usr/bin/env python3
"""
CSV Import Domain Models

Typed representation of one line of the transactions CSV export.
"""

from dataclasses import dataclass
from typing import Any

REQUIRED_COLUMNS = ("Date", "Payee", "Memo", "Outflow")


def _cell(row: dict[str, Any], column: str) -> str:
    """Read a cell as text; pandas fills short rows with NaN, which reads as empty."""
    value = row.get(column)
    if isinstance(value, str):
        return value
    return ""


@dataclass(frozen=True)
class CsvRow:
    """
    One transaction line from the CSV export.

    Values are kept exactly as exported; the outflow stays a decimal string
    until the split builder converts it to milliunits.
    """

    index: int  # 0-based position in the file, tags the row once selected
    date: str
    payee: str
    memo: str
    outflow: str  # e.g. "12.50" or "$12.50"

    @classmethod
    def from_csv_row(cls, row: dict[str, Any], index: int) -> "CsvRow":
        """
        Create CsvRow from CSV row dict.

        Args:
            row: Dictionary representing one CSV row (pandas records or csv.DictReader)
            index: Position of the row among the data lines

        Returns:
            CsvRow instance
        """
        return cls(
            index=index,
            date=_cell(row, "Date"),
            payee=_cell(row, "Payee"),
            memo=_cell(row, "Memo"),
            outflow=_cell(row, "Outflow"),
        )
