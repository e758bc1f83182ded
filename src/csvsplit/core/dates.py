#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent ISO formatting for YNAB requests.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_ynab_format(self) -> str:
        """Format as YNAB expects (YYYY-MM-DD)."""
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_ynab_format()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"
