#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer milliunits internally,
matching the YNAB API representation exactly.
"""

from dataclasses import dataclass

from .currency import milliunits_to_dollars_str


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in milliunits.

    Supports both positive (inflows) and negative (outflows) amounts.

    Examples:
        >>> coffee = Money.from_milliunits(4500)
        >>> coffee.to_milliunits()
        4500
        >>> str(-coffee)
        '$-4.50'
        >>> (-coffee).abs()
        Money(milliunits=4500)
    """

    milliunits: int

    @classmethod
    def from_milliunits(cls, milliunits: int) -> "Money":
        """Create Money from YNAB milliunits."""
        return cls(milliunits=milliunits)

    @classmethod
    def zero(cls) -> "Money":
        return cls(milliunits=0)

    def to_milliunits(self) -> int:
        """Get value in YNAB milliunits."""
        return self.milliunits

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(milliunits=abs(self.milliunits))

    def __add__(self, other: "Money") -> "Money":
        return Money(milliunits=self.milliunits + other.milliunits)

    def __sub__(self, other: "Money") -> "Money":
        return Money(milliunits=self.milliunits - other.milliunits)

    def __neg__(self) -> "Money":
        return Money(milliunits=-self.milliunits)

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${milliunits_to_dollars_str(self.milliunits)}"

    def __repr__(self) -> str:
        return f"Money(milliunits={self.milliunits})"
