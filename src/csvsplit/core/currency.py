#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All amounts sent to YNAB are integer milliunits (1000 milliunits = $1.00).
CSV exports carry decimal dollar strings such as "12.50" or "$1,234.56".

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse decimal strings with Decimal and round once per amount
- Sum rounded integers, never re-round an aggregate
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

MILLIUNITS_PER_UNIT = 1000


def clean_currency_str(currency_str: str) -> str:
    """
    Strip currency symbol, thousands separators and whitespace.

    Example:
        clean_currency_str(" $1,234.56 ") -> "1234.56"
    """
    return currency_str.replace("$", "").replace(",", "").strip()


def parse_dollars_to_milliunits(dollars_str: str) -> int:
    """
    Parse a dollar string to milliunits using decimal arithmetic.

    The value is multiplied by 1000 and rounded half away from zero, so
    "0.0005" becomes 1 and "-0.0005" becomes -1.

    Args:
        dollars_str: String like "12.34", "$12.34" or "1,234.5"

    Returns:
        Amount in milliunits, sign preserved

    Raises:
        ValueError: If the string is empty or not a finite decimal number

    Examples:
        parse_dollars_to_milliunits("4.50") -> 4500
        parse_dollars_to_milliunits("$32.10") -> 32100
        parse_dollars_to_milliunits("-1.2345") -> -1235
    """
    clean = clean_currency_str(dollars_str)
    if not clean:
        raise ValueError("Empty currency amount")

    try:
        value = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid currency amount: {dollars_str!r}") from e

    if not value.is_finite():
        raise ValueError(f"Invalid currency amount: {dollars_str!r}")

    milliunits = (value * MILLIUNITS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(milliunits)


def milliunits_to_dollars_str(milliunits: int) -> str:
    """
    Convert milliunits to a two-decimal dollar string.

    Sub-cent remainders are rounded half away from zero for display only.

    Example:
        milliunits_to_dollars_str(-36600) -> "-36.60"
    """
    dollars = (Decimal(milliunits) / MILLIUNITS_PER_UNIT).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if dollars == 0:
        dollars = abs(dollars)
    return f"{dollars:.2f}"


def format_milliunits(milliunits: int) -> str:
    """Format milliunits as dollar string with $ prefix."""
    return f"${milliunits_to_dollars_str(milliunits)}"


def validate_sum_equals_total(
    splits: list[dict[str, Any]], total_milliunits: int, tolerance: int = 0
) -> bool:
    """
    Validate that split amounts sum exactly to the transaction total.

    Args:
        splits: List of split dictionaries with 'amount' field in milliunits
        total_milliunits: Expected total in milliunits (negative for expenses)
        tolerance: Allowed difference in milliunits (default: 0 for exact match)

    Returns:
        True if sum matches within tolerance
    """
    split_sum = sum(split["amount"] for split in splits)
    difference = abs(split_sum - total_milliunits)
    return difference <= tolerance
