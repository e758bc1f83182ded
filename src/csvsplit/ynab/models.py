#!/usr/bin/env python3
"""
YNAB Domain Models

Type-safe models representing YNAB API data structures.
Read models are built from API dicts; write models render the JSON bodies
the API expects. All amounts use the Money primitive (milliunits).
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money


@dataclass(frozen=True)
class YnabBudget:
    """
    YNAB budget summary from API.
    """

    id: str
    name: str
    currency_format: dict[str, Any] | None = None
    last_modified_on: str | None = None  # ISO timestamp

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabBudget":
        """
        Create YnabBudget from API dict.

        Args:
            data: Dictionary from YNAB API (GET /budgets)

        Returns:
            YnabBudget instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            currency_format=data.get("currency_format"),
            last_modified_on=data.get("last_modified_on"),
        )

    @property
    def currency_iso_code(self) -> str:
        """ISO currency code, or 'Unknown' when YNAB omits the format."""
        if self.currency_format and self.currency_format.get("iso_code"):
            return str(self.currency_format["iso_code"])
        return "Unknown"

    @property
    def last_modified_date(self) -> str:
        """Date portion (YYYY-MM-DD) of the last modification timestamp."""
        if not self.last_modified_on:
            return "Unknown"
        return self.last_modified_on[:10]


@dataclass(frozen=True)
class YnabAccount:
    """
    YNAB account from API.

    Represents a financial account in YNAB with the fields the split poster uses.
    """

    id: str
    name: str
    type: str  # "checking", "savings", "creditCard", etc.
    balance: Money
    closed: bool = False
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabAccount":
        """
        Create YnabAccount from API dict.

        Args:
            data: Dictionary from YNAB API (GET /budgets/{id}/accounts)

        Returns:
            YnabAccount instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            type=data.get("type", "unknown"),
            balance=Money.from_milliunits(data.get("balance", 0)),
            closed=data.get("closed", False),
            deleted=data.get("deleted", False),
        )

    @property
    def is_active(self) -> bool:
        """Check if the account can receive new transactions."""
        return not self.deleted and not self.closed


def filter_active_accounts(accounts: list[YnabAccount]) -> list[YnabAccount]:
    """Drop deleted and closed accounts, keeping API order."""
    return [account for account in accounts if account.is_active]


@dataclass(frozen=True)
class NewSubtransaction:
    """
    Subtransaction (split line) of a transaction being created.
    """

    memo: str
    amount: Money  # negative for outflows
    category_id: str | None = None

    def to_api_dict(self) -> dict[str, Any]:
        return {
            "memo": self.memo,
            "amount": self.amount.to_milliunits(),
            "category_id": self.category_id,
        }


@dataclass(frozen=True)
class NewTransaction:
    """
    Parent transaction with itemized subtransactions, ready to post.

    The parent amount always equals the sum of its subtransaction amounts.
    """

    account_id: str
    memo: str
    amount: Money
    date: FinancialDate
    cleared: str = "uncleared"  # "cleared", "uncleared", "reconciled"
    approved: bool = False
    subtransactions: tuple[NewSubtransaction, ...] = field(default_factory=tuple)

    def to_api_dict(self) -> dict[str, Any]:
        """Render as the YNAB SaveTransaction JSON object."""
        return {
            "account_id": self.account_id,
            "memo": self.memo,
            "amount": self.amount.to_milliunits(),
            "date": self.date.to_ynab_format(),
            "cleared": self.cleared,
            "approved": self.approved,
            "subtransactions": [sub.to_api_dict() for sub in self.subtransactions],
        }
