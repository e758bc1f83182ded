#!/usr/bin/env python3
"""Tests for YNAB domain models."""

import pytest

from csvsplit.core.dates import FinancialDate
from csvsplit.core.money import Money
from csvsplit.ynab.models import (
    NewSubtransaction,
    NewTransaction,
    YnabAccount,
    YnabBudget,
    filter_active_accounts,
)
from tests.fixtures.fakes import make_account


class TestYnabBudget:
    """Test budget parsing."""

    @pytest.mark.ynab
    def test_from_dict(self):
        budget = YnabBudget.from_dict(
            {
                "id": "b1",
                "name": "Household",
                "currency_format": {"iso_code": "EUR", "decimal_digits": 2},
                "last_modified_on": "2024-08-15T12:30:00.000Z",
                "first_month": "2020-01-01",
            }
        )

        assert budget.id == "b1"
        assert budget.currency_iso_code == "EUR"
        assert budget.last_modified_date == "2024-08-15"

    @pytest.mark.ynab
    def test_missing_optional_fields(self):
        budget = YnabBudget.from_dict({"id": "b1", "name": "Old"})

        assert budget.currency_iso_code == "Unknown"
        assert budget.last_modified_date == "Unknown"


class TestYnabAccount:
    """Test account parsing and filtering."""

    @pytest.mark.ynab
    def test_from_dict(self):
        account = YnabAccount.from_dict(
            {
                "id": "a1",
                "name": "Visa",
                "type": "creditCard",
                "on_budget": True,
                "closed": False,
                "balance": -45990,
                "cleared_balance": -40000,
                "deleted": False,
            }
        )

        assert account.balance == Money.from_milliunits(-45990)
        assert account.type == "creditCard"
        assert account.is_active

    @pytest.mark.ynab
    @pytest.mark.parametrize(
        "closed,deleted,active",
        [(False, False, True), (True, False, False), (False, True, False), (True, True, False)],
    )
    def test_is_active(self, closed, deleted, active):
        assert make_account(closed=closed, deleted=deleted).is_active is active

    @pytest.mark.ynab
    def test_filter_active_accounts_keeps_order(self):
        accounts = [
            make_account("a1", "Checking"),
            make_account("a2", "Old Savings", closed=True),
            make_account("a3", "Removed", deleted=True),
            make_account("a4", "Visa"),
        ]

        active = filter_active_accounts(accounts)

        assert [a.id for a in active] == ["a1", "a4"]

    @pytest.mark.ynab
    def test_filter_all_inactive(self):
        accounts = [make_account(closed=True), make_account(deleted=True)]

        assert filter_active_accounts(accounts) == []


class TestNewTransaction:
    """Test write model rendering."""

    @pytest.mark.ynab
    def test_to_api_dict(self):
        transaction = NewTransaction(
            account_id="a1",
            memo="Groceries+Coffee",
            amount=Money.from_milliunits(-36600),
            date=FinancialDate.from_string("2024-01-05"),
            subtransactions=(
                NewSubtransaction(memo="2024-01-01 - ", amount=Money.from_milliunits(-4500)),
                NewSubtransaction(memo="2024-01-02 - Weekly", amount=Money.from_milliunits(-32100)),
            ),
        )

        assert transaction.to_api_dict() == {
            "account_id": "a1",
            "memo": "Groceries+Coffee",
            "amount": -36600,
            "date": "2024-01-05",
            "cleared": "uncleared",
            "approved": False,
            "subtransactions": [
                {"memo": "2024-01-01 - ", "amount": -4500, "category_id": None},
                {"memo": "2024-01-02 - Weekly", "amount": -32100, "category_id": None},
            ],
        }

    @pytest.mark.ynab
    def test_defaults(self):
        transaction = NewTransaction(
            account_id="a1", memo="", amount=Money.zero(), date=FinancialDate.from_string("2024-01-05")
        )

        assert transaction.cleared == "uncleared"
        assert transaction.approved is False
        assert transaction.subtransactions == ()
