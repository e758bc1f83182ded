#!/usr/bin/env python3
"""
Interactive Selection Flow

Walks the user through the four choices needed to post a split transaction:

    budget -> account -> CSV rows -> parent memo

The steps run strictly in order and each blocks on user input. Aborting any
prompt (Ctrl-C / EOF) raises click.Abort and nothing is posted.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import click

from .csv_import.models import CsvRow
from .display import account_label, budget_label, row_label, selected_rows_table
from .ynab.client import YnabClient
from .ynab.models import YnabAccount, YnabBudget, filter_active_accounts
from .ynab.split_builder import default_parent_memo

logger = logging.getLogger(__name__)

ALL_KEYWORDS = ("all", "a", "*")


class FlowStage(Enum):
    """Furthest step the selection flow has completed."""

    STARTED = "started"
    BUDGET_CHOSEN = "budget_chosen"
    ACCOUNT_CHOSEN = "account_chosen"
    ROWS_CHOSEN = "rows_chosen"
    MEMO_ENTERED = "memo_entered"


class SelectionOutcome(Enum):
    """How the selection flow ended."""

    COMPLETED = "completed"
    NO_BUDGETS = "no_budgets"
    NO_ACTIVE_ACCOUNTS = "no_active_accounts"


@dataclass(frozen=True)
class SelectionResult:
    """Everything the user chose; budget/account are None on early exits."""

    outcome: SelectionOutcome
    budget: YnabBudget | None = None
    account: YnabAccount | None = None
    selected_rows: tuple[CsvRow, ...] = field(default_factory=tuple)
    memo: str | None = None

    @property
    def completed(self) -> bool:
        return self.outcome == SelectionOutcome.COMPLETED


def parse_selection(text: str, count: int) -> list[int]:
    """
    Parse a row selection expression into sorted 0-based indices.

    Accepts comma or space separated 1-based numbers and inclusive ranges
    ("1,3,5-7"), "all" for every row, or blank for none.

    Raises:
        click.BadParameter: If a token is not a number/range or is out of 1..count
    """
    text = text.strip().lower()
    if not text:
        return []
    if text in ALL_KEYWORDS:
        return list(range(count))

    chosen: set[int] = set()
    for token in text.replace(",", " ").split():
        start_str, sep, end_str = token.partition("-")
        try:
            start = int(start_str)
            end = int(end_str) if sep else start
        except ValueError:
            raise click.BadParameter(f"'{token}' is not a row number or range") from None

        if start > end:
            raise click.BadParameter(f"Range '{token}' is reversed")
        if start < 1 or end > count:
            raise click.BadParameter(f"'{token}' is outside 1-{count}")

        chosen.update(range(start - 1, end))

    return sorted(chosen)


class ClickPrompter:
    """Terminal prompts built on click."""

    def choose(self, message: str, labels: Sequence[str]) -> int:
        """Show a numbered list and return the 0-based index picked."""
        for number, label in enumerate(labels, start=1):
            click.echo(f"  {number:>3}. {label}")
        choice: int = click.prompt(message, type=click.IntRange(1, len(labels)))
        return choice - 1

    def select_many(self, message: str, labels: Sequence[str]) -> list[int]:
        """Show a numbered list and return the 0-based indices picked (possibly none)."""
        for number, label in enumerate(labels, start=1):
            click.echo(f"  {number:>3}. {label}")
        hint = "numbers/ranges like 1,3,5-7, 'all', or blank for none"
        indices: list[int] = click.prompt(
            f"{message} ({hint})",
            default="",
            show_default=False,
            value_proc=lambda text: parse_selection(text, len(labels)),
        )
        return indices

    def text(self, message: str, default: str) -> str:
        value: str = click.prompt(message, default=default)
        return value


class SelectionFlow:
    """
    Sequential budget/account/rows/memo selection.

    Args:
        client: YNAB client used for listing budgets and accounts
        rows: Rows loaded from the CSV export
        prompter: Input source (default: ClickPrompter)
    """

    def __init__(self, client: YnabClient, rows: Sequence[CsvRow], prompter: ClickPrompter | None = None):
        self.client = client
        self.rows = list(rows)
        self.prompter = prompter or ClickPrompter()
        self.stage = FlowStage.STARTED

    def run(self) -> SelectionResult:
        """
        Execute all four steps.

        Returns:
            SelectionResult; outcome NO_BUDGETS / NO_ACTIVE_ACCOUNTS when the
            flow stops early

        Raises:
            RemoteError: If listing budgets or accounts fails
            click.Abort: If the user cancels a prompt
        """
        budget = self.choose_budget()
        if budget is None:
            return SelectionResult(outcome=SelectionOutcome.NO_BUDGETS)

        account = self.choose_account(budget)
        if account is None:
            return SelectionResult(outcome=SelectionOutcome.NO_ACTIVE_ACCOUNTS, budget=budget)

        selected = self.choose_rows()
        memo = self.enter_memo(len(selected))

        return SelectionResult(
            outcome=SelectionOutcome.COMPLETED,
            budget=budget,
            account=account,
            selected_rows=tuple(selected),
            memo=memo,
        )

    def choose_budget(self) -> YnabBudget | None:
        click.echo("📊 Fetching your YNAB budgets...")
        budgets = self.client.list_budgets()

        if not budgets:
            click.echo("❌ No budgets found in your YNAB account.")
            return None

        index = self.prompter.choose("Select a budget to continue", [budget_label(b) for b in budgets])
        budget = budgets[index]
        self.stage = FlowStage.BUDGET_CHOSEN
        logger.debug("Budget chosen: %s", budget.id)
        click.echo(f"✅ Selected budget: {budget.name}\n")
        return budget

    def choose_account(self, budget: YnabBudget) -> YnabAccount | None:
        click.echo("💳 Fetching accounts from selected budget...")
        accounts = filter_active_accounts(self.client.list_accounts(budget.id))

        if not accounts:
            click.echo("❌ No active accounts found in this budget.")
            return None

        index = self.prompter.choose("Select an account for transactions", [account_label(a) for a in accounts])
        account = accounts[index]
        self.stage = FlowStage.ACCOUNT_CHOSEN
        logger.debug("Account chosen: %s", account.id)
        click.echo(f"✅ Selected account: {account.name}\n")
        return account

    def choose_rows(self) -> list[CsvRow]:
        click.echo("📋 Select transactions to post to YNAB...")
        indices = self.prompter.select_many("Select transactions to post", [row_label(r) for r in self.rows])
        selected = [self.rows[i] for i in indices]
        self.stage = FlowStage.ROWS_CHOSEN
        click.echo(f"✅ Selected {len(selected)} transactions\n")
        if selected:
            click.echo(selected_rows_table(selected))
            click.echo()
        return selected

    def enter_memo(self, item_count: int) -> str:
        memo = self.prompter.text("Enter a memo for the parent transaction", default_parent_memo(item_count))
        self.stage = FlowStage.MEMO_ENTERED
        return memo
