"""
YNAB Integration Package

Talks to the YNAB API and shapes selected CSV rows into split transactions.

Key Components:
- models: Budgets, accounts and the transaction write models
- client: Authenticated HTTP client (list budgets, list accounts, create transaction)
- split_builder: Parent/subtransaction construction with exact milliunit sums
"""

from .client import YnabClient
from .models import (
    NewSubtransaction,
    NewTransaction,
    YnabAccount,
    YnabBudget,
    filter_active_accounts,
)
from .split_builder import (
    build_split_transaction,
    build_subtransaction,
    create_split_summary,
    default_parent_memo,
    parse_outflow_milliunits,
)

__all__ = [
    # Client
    "YnabClient",
    # Domain models
    "NewSubtransaction",
    "NewTransaction",
    "YnabAccount",
    "YnabBudget",
    "filter_active_accounts",
    # Split building
    "build_split_transaction",
    "build_subtransaction",
    "create_split_summary",
    "default_parent_memo",
    "parse_outflow_milliunits",
]
