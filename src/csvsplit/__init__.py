"""
CSV Split Poster

Posts rows from a bank CSV export to YNAB as a single split transaction,
one subtransaction per selected row.

Domain Packages:
- core: Configuration, errors, currency and date primitives
- csv_import: Loading the transactions CSV into CsvRow models
- ynab: YNAB API client, domain models and split construction
- cli: Command-line interface

Example Usage:
    from csvsplit.csv_import import load_csv_rows
    from csvsplit.ynab import YnabClient, build_split_transaction
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.money import Money
from .csv_import.models import CsvRow
from .ynab.models import NewSubtransaction, NewTransaction

__all__ = [
    "CsvRow",
    "Environment",
    "Money",
    "NewSubtransaction",
    "NewTransaction",
    "get_config",
]
