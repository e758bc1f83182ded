"""
Core Utilities Package

Shared configuration, error types and currency primitives used by the
CSV loader, the YNAB client and the split builder.
"""

from .config import (
    DEFAULT_CSV_PATH,
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    format_milliunits,
    milliunits_to_dollars_str,
    parse_dollars_to_milliunits,
    validate_sum_equals_total,
)
from .dates import FinancialDate
from .errors import (
    ConfigurationError,
    CsvParseError,
    CsvSplitError,
    FileAccessError,
    RemoteError,
    SplitCalculationError,
)
from .money import Money

__all__ = [
    # Configuration
    "DEFAULT_CSV_PATH",
    "Config",
    "Environment",
    "get_config",
    "reload_config",
    # Errors
    "ConfigurationError",
    "CsvParseError",
    "CsvSplitError",
    "FileAccessError",
    "RemoteError",
    "SplitCalculationError",
    # Primitives
    "FinancialDate",
    "Money",
    # Currency utilities
    "format_milliunits",
    "milliunits_to_dollars_str",
    "parse_dollars_to_milliunits",
    "validate_sum_equals_total",
]
