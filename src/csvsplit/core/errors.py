#!/usr/bin/env python3
"""
Error Taxonomy

All failures the split poster reports to the user derive from CsvSplitError,
so the CLI can turn them into clean messages without leaking tracebacks.
"""


class CsvSplitError(Exception):
    """Base class for all split poster errors."""

    pass


class ConfigurationError(CsvSplitError):
    """Raised when required configuration (such as the access token) is missing or invalid."""

    pass


class FileAccessError(CsvSplitError):
    """Raised when the CSV input cannot be found or read."""

    pass


class CsvParseError(CsvSplitError):
    """Raised when the CSV input is not well-formed or lacks required columns."""

    pass


class SplitCalculationError(CsvSplitError):
    """Raised when split amounts cannot be computed or fail validation"""

    pass


class RemoteError(CsvSplitError):
    """
    Raised when a YNAB API call fails.

    Carries the HTTP status code (None for transport failures) and the
    error detail text returned by YNAB, when available.
    """

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            message = f"{message} (HTTP {self.status_code})"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message
