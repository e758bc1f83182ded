"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from csvsplit.core import config as config_module
from csvsplit.csv_import.models import CsvRow
from tests.fixtures.csv_samples import CSV_HEADER


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_rows() -> list[CsvRow]:
    """The coffee/grocery rows used across aggregation tests."""
    return [
        CsvRow(index=0, date="2024-01-01", payee="Coffee", memo="", outflow="4.50"),
        CsvRow(index=1, date="2024-01-02", payee="Grocery", memo="Weekly", outflow="32.10"),
    ]


@pytest.fixture
def sample_csv(temp_dir) -> Path:
    """transactions.csv with three data lines and a blank line."""
    csv_file = temp_dir / "transactions.csv"
    csv_file.write_text(
        CSV_HEADER
        + "2024-01-01,Coffee,,4.50\n"
        + "\n"
        + "2024-01-02,Grocery,Weekly,32.10\n"
        + '2024-01-03,"Hardware, Inc.",Screws and bolts,$1.25\n',
        encoding="utf-8",
    )
    return csv_file


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    # Ensure tests never reach the real API
    monkeypatch.setenv("CSVSPLIT_ENV", "test")
    monkeypatch.setenv("YNAB_ACCESS_TOKEN", "test-token")
    monkeypatch.setenv("YNAB_BASE_URL", "https://ynab.test/v1")
    monkeypatch.delenv("CSVSPLIT_CSV_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("YNAB_TIMEOUT", raising=False)
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "csv: Tests for CSV loading")
    config.addinivalue_line("markers", "ynab: Tests for YNAB integration")
    config.addinivalue_line("markers", "cli: Tests for the command-line interface")
