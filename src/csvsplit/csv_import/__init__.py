"""
CSV Import Package

Loading of bank transaction exports into CsvRow domain models.
"""

from .loader import load_csv_rows
from .models import REQUIRED_COLUMNS, CsvRow

__all__ = [
    "REQUIRED_COLUMNS",
    "CsvRow",
    "load_csv_rows",
]
