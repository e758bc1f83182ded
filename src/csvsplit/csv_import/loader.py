#!/usr/bin/env python3
"""
Transactions CSV Loader

Reads the bank export (Date, Payee, Memo, Outflow columns) into CsvRow
domain models, in file order, skipping blank lines.
"""

import logging
from pathlib import Path

import pandas as pd

from ..core.config import DEFAULT_CSV_PATH
from ..core.errors import CsvParseError, FileAccessError
from .models import REQUIRED_COLUMNS, CsvRow

logger = logging.getLogger(__name__)


def load_csv_rows(csv_path: str | Path = DEFAULT_CSV_PATH) -> list[CsvRow]:
    """
    Load transactions from a CSV file as domain models.

    Every cell is read as text so that amounts like "4.50" and memos like
    "NA" survive unchanged. A trailing comma on each data line (common in
    bank exports) leaves the columns aligned with the header.

    Args:
        csv_path: Path to the CSV export (default: transactions.csv in the working directory)

    Returns:
        List of CsvRow objects, one per non-empty data line, in file order

    Raises:
        FileAccessError: If the path is missing, is a directory, or cannot be read
        CsvParseError: If the content is not well-formed CSV or lacks required columns
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileAccessError(f"Transactions CSV not found: {csv_path}")
    if not csv_path.is_file():
        raise FileAccessError(f"Transactions CSV path is not a file: {csv_path}")

    try:
        df = pd.read_csv(
            csv_path,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except OSError as e:
        raise FileAccessError(f"Cannot read {csv_path}: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise CsvParseError(f"{csv_path} is empty; a header row is required") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise CsvParseError(f"Failed to parse {csv_path}: {e}") from e

    df.columns = [str(column).strip() for column in df.columns]

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise CsvParseError(f"{csv_path} is missing required columns: {', '.join(missing)}")

    rows = [CsvRow.from_csv_row(record, index) for index, record in enumerate(df.to_dict(orient="records"))]

    logger.info("Loaded %d transactions from %s", len(rows), csv_path)
    return rows
