"""
Trade CSV parsing.

This module reads a trades document into rows and runs every row through
CSVValidator, collecting trades and errors into a ParsedCSVResult.
"""

import io
from collections.abc import Iterable, Mapping
from datetime import date
from pathlib import Path
from typing import Any

import pandas as pd
from loguru import logger

from portfolio_analyzer.core.constants import FILE_ERROR_FIELD, FILE_ERROR_ROW, TRADE_COLUMNS
from portfolio_analyzer.core.exceptions.portfolio import DataError
from portfolio_analyzer.core.models import CSVError, ParsedCSVResult, Trade

from .csv_validator import CSVValidator


class TradeCSVParser:
    """
    Parses trade documents with partial-failure semantics.

    Features:
    - Case-insensitive, whitespace-tolerant header matching
    - Unrecognized columns ignored, blank lines skipped
    - One error per failing field, bad rows never block good rows
    - Unparseable documents reported as a single file-level error
    """

    def __init__(self, as_of: date | None = None):
        """
        Initialize the parser.

        Args:
            as_of: Date treated as "today" when rejecting future trades;
                defaults to the current date at validation time
        """
        self.as_of = as_of

    def parse_text(self, text: str) -> ParsedCSVResult:
        """
        Parse a CSV document held in memory.

        Args:
            text: Document with a header row

        Returns:
            Trades in row order and all errors found
        """
        if not text.strip():
            logger.info("Empty trades document: no rows to validate")
            return ParsedCSVResult()

        try:
            df = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
        except pd.errors.EmptyDataError:
            logger.info("Trades document has no columns: no rows to validate")
            return ParsedCSVResult()
        except (pd.errors.ParserError, ValueError) as e:
            logger.warning(f"CSV parsing error ({type(e).__name__}): {e}")
            return self._file_error(e)

        return self.parse_rows(df.to_dict("records"))

    def parse_file(self, file_path: str | Path) -> ParsedCSVResult:
        """
        Parse a CSV document from disk.

        Raises:
            DataError: If the file cannot be read
        """
        path = Path(file_path)
        try:
            logger.debug(f"Loading trades file: {path}")
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning(f"Encoding error in {path.name}: {e}")
            return self._file_error(e)
        except OSError as e:
            logger.error(f"File system error loading {path.name}: {e}")
            raise DataError(f"Failed to read trades file: {path.name}") from e

        return self.parse_text(text)

    def parse_rows(self, rows: Iterable[Mapping[str, Any]]) -> ParsedCSVResult:
        """
        Validate already-tokenized rows.

        Args:
            rows: One mapping per data row, in document order

        Returns:
            Trades in row order and all errors found
        """
        trades: list[Trade] = []
        errors: list[CSVError] = []
        warned_columns = False
        row_count = 0

        for row_number, raw_row in enumerate(rows, start=1):
            row = normalize_row(raw_row)
            if not warned_columns:
                self._warn_on_columns(raw_row, row)
                warned_columns = True

            validated = CSVValidator.validate_row(row, row_number, self.as_of)
            if validated.trade is not None:
                trades.append(validated.trade)
            else:
                logger.debug(f"Row {row_number} rejected with {len(validated.errors)} errors")
                errors.extend(validated.errors)
            row_count = row_number

        logger.info(f"Validated {row_count} rows: {len(trades)} trades, {len(errors)} errors")
        return ParsedCSVResult(trades=tuple(trades), errors=tuple(errors))

    @staticmethod
    def _warn_on_columns(raw_row: Mapping[str, Any], row: Mapping[str, Any]) -> None:
        """Log header problems once per document."""
        missing_columns = [column for column in TRADE_COLUMNS if column not in row]
        if missing_columns:
            logger.warning(f"Trades document missing columns: {missing_columns}")

        ignored_columns = [key for key in raw_row if str(key).strip().lower() not in TRADE_COLUMNS]
        if ignored_columns:
            logger.debug(f"Ignoring unrecognized columns: {ignored_columns}")

    @staticmethod
    def _file_error(error: Exception) -> ParsedCSVResult:
        """Single file-level error for a document that cannot be tokenized."""
        return ParsedCSVResult(
            trades=(),
            errors=(
                CSVError(
                    row=FILE_ERROR_ROW,
                    field=FILE_ERROR_FIELD,
                    message=f"Failed to parse CSV: {error}",
                ),
            ),
        )


def normalize_row(row: Mapping[str, Any]) -> dict[str, Any]:
    """Lower-case and trim column names; the first of duplicate columns wins."""
    normalized: dict[str, Any] = {}
    for key, value in row.items():
        normalized.setdefault(str(key).strip().lower(), value)
    return normalized


def generate_sample_csv() -> str:
    """Canonical example trades document."""
    sample_data = [
        ["symbol", "shares", "price", "date"],
        ["AAPL", "10", "172.35", "2024-06-12"],
        ["TSLA", "5", "225.40", "2024-06-13"],
        ["AAPL", "-3", "180.00", "2024-07-01"],
        ["MSFT", "15", "340.50", "2024-06-15"],
        ["GOOGL", "8", "125.75", "2024-06-20"],
        ["NVDA", "2", "420.00", "2024-07-05"],
        ["AAPL", "5", "175.20", "2024-07-10"],
        ["TSLA", "-2", "235.80", "2024-07-12"],
    ]
    return "\n".join(",".join(row) for row in sample_data)


def write_sample_csv(file_path: str | Path) -> Path:
    """Write the example trades document to disk."""
    path = Path(file_path)
    path.write_text(generate_sample_csv() + "\n", encoding="utf-8")
    logger.info(f"Wrote sample trades to {path}")
    return path
