"""
Trade row validation.

This module turns one raw CSV row into a Trade or a list of field-level
errors. Every field is checked independently so a row reports all of its
problems at once.
"""

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import pandas as pd
from loguru import logger

from portfolio_analyzer.core.constants import MIN_TRADE_YEAR, SUPPORTED_DATE_FORMATS
from portfolio_analyzer.core.exceptions.portfolio import InvalidTradeError
from portfolio_analyzer.core.models import CSVError, Trade, ValidatedRow
from portfolio_analyzer.core.types.financial import to_float
from portfolio_analyzer.core.utils.validation import is_valid_symbol, normalize_symbol

_FULL_YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")


class CSVValidator:
    """Handles validation of raw trade rows."""

    SYMBOL_REQUIRED = "Symbol is required"
    SYMBOL_INVALID = "Symbol must be 1-15 uppercase letters, numbers, or & symbol"
    SHARES_REQUIRED = "Shares is required"
    SHARES_INVALID = "Shares must be a non-zero number"
    PRICE_REQUIRED = "Price is required"
    PRICE_INVALID = "Price must be a positive number"
    DATE_REQUIRED = "Date is required"
    DATE_INVALID = "Date must be in a valid format (e.g., 2024-06-12 or 06/12/2024)"
    DATE_IN_FUTURE = "Date cannot be in the future"

    INVALID_FIELD_MESSAGES = {
        "symbol": SYMBOL_INVALID,
        "shares": SHARES_INVALID,
        "price": PRICE_INVALID,
        "date": DATE_INVALID,
    }

    @staticmethod
    def validate_row(
        row: Mapping[str, Any], row_number: int, as_of: date | None = None
    ) -> ValidatedRow:
        """
        Validate one raw row.

        Args:
            row: Column name to raw cell value; keys must already be lower-case
            row_number: 1-based data row number (the header is row 0)
            as_of: Date treated as "today" for the future-date check

        Returns:
            ValidatedRow holding either a Trade or one error per failing field
        """
        errors: list[CSVError] = []

        symbol, message = CSVValidator._validate_symbol(_cell(row, "symbol"))
        if message:
            errors.append(CSVError(row_number, "symbol", message))

        shares, message = CSVValidator._validate_shares(_cell(row, "shares"))
        if message:
            errors.append(CSVError(row_number, "shares", message))

        price, message = CSVValidator._validate_price(_cell(row, "price"))
        if message:
            errors.append(CSVError(row_number, "price", message))

        trade_date, message = CSVValidator._validate_date(
            _cell(row, "date"), as_of or date.today()
        )
        if message:
            errors.append(CSVError(row_number, "date", message))

        if errors:
            return ValidatedRow(trade=None, errors=tuple(errors))

        try:
            trade = Trade(symbol=symbol, shares=shares, price=price, date=trade_date)
        except InvalidTradeError as e:
            logger.warning(f"Row {row_number} passed field checks but failed trade checks: {e}")
            message = CSVValidator.INVALID_FIELD_MESSAGES.get(e.field, str(e))
            return ValidatedRow(trade=None, errors=(CSVError(row_number, e.field, message),))

        return ValidatedRow(trade=trade)

    @staticmethod
    def _validate_symbol(raw: str) -> tuple[str, str | None]:
        """Normalize and check a ticker symbol."""
        symbol = normalize_symbol(raw)
        if not symbol:
            return symbol, CSVValidator.SYMBOL_REQUIRED
        if not is_valid_symbol(symbol):
            return symbol, CSVValidator.SYMBOL_INVALID
        return symbol, None

    @staticmethod
    def _validate_shares(raw: str) -> tuple[float, str | None]:
        """Parse a signed, non-zero share count (fractional shares allowed)."""
        if not raw:
            return 0.0, CSVValidator.SHARES_REQUIRED
        try:
            shares = to_float(raw)
        except ValueError:
            return 0.0, CSVValidator.SHARES_INVALID
        if shares == 0:
            return 0.0, CSVValidator.SHARES_INVALID
        return shares, None

    @staticmethod
    def _validate_price(raw: str) -> tuple[float, str | None]:
        """Parse a strictly positive per-share price."""
        if not raw:
            return 0.0, CSVValidator.PRICE_REQUIRED
        try:
            price = to_float(raw)
        except ValueError:
            return 0.0, CSVValidator.PRICE_INVALID
        if price <= 0:
            return 0.0, CSVValidator.PRICE_INVALID
        return price, None

    @staticmethod
    def _validate_date(raw: str, today: date) -> tuple[str, str | None]:
        """Parse a trade date, reject future dates, normalize to YYYY-MM-DD."""
        if not raw:
            return "", CSVValidator.DATE_REQUIRED

        parsed = parse_trade_date(raw)
        if parsed is None:
            return "", CSVValidator.DATE_INVALID
        if parsed > today:
            return "", CSVValidator.DATE_IN_FUTURE
        return parsed.isoformat(), None


def parse_trade_date(raw: str) -> date | None:
    """
    Parse a textual trade date.

    Tries the explicit formats first (month-first for slashed dates), then
    falls back to pandas' flexible parser for other spellings that still
    carry a four-digit year. Years before 1000 are rejected.

    Returns:
        The calendar date, or None if the text is not a date
    """
    text = raw.strip()
    parsed: date | None = None
    for fmt in SUPPORTED_DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt).date()
            break
        except ValueError:
            continue

    # pandas fills a missing year, month or day from today, so "10:30" or
    # "3pm" would otherwise read as today's date
    if parsed is None and _FULL_YEAR_RE.search(text):
        try:
            timestamp = pd.to_datetime(text, format="mixed")
        except (ValueError, TypeError, OverflowError):
            return None
        if pd.isna(timestamp):
            return None
        parsed = timestamp.date()

    if parsed is None or parsed.year < MIN_TRADE_YEAR:
        return None
    return parsed


def _cell(row: Mapping[str, Any], column: str) -> str:
    """Raw cell text, stripped; missing and NaN cells read as empty."""
    value = row.get(column)
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()
