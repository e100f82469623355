"""
Validation utilities for core domain models.

Provides consistent validation across the application. These helpers raise;
row-level CSV validation collects errors as data instead
(see infrastructure.data.csv_validator).
"""

import re
from datetime import date, datetime

from portfolio_analyzer.core.constants import ISO_DATE_FORMAT, SYMBOL_PATTERN
from portfolio_analyzer.core.exceptions.portfolio import ValidationError

_SYMBOL_RE = re.compile(SYMBOL_PATTERN)


def is_valid_symbol(symbol: str) -> bool:
    """Check that a normalized ticker matches the allowed pattern."""
    return bool(_SYMBOL_RE.fullmatch(symbol))


def normalize_symbol(symbol: str) -> str:
    """Trim and upper-case a raw ticker."""
    return symbol.strip().upper()


def validate_symbol(symbol: str, param_name: str = "symbol") -> str:
    """Validate that a value is a well-formed ticker symbol.

    Args:
        symbol: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated symbol

    Raises:
        ValidationError: If symbol is not 1-15 characters of A-Z, 0-9 or &
    """
    if not isinstance(symbol, str) or not is_valid_symbol(symbol):
        raise ValidationError(
            f"{param_name} must be 1-15 uppercase letters, numbers, or &, got {symbol!r}"
        )
    return symbol


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Raises:
        ValidationError: If value is not positive
    """
    if not value > 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def validate_non_zero(value: float, param_name: str) -> float:
    """Validate that a numeric value is non-zero.

    Raises:
        ValidationError: If value is zero
    """
    if value == 0:
        raise ValidationError(f"{param_name} must be non-zero, got {value}")
    return value


def parse_iso_date(value: str, param_name: str = "date") -> date:
    """Parse a normalized YYYY-MM-DD date string.

    Args:
        value: ISO date string
        param_name: Parameter name for error messages

    Returns:
        The parsed calendar date

    Raises:
        ValidationError: If value is not a YYYY-MM-DD date
    """
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{param_name} must be a YYYY-MM-DD date, got {value!r}") from e


def validate_page_params(page: int, items_per_page: int, max_items_per_page: int) -> None:
    """Validate 1-based pagination parameters.

    Raises:
        ValidationError: If page or page size is out of range
    """
    if page < 1:
        raise ValidationError(f"page must be at least 1, got {page}")
    if items_per_page < 1 or items_per_page > max_items_per_page:
        raise ValidationError(
            f"items_per_page must be between 1 and {max_items_per_page}, got {items_per_page}"
        )
