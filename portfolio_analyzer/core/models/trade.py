"""
Trade domain model.

A Trade is one validated buy or sell. The sign of ``shares`` carries the
direction: positive for buys, negative for sells.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

from portfolio_analyzer.core.enums import ActionType
from portfolio_analyzer.core.exceptions.portfolio import InvalidTradeError, ValidationError
from portfolio_analyzer.core.utils.validation import (
    parse_iso_date,
    validate_non_zero,
    validate_positive,
    validate_symbol,
)


@dataclass(frozen=True)
class Trade:
    """Represents an executed trade."""

    symbol: str
    shares: float
    price: float
    date: str  # YYYY-MM-DD

    def __post_init__(self) -> None:
        """Validate trade data after initialization."""
        self._check("symbol", validate_symbol, self.symbol)
        self._check("shares", validate_non_zero, self.shares)
        self._check("price", validate_positive, self.price)
        self._check("date", parse_iso_date, self.date)

    @staticmethod
    def _check(field: str, validator: Callable[[Any, str], Any], value: Any) -> None:
        try:
            validator(value, field)
        except ValidationError as e:
            raise InvalidTradeError(field, value, str(e)) from e

    @property
    def action(self) -> ActionType:
        """Direction of the trade."""
        return ActionType.from_shares(self.shares)

    @property
    def trade_date(self) -> date:
        """Trade date as a calendar date."""
        return parse_iso_date(self.date)

    def notional_value(self) -> float:
        """Calculate the notional value of the trade."""
        return abs(self.shares) * self.price

    def to_row(self) -> dict[str, str]:
        """Render the trade as a raw CSV row."""
        return {
            "symbol": self.symbol,
            "shares": repr(self.shares),
            "price": repr(self.price),
            "date": self.date,
        }

    def to_dict(self) -> dict[str, str | float]:
        """JSON-ready representation."""
        return {"symbol": self.symbol, "shares": self.shares, "price": self.price, "date": self.date}
