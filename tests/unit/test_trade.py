"""
Unit tests for the Trade model.
"""

from datetime import date

import pytest

from portfolio_analyzer.core.enums import ActionType
from portfolio_analyzer.core.exceptions.portfolio import InvalidTradeError, ValidationError
from portfolio_analyzer.core.models import Trade
from portfolio_analyzer.infrastructure.data import CSVValidator


class TestTradeCreation:
    """Test Trade invariants."""

    def test_should_create_buy_trade(self) -> None:
        """Test a valid buy."""
        trade = Trade(symbol="AAPL", shares=10.0, price=172.35, date="2024-06-12")

        assert trade.action == ActionType.BUY
        assert trade.trade_date == date(2024, 6, 12)

    def test_should_create_fractional_sell_trade(self) -> None:
        """Test a valid fractional sell."""
        trade = Trade(symbol="BRK&B", shares=-0.25, price=400.0, date="2024-06-12")

        assert trade.action == ActionType.SELL

    def test_should_reject_invalid_symbol(self) -> None:
        """Test lower-case symbols are not normalized by the model."""
        with pytest.raises(InvalidTradeError, match="symbol"):
            Trade(symbol="aapl", shares=1.0, price=1.0, date="2024-06-12")

    def test_should_reject_zero_shares(self) -> None:
        """Test zero shares."""
        with pytest.raises(InvalidTradeError) as exc_info:
            Trade(symbol="AAPL", shares=0.0, price=1.0, date="2024-06-12")

        assert exc_info.value.field == "shares"

    @pytest.mark.parametrize("price", [0.0, -5.0])
    def test_should_reject_non_positive_price(self, price: float) -> None:
        """Test prices must be positive."""
        with pytest.raises(InvalidTradeError, match="price"):
            Trade(symbol="AAPL", shares=1.0, price=price, date="2024-06-12")

    def test_should_require_normalized_date(self) -> None:
        """Test dates must already be YYYY-MM-DD."""
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            Trade(symbol="AAPL", shares=1.0, price=1.0, date="06/12/2024")

    def test_should_be_immutable_and_hashable(self) -> None:
        """Test trades can be used as cache keys."""
        trade = Trade(symbol="AAPL", shares=1.0, price=1.0, date="2024-06-12")
        same = Trade(symbol="AAPL", shares=1.0, price=1.0, date="2024-06-12")

        assert hash(trade) == hash(same)
        with pytest.raises(AttributeError):
            trade.shares = 2.0  # type: ignore[misc]


class TestTradeSerialization:
    """Test Trade conversions."""

    def test_should_compute_notional_value(self) -> None:
        """Test notional value ignores direction."""
        trade = Trade(symbol="AAPL", shares=-3.0, price=180.0, date="2024-07-01")

        assert trade.notional_value() == pytest.approx(540.0)

    def test_should_render_raw_row(self) -> None:
        """Test a trade renders back to CSV cell text."""
        trade = Trade(symbol="AAPL", shares=-3.0, price=180.0, date="2024-07-01")

        assert trade.to_row() == {
            "symbol": "AAPL",
            "shares": "-3.0",
            "price": "180.0",
            "date": "2024-07-01",
        }

    def test_should_render_dict(self) -> None:
        """Test the JSON-ready form keeps numbers."""
        trade = Trade(symbol="MSFT", shares=15.0, price=340.5, date="2024-06-15")

        assert trade.to_dict() == {
            "symbol": "MSFT",
            "shares": 15.0,
            "price": 340.5,
            "date": "2024-06-15",
        }

    def test_should_round_trip_through_row_validation(self) -> None:
        """Test a rendered row validates back to the same trade."""
        trade = Trade(symbol="BRK&B", shares=-0.125, price=412.37, date="2024-06-12")

        validated = CSVValidator.validate_row(trade.to_row(), 1, date(2024, 12, 31))

        assert validated.trade == trade
