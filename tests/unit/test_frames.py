"""
Unit tests for tabular export.
"""

from pathlib import Path

import pandas as pd

from portfolio_analyzer.core.models import Holding, PortfolioHistoryPoint, Trade
from portfolio_analyzer.infrastructure.data.frames import (
    HOLDING_COLUMNS,
    export_holdings_csv,
    history_to_frame,
    holdings_to_frame,
    trades_to_frame,
)

HOLDING = Holding(
    symbol="AAPL",
    shares_held=12.0,
    avg_cost_basis=173.5375,
    current_price=175.0,
    current_value=2100.0,
    unrealized_gain_loss=17.55,
    unrealized_gain_loss_percent=0.8428,
    sector="Technology",
)


class TestFrames:
    """Test DataFrame conversions."""

    def test_should_build_holdings_frame(self) -> None:
        """Test one row per holding with model columns."""
        df = holdings_to_frame([HOLDING])

        assert list(df.columns) == HOLDING_COLUMNS
        assert df.loc[0, "symbol"] == "AAPL"
        assert df.loc[0, "current_value"] == 2100.0

    def test_should_build_empty_holdings_frame(self) -> None:
        """Test empty input keeps the columns."""
        df = holdings_to_frame([])

        assert df.empty
        assert list(df.columns) == HOLDING_COLUMNS

    def test_should_index_history_by_date(self) -> None:
        """Test the history frame has a datetime index."""
        df = history_to_frame(
            [
                PortfolioHistoryPoint(date="2024-06-12", value=1750.0, trades=1),
                PortfolioHistoryPoint(date="2024-06-13", value=2950.0, trades=1),
            ]
        )

        assert isinstance(df.index, pd.DatetimeIndex)
        assert df.loc[pd.Timestamp("2024-06-13"), "value"] == 2950.0

    def test_should_build_trades_frame(self) -> None:
        """Test trade rows."""
        df = trades_to_frame([Trade(symbol="AAPL", shares=-3.0, price=180.0, date="2024-07-01")])

        assert df.to_dict("records") == [
            {"symbol": "AAPL", "shares": -3.0, "price": 180.0, "date": "2024-07-01"}
        ]

    def test_should_export_holdings_csv(self, tmp_path: Path) -> None:
        """Test the exported file reads back rounded for display."""
        path = export_holdings_csv([HOLDING], tmp_path / "holdings.csv")

        df = pd.read_csv(path)

        assert list(df.columns) == HOLDING_COLUMNS
        assert df.loc[0, "sector"] == "Technology"
        assert df.loc[0, "unrealized_gain_loss_percent"] == 0.84
        assert df.loc[0, "current_value"] == 2100.0
