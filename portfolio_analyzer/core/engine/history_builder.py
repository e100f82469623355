"""
Portfolio history replay.

Replays trades date by date through the holdings aggregator to produce one
portfolio value per distinct trade date.
"""

from collections.abc import Iterable

from loguru import logger

from portfolio_analyzer.core.models import PortfolioHistoryPoint, Trade
from portfolio_analyzer.core.types.financial import ZERO

from .holdings_aggregator import HoldingsAggregator


class HistoryBuilder:
    """
    Builds a value-over-time series from trades.

    Each point re-runs the full aggregation over every trade dated on or
    before that point, so the last point always equals the valuation of the
    whole trade list. Cost is O(D x T) for D distinct dates and T trades.
    """

    def __init__(self, aggregator: HoldingsAggregator):
        self.aggregator = aggregator

    def build(self, trades: Iterable[Trade]) -> list[PortfolioHistoryPoint]:
        """
        Build the portfolio history.

        Args:
            trades: Trades in any order; the input is not modified

        Returns:
            One point per distinct trade date, ascending by date
        """
        trades_by_date = group_trades_by_date(trades)
        if not trades_by_date:
            return []

        history = []
        cumulative_trades: list[Trade] = []

        for trade_date in sorted(trades_by_date):
            day_trades = trades_by_date[trade_date]
            cumulative_trades.extend(day_trades)

            holdings = self.aggregator.aggregate(cumulative_trades)
            total_value = ZERO
            for holding in holdings:
                total_value += holding.current_value

            history.append(
                PortfolioHistoryPoint(date=trade_date, value=total_value, trades=len(day_trades))
            )

        logger.debug(f"Built {len(history)} history points from {len(cumulative_trades)} trades")
        return history


def group_trades_by_date(trades: Iterable[Trade]) -> dict[str, list[Trade]]:
    """Group trades by exact date string after a stable sort by date."""
    grouped: dict[str, list[Trade]] = {}
    for trade in sorted(trades, key=lambda t: t.date):
        grouped.setdefault(trade.date, []).append(trade)
    return grouped
