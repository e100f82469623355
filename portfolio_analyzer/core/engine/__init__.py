"""
Portfolio aggregation engine.

Pure functions over validated trades: holdings, metrics and value history.
"""

from collections.abc import Iterable, Sequence

from portfolio_analyzer.core.interfaces.market_data import IMarketDataLookup
from portfolio_analyzer.core.models import Holding, PortfolioHistoryPoint, PortfolioMetrics, Trade

from .history_builder import HistoryBuilder
from .holdings_aggregator import HoldingsAggregator
from .holdings_query import (
    Page,
    filter_holdings,
    filter_trades_by_date_range,
    get_unique_sectors,
    paginate,
)
from .metrics_calculator import MetricsCalculator
from .portfolio_analyzer import PortfolioAnalysis, PortfolioAnalyzer, PortfolioSnapshot


def calculate_holdings(trades: Iterable[Trade], lookup: IMarketDataLookup) -> list[Holding]:
    """Compute current holdings from trades."""
    return HoldingsAggregator(lookup).aggregate(trades)


def calculate_portfolio_metrics(holdings: Sequence[Holding]) -> PortfolioMetrics:
    """Compute portfolio metrics from holdings."""
    return MetricsCalculator().calculate(holdings)


def calculate_portfolio_history(
    trades: Iterable[Trade], lookup: IMarketDataLookup
) -> list[PortfolioHistoryPoint]:
    """Compute the portfolio value history from trades."""
    return HistoryBuilder(HoldingsAggregator(lookup)).build(trades)


__all__ = [
    "HistoryBuilder",
    "HoldingsAggregator",
    "MetricsCalculator",
    "Page",
    "PortfolioAnalysis",
    "PortfolioAnalyzer",
    "PortfolioSnapshot",
    "calculate_holdings",
    "calculate_portfolio_history",
    "calculate_portfolio_metrics",
    "filter_holdings",
    "filter_trades_by_date_range",
    "get_unique_sectors",
    "paginate",
]
