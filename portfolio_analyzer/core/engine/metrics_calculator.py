"""
Portfolio metrics calculation.

Reduces a set of holdings to portfolio-wide totals and best/worst performers.
"""

from collections.abc import Sequence

from portfolio_analyzer.core.models import Holding, PerformerSummary, PortfolioMetrics
from portfolio_analyzer.core.types.financial import ZERO, calculate_gain_loss_percent


class MetricsCalculator:
    """Portfolio metrics calculator."""

    def calculate(self, holdings: Sequence[Holding]) -> PortfolioMetrics:
        """
        Calculate portfolio metrics.

        Performers are picked from a stable descending sort by gain/loss
        percent: the first element is the top performer and the last is the
        worst, so with a single holding both refer to it.

        Args:
            holdings: Holdings as produced by HoldingsAggregator

        Returns:
            Portfolio metrics; all zeros with no performers for empty input
        """
        if not holdings:
            return PortfolioMetrics.empty()

        total_value = ZERO
        total_cost = ZERO
        for holding in holdings:
            total_value += holding.current_value
            total_cost += holding.total_cost_basis
        total_gain_loss = total_value - total_cost

        by_performance = sorted(
            holdings, key=lambda holding: holding.unrealized_gain_loss_percent, reverse=True
        )

        return PortfolioMetrics(
            total_value=total_value,
            total_cost=total_cost,
            total_gain_loss=total_gain_loss,
            total_gain_loss_percent=calculate_gain_loss_percent(total_gain_loss, total_cost),
            num_unique_symbols=len(holdings),
            top_performer=self._summarize(by_performance[0]),
            worst_performer=self._summarize(by_performance[-1]),
        )

    @staticmethod
    def _summarize(holding: Holding) -> PerformerSummary:
        return PerformerSummary(
            symbol=holding.symbol, gain_loss_percent=holding.unrealized_gain_loss_percent
        )
