"""
Holdings aggregation.

Turns a list of trades into current per-symbol holdings using the
average-cost method: a sale removes cost at the running average cost per
share, not the cost of specific earlier lots.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from portfolio_analyzer.core.interfaces.market_data import IMarketDataLookup
from portfolio_analyzer.core.models import Holding, Trade
from portfolio_analyzer.core.types.financial import ZERO, calculate_gain_loss_percent


class HoldingsAggregator:
    """Builds holdings from trades, valued through a market data lookup."""

    def __init__(self, lookup: IMarketDataLookup):
        """
        Initialize the aggregator.

        Args:
            lookup: Read-only price and sector lookup
        """
        self.lookup = lookup

    def aggregate(self, trades: Iterable[Trade]) -> list[Holding]:
        """
        Compute current holdings from a set of trades.

        Args:
            trades: Trades in any order; the input is not modified

        Returns:
            Holdings with shares_held > 0, sorted by current value descending
        """
        holdings = []
        for symbol, symbol_trades in group_trades_by_symbol(trades).items():
            total_shares, total_cost = self.reduce_position(symbol_trades)

            # Flat and short positions are not modeled
            if total_shares <= ZERO:
                logger.debug(f"Dropping {symbol}: net position {total_shares}")
                continue

            holdings.append(self._build_holding(symbol, total_shares, total_cost))

        return sorted(holdings, key=lambda holding: holding.current_value, reverse=True)

    @staticmethod
    def reduce_position(trades: Sequence[Trade]) -> tuple[float, float]:
        """
        Walk one symbol's trades in date order.

        Args:
            trades: Trades for a single symbol

        Returns:
            (total_shares, total_cost) after the last trade; total_shares is
            signed and may be zero or negative, total_cost is never negative
        """
        total_shares = ZERO
        total_cost = ZERO

        for trade in sorted(trades, key=lambda t: t.date):
            if trade.action.is_buy:
                total_cost += abs(trade.shares) * trade.price
                total_shares += trade.shares
            else:
                current_avg_cost = total_cost / total_shares if total_shares > 0 else ZERO
                sold_value = abs(trade.shares) * current_avg_cost
                total_cost = max(ZERO, total_cost - sold_value)
                total_shares += trade.shares

        return total_shares, total_cost

    def _build_holding(self, symbol: str, total_shares: float, total_cost: float) -> Holding:
        """Value a positive position at the looked-up price."""
        avg_cost_basis = total_cost / total_shares
        current_price = self.lookup.resolve_price(symbol, avg_cost_basis)
        current_value = total_shares * current_price
        unrealized_gain_loss = current_value - total_cost

        return Holding(
            symbol=symbol,
            shares_held=total_shares,
            avg_cost_basis=avg_cost_basis,
            current_price=current_price,
            current_value=current_value,
            unrealized_gain_loss=unrealized_gain_loss,
            unrealized_gain_loss_percent=calculate_gain_loss_percent(
                unrealized_gain_loss, total_cost
            ),
            sector=self.lookup.resolve_sector(symbol),
        )


def group_trades_by_symbol(trades: Iterable[Trade]) -> dict[str, list[Trade]]:
    """Group trades by symbol, keeping first-seen symbol order and input order within a group."""
    grouped: dict[str, list[Trade]] = {}
    for trade in trades:
        grouped.setdefault(trade.symbol, []).append(trade)
    return grouped
