"""
Portfolio-wide summary statistics.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PerformerSummary:
    """A symbol and its unrealized gain/loss percent."""

    symbol: str
    gain_loss_percent: float


@dataclass(frozen=True)
class PortfolioMetrics:
    """Aggregate snapshot derived from a set of holdings."""

    total_value: float
    total_cost: float
    total_gain_loss: float
    total_gain_loss_percent: float
    num_unique_symbols: int
    top_performer: PerformerSummary | None
    worst_performer: PerformerSummary | None

    @classmethod
    def empty(cls) -> "PortfolioMetrics":
        """Metrics of a portfolio with no holdings."""
        return cls(
            total_value=0.0,
            total_cost=0.0,
            total_gain_loss=0.0,
            total_gain_loss_percent=0.0,
            num_unique_symbols=0,
            top_performer=None,
            worst_performer=None,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return asdict(self)
