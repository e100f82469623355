"""
Holding domain model.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Holding:
    """Net position and valuation for one symbol as of a trade cutoff.

    Holdings are derived values: the aggregator builds a fresh set on every
    call and only emits symbols with ``shares_held > 0``.
    """

    symbol: str
    shares_held: float
    avg_cost_basis: float
    current_price: float
    current_value: float
    unrealized_gain_loss: float
    unrealized_gain_loss_percent: float
    sector: str

    @property
    def total_cost_basis(self) -> float:
        """Cost of all currently held shares."""
        return self.shares_held * self.avg_cost_basis

    def to_dict(self) -> dict[str, str | float]:
        """JSON-ready representation."""
        return asdict(self)
