"""
Portfolio value history.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PortfolioHistoryPoint:
    """Portfolio value after all trades up to and including ``date``.

    ``trades`` counts only the trades executed on ``date`` itself.
    """

    date: str
    value: float
    trades: int

    def to_dict(self) -> dict[str, str | float | int]:
        """JSON-ready representation."""
        return asdict(self)
