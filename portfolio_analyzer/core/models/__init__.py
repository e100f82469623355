"""
Portfolio domain models.
"""

from .filters import FilterState
from .history import PortfolioHistoryPoint
from .holding import Holding
from .portfolio_metrics import PerformerSummary, PortfolioMetrics
from .trade import Trade
from .validation_result import CSVError, ParsedCSVResult, ValidatedRow

__all__ = [
    "CSVError",
    "FilterState",
    "Holding",
    "ParsedCSVResult",
    "PerformerSummary",
    "PortfolioHistoryPoint",
    "PortfolioMetrics",
    "Trade",
    "ValidatedRow",
]
