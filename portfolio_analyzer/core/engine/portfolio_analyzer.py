"""
Portfolio analyzer - orchestrates the aggregation engine.

This module provides the main analysis entry point by composing the focused
components: holdings aggregation, metrics calculation, history replay and
holdings queries.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from threading import RLock
from typing import Any

from cachetools import LRUCache
from loguru import logger

from portfolio_analyzer.core.constants import DEFAULT_ANALYSIS_CACHE_SIZE
from portfolio_analyzer.core.interfaces.market_data import IMarketDataLookup
from portfolio_analyzer.core.models import (
    FilterState,
    Holding,
    PortfolioHistoryPoint,
    PortfolioMetrics,
    Trade,
)

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


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Holdings, metrics and history for one exact trade list."""

    holdings: tuple[Holding, ...]
    metrics: PortfolioMetrics
    history: tuple[PortfolioHistoryPoint, ...]


@dataclass(frozen=True)
class PortfolioAnalysis:
    """View model handed to presentation layers."""

    trades: tuple[Trade, ...]
    holdings: tuple[Holding, ...]
    metrics: PortfolioMetrics
    history: tuple[PortfolioHistoryPoint, ...]
    sectors: list[str]
    filtered_holdings: Page[Holding]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        page = self.filtered_holdings
        return {
            "holdings": [holding.to_dict() for holding in self.holdings],
            "metrics": self.metrics.to_dict(),
            "history": [point.to_dict() for point in self.history],
            "sectors": self.sectors,
            "page": {
                "items": [holding.to_dict() for holding in page.items],
                "total_pages": page.total_pages,
                "total_items": page.total_items,
                "start_index": page.start_index,
                "end_index": page.end_index,
            },
        }


class PortfolioAnalyzer:
    """
    Main analysis service.

    Composes the engine components:
    - HoldingsAggregator: trades to holdings
    - MetricsCalculator: holdings to portfolio metrics
    - HistoryBuilder: trades to value history

    Snapshots are memoized per exact trade list in a bounded LRU cache, so
    repeated calls with new filters over the same trades skip the
    O(dates x trades) history replay. Cached snapshots are identical to a
    fresh computation because every component is a pure function of the
    trades and the read-only lookup.
    """

    def __init__(self, lookup: IMarketDataLookup, cache_size: int = DEFAULT_ANALYSIS_CACHE_SIZE):
        """
        Initialize the analyzer.

        Args:
            lookup: Read-only price and sector lookup
            cache_size: Maximum number of distinct trade lists kept
        """
        self.lookup = lookup
        self._aggregator = HoldingsAggregator(lookup)
        self._metrics = MetricsCalculator()
        self._history = HistoryBuilder(self._aggregator)

        self._cache_lock = RLock()
        self._cache: LRUCache[tuple[Trade, ...], PortfolioSnapshot] = LRUCache(maxsize=cache_size)
        self._cache_hits = 0
        self._cache_misses = 0

    def calculate_holdings(self, trades: Iterable[Trade]) -> list[Holding]:
        """Compute current holdings."""
        return self._aggregator.aggregate(trades)

    def calculate_metrics(self, holdings: list[Holding]) -> PortfolioMetrics:
        """Compute portfolio metrics from holdings."""
        return self._metrics.calculate(holdings)

    def calculate_history(self, trades: Iterable[Trade]) -> list[PortfolioHistoryPoint]:
        """Compute the value history."""
        return self._history.build(trades)

    def snapshot(self, trades: Iterable[Trade]) -> PortfolioSnapshot:
        """Holdings, metrics and history for a trade list (cached)."""
        key = tuple(trades)

        with self._cache_lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache_hits += 1
                return cached
            self._cache_misses += 1

        holdings = self._aggregator.aggregate(key)
        snapshot = PortfolioSnapshot(
            holdings=tuple(holdings),
            metrics=self._metrics.calculate(holdings),
            history=tuple(self._history.build(key)),
        )

        with self._cache_lock:
            self._cache[key] = snapshot

        logger.info(
            f"Analyzed {len(key)} trades: {len(snapshot.holdings)} holdings, "
            f"{len(snapshot.history)} history points"
        )
        return snapshot

    def analyze(
        self, trades: Iterable[Trade], filters: FilterState | None = None
    ) -> PortfolioAnalysis:
        """
        Run the full analysis and apply holdings filters.

        The filter date range restricts the trades before aggregation; the
        search, sector, sort and page settings only shape the holdings page.

        Args:
            trades: Validated trades
            filters: View filters, defaults to FilterState()

        Returns:
            Analysis view model

        Raises:
            ValidationError: If the date range or page settings are invalid
        """
        filters = filters or FilterState()
        selected = tuple(trades)
        if filters.has_date_range:
            selected = tuple(
                filter_trades_by_date_range(selected, filters.date_from, filters.date_to)
            )

        snapshot = self.snapshot(selected)
        filtered = filter_holdings(
            snapshot.holdings,
            filters.search_term,
            filters.selected_sector,
            filters.sort_by,
            filters.sort_direction,
        )

        return PortfolioAnalysis(
            trades=selected,
            holdings=snapshot.holdings,
            metrics=snapshot.metrics,
            history=snapshot.history,
            sectors=get_unique_sectors(snapshot.holdings),
            filtered_holdings=paginate(filtered, filters.current_page, filters.items_per_page),
        )

    def clear_cache(self) -> None:
        """Clear the snapshot cache (thread-safe)."""
        with self._cache_lock:
            self._cache.clear()
            logger.debug("Analysis cache cleared")

    def get_cache_info(self) -> dict[str, int]:
        """Get cache statistics (thread-safe)."""
        with self._cache_lock:
            return {
                "size": len(self._cache),
                "max_size": int(self._cache.maxsize),
                "hits": self._cache_hits,
                "misses": self._cache_misses,
            }
