"""
Market data lookup interface.

The aggregation engine reads current prices and sector labels through this
interface so that it stays a pure function of its explicit inputs.
"""

from abc import ABC, abstractmethod

from portfolio_analyzer.core.constants import DEFAULT_SECTOR, FALLBACK_PRICE_MARKUP


class IMarketDataLookup(ABC):
    """Abstract read-only price and sector lookup."""

    default_sector: str = DEFAULT_SECTOR
    fallback_price_markup: float = FALLBACK_PRICE_MARKUP

    @abstractmethod
    def get_price(self, symbol: str) -> float | None:
        """Get the current price for a symbol, or None if unmapped."""
        pass

    @abstractmethod
    def get_sector(self, symbol: str) -> str | None:
        """Get the sector label for a symbol, or None if unmapped."""
        pass

    def resolve_price(self, symbol: str, avg_cost_basis: float) -> float:
        """Current price, falling back to a markup over the average cost."""
        price = self.get_price(symbol)
        if price is None:
            return avg_cost_basis * self.fallback_price_markup
        return price

    def resolve_sector(self, symbol: str) -> str:
        """Sector label, falling back to the default sector."""
        sector = self.get_sector(symbol)
        return sector if sector else self.default_sector

    def known_sectors(self) -> list[str]:
        """Sector labels this lookup can assign, sorted."""
        return [self.default_sector]
