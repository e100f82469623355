"""
Static price and sector lookup.

Implements IMarketDataLookup over in-memory tables, optionally loaded from a
``symbol,price[,sector]`` CSV file.
"""

import math
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import pandas as pd
from loguru import logger

from portfolio_analyzer.core.constants import DEFAULT_SECTOR, FALLBACK_PRICE_MARKUP
from portfolio_analyzer.core.exceptions.portfolio import ConfigurationError, PriceTableError
from portfolio_analyzer.core.interfaces.market_data import IMarketDataLookup
from portfolio_analyzer.core.utils.validation import is_valid_symbol, normalize_symbol

from .reference_data import REFERENCE_PRICES, REFERENCE_SECTORS


class StaticMarketDataLookup(IMarketDataLookup):
    """
    Read-only lookup backed by fixed price and sector tables.

    The tables are copied on construction and exposed as read-only
    mappings, so a lookup can be shared across threads.
    """

    def __init__(
        self,
        prices: Mapping[str, float] | None = None,
        sectors: Mapping[str, str] | None = None,
        default_sector: str = DEFAULT_SECTOR,
        fallback_price_markup: float = FALLBACK_PRICE_MARKUP,
    ):
        """
        Initialize the lookup.

        Args:
            prices: Symbol to current price (positive)
            sectors: Symbol to sector label
            default_sector: Sector reported for unmapped symbols
            fallback_price_markup: Multiplier over average cost for unpriced symbols

        Raises:
            ConfigurationError: If a price, the markup or the default sector is invalid
        """
        if fallback_price_markup <= 0 or not math.isfinite(fallback_price_markup):
            raise ConfigurationError(
                f"fallback_price_markup must be positive, got {fallback_price_markup}"
            )
        if not default_sector or not default_sector.strip():
            raise ConfigurationError("default_sector cannot be empty")

        price_table = {normalize_symbol(s): float(p) for s, p in (prices or {}).items()}
        for symbol, price in price_table.items():
            if price <= 0 or not math.isfinite(price):
                raise ConfigurationError(f"Price for {symbol} must be positive, got {price}")

        self._prices: Mapping[str, float] = MappingProxyType(price_table)
        self._sectors: Mapping[str, str] = MappingProxyType(
            {normalize_symbol(s): label for s, label in (sectors or {}).items()}
        )
        self.default_sector = default_sector.strip()
        self.fallback_price_markup = float(fallback_price_markup)

    @property
    def prices(self) -> Mapping[str, float]:
        return self._prices

    @property
    def sectors(self) -> Mapping[str, str]:
        return self._sectors

    def get_price(self, symbol: str) -> float | None:
        """Get the current price for a symbol, or None if unmapped."""
        return self._prices.get(symbol)

    def get_sector(self, symbol: str) -> str | None:
        """Get the sector label for a symbol, or None if unmapped."""
        return self._sectors.get(symbol)

    def known_sectors(self) -> list[str]:
        """All sector labels in the table plus the default, sorted."""
        return sorted({*self._sectors.values(), self.default_sector})

    @classmethod
    def reference(
        cls,
        default_sector: str = DEFAULT_SECTOR,
        fallback_price_markup: float = FALLBACK_PRICE_MARKUP,
    ) -> "StaticMarketDataLookup":
        """Lookup over the built-in reference tables."""
        return cls(REFERENCE_PRICES, REFERENCE_SECTORS, default_sector, fallback_price_markup)

    @classmethod
    def from_csv(
        cls,
        file_path: str | Path,
        include_reference: bool = True,
        default_sector: str = DEFAULT_SECTOR,
        fallback_price_markup: float = FALLBACK_PRICE_MARKUP,
    ) -> "StaticMarketDataLookup":
        """
        Load a lookup from a ``symbol,price[,sector]`` CSV file.

        Args:
            file_path: Path to the price table
            include_reference: Start from the reference tables and let the file override them
            default_sector: Sector reported for unmapped symbols
            fallback_price_markup: Multiplier over average cost for unpriced symbols

        Returns:
            Lookup over the merged tables

        Raises:
            PriceTableError: If the file is missing, malformed or holds invalid rows
        """
        path = Path(file_path)
        prices, sectors = _read_price_table(path)

        if include_reference:
            prices = {**REFERENCE_PRICES, **prices}
            sectors = {**REFERENCE_SECTORS, **sectors}

        logger.info(f"Loaded price table {path.name}: {len(prices)} prices, {len(sectors)} sectors")
        return cls(prices, sectors, default_sector, fallback_price_markup)


def _read_price_table(path: Path) -> tuple[dict[str, float], dict[str, str]]:
    """Read and validate a price table file."""
    if not path.exists():
        raise PriceTableError(str(path), "file not found")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise PriceTableError(str(path), "file is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        logger.error(f"Price table parsing error in {path.name}: {e}")
        raise PriceTableError(str(path), str(e)) from e

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing_columns = {"symbol", "price"} - set(df.columns)
    if missing_columns:
        raise PriceTableError(str(path), f"missing columns: {sorted(missing_columns)}")

    prices: dict[str, float] = {}
    sectors: dict[str, str] = {}
    for line_number, record in enumerate(df.to_dict("records"), start=1):
        symbol = normalize_symbol(record["symbol"])
        if not is_valid_symbol(symbol):
            raise PriceTableError(str(path), f"row {line_number}: invalid symbol {symbol!r}")
        try:
            price = float(record["price"])
        except ValueError as e:
            raise PriceTableError(
                str(path), f"row {line_number}: invalid price {record['price']!r}"
            ) from e
        if price <= 0 or not math.isfinite(price):
            raise PriceTableError(str(path), f"row {line_number}: price must be positive")

        prices[symbol] = price
        sector = str(record.get("sector", "")).strip()
        if sector:
            sectors[symbol] = sector

    return prices, sectors


def create_market_data_lookup(
    price_table_path: str | Path | None = None,
    default_sector: str = DEFAULT_SECTOR,
    fallback_price_markup: float = FALLBACK_PRICE_MARKUP,
) -> StaticMarketDataLookup:
    """
    Factory function to create a market data lookup.

    Uses the price table file when given, otherwise the reference tables.
    """
    if price_table_path:
        return StaticMarketDataLookup.from_csv(
            price_table_path,
            default_sector=default_sector,
            fallback_price_markup=fallback_price_markup,
        )
    return StaticMarketDataLookup.reference(default_sector, fallback_price_markup)
