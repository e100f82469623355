"""
Market data infrastructure.

Price and sector lookups consumed by the aggregation engine.
"""

from .static_lookup import StaticMarketDataLookup, create_market_data_lookup

__all__ = ["StaticMarketDataLookup", "create_market_data_lookup"]
