"""
Shared API dependencies.
"""

from functools import lru_cache

from portfolio_analyzer.config import get_settings
from portfolio_analyzer.core.engine import PortfolioAnalyzer


@lru_cache
def get_analyzer() -> PortfolioAnalyzer:
    """Process-wide analyzer built from settings."""
    settings = get_settings()
    return PortfolioAnalyzer(settings.build_market_data_lookup(), settings.ANALYSIS_CACHE_SIZE)
