"""
Core constants and limits.

Defines system-wide constants shared by the validator, the aggregation
engine and the outer surfaces.
"""

# Trade Validation
SYMBOL_PATTERN = r"^[A-Z0-9&]{1,15}$"
TRADE_COLUMNS = ("symbol", "shares", "price", "date")
ISO_DATE_FORMAT = "%Y-%m-%d"
MIN_TRADE_YEAR = 1000  # Four-digit years only, so dates always normalize to YYYY-MM-DD
SUPPORTED_DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%m-%d-%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)
FILE_ERROR_ROW = 0  # Structural errors are attributed to the header row
FILE_ERROR_FIELD = "file"

# Market Data Defaults
FALLBACK_PRICE_MARKUP = 1.05  # Synthetic 5% markup when a symbol has no price
DEFAULT_SECTOR = "Other"

# Holdings Queries
ALL_SECTORS = "all"
DEFAULT_ITEMS_PER_PAGE = 10
MAX_ITEMS_PER_PAGE = 500

# Caching & Storage
DEFAULT_ANALYSIS_CACHE_SIZE = 32  # Distinct trade lists kept by the analyzer
STORED_STATE_MAX_AGE_DAYS = 30  # Stored trade lists older than this are discarded
