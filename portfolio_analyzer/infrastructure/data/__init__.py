"""
Trade data infrastructure.

This module provides CSV ingestion and validation of trades, and tabular
export of analysis results.
"""

from .csv_parser import TradeCSVParser, generate_sample_csv, write_sample_csv
from .csv_validator import CSVValidator

__all__ = ["CSVValidator", "TradeCSVParser", "generate_sample_csv", "write_sample_csv"]
