"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    HUNDRED,
    PERCENTAGE_DECIMALS,
    PRICE_DECIMALS,
    SHARE_DECIMALS,
    ZERO,
    calculate_gain_loss_percent,
    round_percentage,
    round_price,
    round_shares,
    to_float,
)

__all__ = [
    # Utility functions
    "to_float",
    "round_price",
    "round_percentage",
    "round_shares",
    "calculate_gain_loss_percent",
    # Constants
    "PERCENTAGE_DECIMALS",
    "PRICE_DECIMALS",
    "SHARE_DECIMALS",
    "ZERO",
    "HUNDRED",
]
