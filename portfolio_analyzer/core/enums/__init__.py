"""
Core enumerations for the portfolio analyzer.

This module provides centralized enumerations for domain concepts
like trade actions and holdings sort options.
"""

from .action_types import ActionType
from .sorting import HoldingSortField, SortDirection

__all__ = ["ActionType", "HoldingSortField", "SortDirection"]
