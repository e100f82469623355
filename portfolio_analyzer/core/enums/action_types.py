"""
Trade action enumerations.

This module defines the direction of a trade as derived from its signed
share count.
"""

from enum import StrEnum


class ActionType(StrEnum):
    """
    Allowed trade actions.

    A trade with positive shares is a buy, a trade with negative shares is a sell.
    """

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def from_shares(cls, shares: float) -> "ActionType":
        """
        Derive the action from a signed share count.

        Args:
            shares: Signed number of shares (must be non-zero)

        Returns:
            BUY for positive shares, SELL for negative shares

        Raises:
            ValueError: If shares is zero
        """
        if shares > 0:
            return cls.BUY
        if shares < 0:
            return cls.SELL
        raise ValueError("Shares must be non-zero to determine a trade action")

    @property
    def is_buy(self) -> bool:
        """Check if action adds shares."""
        return self is ActionType.BUY
