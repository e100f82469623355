"""
Sorting enumerations for holdings queries.
"""

import re
from enum import StrEnum


class SortDirection(StrEnum):
    """Sort order for holdings tables."""

    ASC = "asc"
    DESC = "desc"

    @property
    def is_descending(self) -> bool:
        """Check if the direction reverses natural order."""
        return self == self.DESC

    @classmethod
    def from_string(cls, value: str) -> "SortDirection":
        """
        Convert string to SortDirection, with case-insensitive matching.

        Raises:
            ValueError: If direction is not supported
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unsupported sort direction: {value}. "
                f"Supported directions: {', '.join([d.value for d in cls])}"
            ) from e


class HoldingSortField(StrEnum):
    """
    Holding attributes a holdings table can be sorted by.

    Values are the Holding dataclass field names.
    """

    SYMBOL = "symbol"
    SHARES_HELD = "shares_held"
    AVG_COST_BASIS = "avg_cost_basis"
    CURRENT_PRICE = "current_price"
    CURRENT_VALUE = "current_value"
    UNREALIZED_GAIN_LOSS = "unrealized_gain_loss"
    UNREALIZED_GAIN_LOSS_PERCENT = "unrealized_gain_loss_percent"
    SECTOR = "sector"

    @property
    def is_text(self) -> bool:
        """Check if the field holds text rather than a number."""
        return self in (self.SYMBOL, self.SECTOR)

    @classmethod
    def from_string(cls, value: str) -> "HoldingSortField":
        """
        Convert string to HoldingSortField.

        Accepts the field name in snake_case or camelCase
        (e.g. "current_value" or "currentValue").

        Raises:
            ValueError: If the field is not sortable
        """
        text = value.strip()
        if not text.isupper():
            text = re.sub(r"(?<!^)(?=[A-Z])", "_", text)
        try:
            return cls(text.lower())
        except ValueError as e:
            raise ValueError(
                f"Unsupported sort field: {value}. "
                f"Supported fields: {', '.join([f.value for f in cls])}"
            ) from e
