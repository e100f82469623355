"""
Financial helpers for portfolio valuation.

All engine arithmetic is plain float. Rounding helpers exist for display
and export only; the engine never rounds intermediate values so that
incremental and full recomputation stay bit-identical.
"""

import math

# Display precision (number of decimal places)
PRICE_DECIMALS = 2  # 2 decimal places for USD prices
PERCENTAGE_DECIMALS = 2  # 2 decimal places for percentages
SHARE_DECIMALS = 4  # Fractional shares

# Common financial values as float constants
ZERO = 0.0
HUNDRED = 100.0


def to_float(value: str | int | float) -> float:
    """Convert various numeric types to float.

    Args:
        value: Numeric value to convert

    Returns:
        Float representation of the value

    Raises:
        ValueError: If the value is not numeric, uses digit grouping or is not finite

    Examples:
        >>> to_float(150)
        150.0
        >>> to_float(' 1.5 ')
        1.5
    """
    if isinstance(value, str):
        value = value.strip()
        # float() accepts digit grouping underscores, CSV amounts must not
        if "_" in value:
            raise ValueError(f"Value must be a plain decimal number, got {value!r}")
    result = value if isinstance(value, float) else float(value)
    if not math.isfinite(result):
        raise ValueError(f"Value must be finite, got {value}")
    return result


def round_price(price: float) -> float:
    """Round price to display precision."""
    return round(price, PRICE_DECIMALS)


def round_percentage(percentage: float) -> float:
    """Round percentage to display precision."""
    return round(percentage, PERCENTAGE_DECIMALS)


def round_shares(shares: float) -> float:
    """Round share counts to display precision."""
    return round(shares, SHARE_DECIMALS)


def calculate_gain_loss_percent(gain_loss: float, cost: float) -> float:
    """Express a gain or loss as a percentage of its cost.

    Args:
        gain_loss: Absolute gain (positive) or loss (negative)
        cost: Cost basis the gain is measured against

    Returns:
        Percentage gain/loss, or 0 when there is no positive cost
    """
    return (gain_loss / cost) * HUNDRED if cost > ZERO else ZERO
