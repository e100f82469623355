"""
Display formatting helpers.

Used by the command line report and by exports meant for people rather
than programs.
"""


def format_currency(amount: float) -> str:
    """Format an amount as US dollars.

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-12)
        '-$12.00'
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percentage(value: float, decimal_places: int = 2) -> str:
    """Format a percentage with an explicit sign for gains.

    Examples:
        >>> format_percentage(12.345)
        '+12.35%'
        >>> format_percentage(-3.1, 1)
        '-3.1%'
    """
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{decimal_places}f}%"


def format_number(value: float, decimal_places: int = 2) -> str:
    """Format a number with thousands separators and fixed decimals.

    Examples:
        >>> format_number(1234567.891)
        '1,234,567.89'
    """
    return f"{value:,.{decimal_places}f}"
