"""
Portfolio analyzer.

Turns a list of dated stock trades into holdings, portfolio metrics and a
value-over-time history.
"""

__version__ = "1.0.0"
