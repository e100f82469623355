"""
Custom exception hierarchy for the portfolio analyzer.

This module defines domain-specific exceptions for better error handling.
"""


class PortfolioAnalyzerException(Exception):
    """Base exception for all portfolio-analyzer errors."""

    pass


class ValidationError(PortfolioAnalyzerException):
    """Raised when input validation fails."""

    pass


class DataError(PortfolioAnalyzerException):
    """Raised when data access or processing fails."""

    pass


class CalculationError(PortfolioAnalyzerException):
    """Raised when mathematical calculations fail."""

    pass


class ConfigurationError(PortfolioAnalyzerException):
    """Raised when configuration is invalid."""

    pass


class InvalidTradeError(ValidationError):
    """Raised when a Trade is constructed with a value that breaks its invariants."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid trade {field} {value!r}: {reason}")


class PriceTableError(DataError):
    """Raised when an external price table cannot be loaded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load price table {path}: {reason}")
