"""
CSV validation result models.

Validation problems are reported as data so a caller can show every
problem in a file at once.
"""

from dataclasses import dataclass, field
from typing import Any

from .trade import Trade


@dataclass(frozen=True)
class CSVError:
    """One field-level problem on one row.

    ``row`` is 1-based from the first data row; row 0 with field ``file``
    denotes a document that could not be parsed at all.
    """

    row: int
    field: str
    message: str

    def to_dict(self) -> dict[str, str | int]:
        """JSON-ready representation."""
        return {"row": self.row, "field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidatedRow:
    """Outcome of validating a single row: a trade or errors, never both."""

    trade: Trade | None
    errors: tuple[CSVError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class ParsedCSVResult:
    """Trades accepted from a document plus every error found in it."""

    trades: tuple[Trade, ...] = field(default_factory=tuple)
    errors: tuple[CSVError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """True when no row or file error was found."""
        return len(self.errors) == 0

    def errors_for_row(self, row: int) -> list[CSVError]:
        """Errors attributed to one row number."""
        return [error for error in self.errors if error.row == row]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "trades": [trade.to_dict() for trade in self.trades],
            "errors": [error.to_dict() for error in self.errors],
            "is_valid": self.is_valid,
        }
