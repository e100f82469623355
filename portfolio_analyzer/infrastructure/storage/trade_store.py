"""
File-based trade list persistence.

Stores the last validated trade list as JSON so the command line tool can
re-run an analysis without the original CSV. Stale or corrupt files are
discarded on load.
"""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pydantic
from loguru import logger
from pydantic import BaseModel

from portfolio_analyzer.core.constants import STORED_STATE_MAX_AGE_DAYS
from portfolio_analyzer.core.exceptions.portfolio import DataError, ValidationError
from portfolio_analyzer.core.models import Trade


class StoredTrade(BaseModel):
    """Serialized trade."""

    symbol: str
    shares: float
    price: float
    date: str


class StoredTradeList(BaseModel):
    """Serialized trade list with its save time."""

    trades: list[StoredTrade]
    last_updated: datetime


class TradeStore:
    """JSON file store for a single trade list."""

    def __init__(
        self,
        file_path: str | Path,
        max_age: timedelta = timedelta(days=STORED_STATE_MAX_AGE_DAYS),
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the store.

        Args:
            file_path: JSON file holding the trade list
            max_age: Stored lists older than this are discarded on load
            clock: Source of the current UTC time
        """
        self.file_path = Path(file_path)
        self.max_age = max_age
        self._clock = clock or (lambda: datetime.now(UTC))

    def save(self, trades: Iterable[Trade]) -> None:
        """
        Persist a trade list, replacing any previous one.

        Raises:
            DataError: If the file cannot be written
        """
        stored = StoredTradeList(
            trades=[StoredTrade(**trade.to_dict()) for trade in trades],
            last_updated=self._clock(),
        )
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(stored.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save trades to {self.file_path}", exc_info=True)
            raise DataError(f"Failed to save trades to {self.file_path.name}") from e

        logger.info(f"Saved {len(stored.trades)} trades to {self.file_path}")

    def load(self) -> list[Trade] | None:
        """
        Load the stored trade list.

        Returns:
            The trades, or None if nothing usable is stored
        """
        if not self.file_path.exists():
            return None

        try:
            stored = StoredTradeList.model_validate_json(self.file_path.read_text(encoding="utf-8"))
            trades = [Trade(**item.model_dump()) for item in stored.trades]
        except (pydantic.ValidationError, ValidationError, UnicodeDecodeError) as e:
            logger.warning(f"Discarding corrupt trade store {self.file_path.name}: {e}")
            self.clear()
            return None
        except OSError as e:
            logger.error(f"Failed to read trade store {self.file_path.name}: {e}")
            raise DataError(f"Failed to read trade store {self.file_path.name}") from e

        last_updated = stored.last_updated
        if last_updated.tzinfo is None:
            last_updated = last_updated.replace(tzinfo=UTC)
        if self._clock() - last_updated > self.max_age:
            logger.info(
                f"Stored trades are older than {self.max_age.days} days, clearing {self.file_path.name}"
            )
            self.clear()
            return None

        logger.info(f"Loaded {len(trades)} trades from {self.file_path}")
        return trades

    def clear(self) -> bool:
        """Remove the stored trade list. Returns True if a file was removed."""
        try:
            self.file_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise DataError(f"Failed to remove trade store {self.file_path.name}") from e
        return True
