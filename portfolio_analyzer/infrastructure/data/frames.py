"""
Tabular export of analysis results.

Converts engine outputs into pandas DataFrames for CSV export and
notebook use.
"""

from collections.abc import Iterable
from dataclasses import fields
from pathlib import Path

import pandas as pd
from loguru import logger

from portfolio_analyzer.core.models import Holding, PortfolioHistoryPoint, Trade
from portfolio_analyzer.core.types.financial import round_percentage, round_price, round_shares

HOLDING_COLUMNS = [f.name for f in fields(Holding)]
HISTORY_COLUMNS = [f.name for f in fields(PortfolioHistoryPoint)]
TRADE_COLUMNS = [f.name for f in fields(Trade)]


def holdings_to_frame(holdings: Iterable[Holding]) -> pd.DataFrame:
    """One row per holding, in the given order."""
    return pd.DataFrame([holding.to_dict() for holding in holdings], columns=HOLDING_COLUMNS)


def history_to_frame(history: Iterable[PortfolioHistoryPoint]) -> pd.DataFrame:
    """History as a frame indexed by trade date."""
    df = pd.DataFrame([point.to_dict() for point in history], columns=HISTORY_COLUMNS)
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
    return df.set_index("date")


def trades_to_frame(trades: Iterable[Trade]) -> pd.DataFrame:
    """One row per trade, in the given order."""
    return pd.DataFrame([trade.to_dict() for trade in trades], columns=TRADE_COLUMNS)


def export_holdings_csv(holdings: Iterable[Holding], file_path: str | Path) -> Path:
    """Write holdings to a CSV file, rounded to display precision."""
    path = Path(file_path)
    df = holdings_to_frame(holdings)
    df["shares_held"] = df["shares_held"].map(round_shares)
    for column in ("avg_cost_basis", "current_price", "current_value", "unrealized_gain_loss"):
        df[column] = df[column].map(round_price)
    df["unrealized_gain_loss_percent"] = df["unrealized_gain_loss_percent"].map(round_percentage)
    df.to_csv(path, index=False)
    logger.info(f"Exported {len(df)} holdings to {path}")
    return path
