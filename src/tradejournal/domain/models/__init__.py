"""Domain models package."""

from tradejournal.domain.models.enums import (
    TradeAction,
    Market,
    SyncState,
    SyncStatus,
    KeyValueKey,
)
from tradejournal.domain.models.money import Money
from tradejournal.domain.models.trade import Trade, TradeDay, new_id
from tradejournal.domain.models.holding import Holding
from tradejournal.domain.models.dividend_ratio import DividendRatio, DEFAULT_DIVIDEND_RATIO

__all__ = [
    "TradeAction",
    "Market",
    "SyncState",
    "SyncStatus",
    "KeyValueKey",
    "Money",
    "Trade",
    "TradeDay",
    "new_id",
    "Holding",
    "DividendRatio",
    "DEFAULT_DIVIDEND_RATIO",
]
