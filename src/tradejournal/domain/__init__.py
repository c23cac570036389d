"""Domain layer - pure business models with no external dependencies."""

from tradejournal.domain.models import (
    Money,
    Trade,
    TradeDay,
    Holding,
    DividendRatio,
    TradeAction,
    Market,
    SyncState,
    SyncStatus,
    KeyValueKey,
)

__all__ = [
    "Money",
    "Trade",
    "TradeDay",
    "Holding",
    "DividendRatio",
    "TradeAction",
    "Market",
    "SyncState",
    "SyncStatus",
    "KeyValueKey",
]
