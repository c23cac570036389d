"""Enumerations for domain models."""

from enum import Enum, IntEnum


class TradeAction(str, Enum):
    """Direction of a trade execution."""

    BUY = "buy"
    SELL = "sell"


class Market(str, Enum):
    """Listing venue. Affects display only, never accounting."""

    TSE = "tse"  # Primary exchange session
    PTS = "pts"  # Off-exchange (proprietary trading system) session


class SyncState(IntEnum):
    """Local sync metadata for a trade day (stored as an integer)."""

    CLEAN = 0
    DIRTY = 1


class SyncStatus(str, Enum):
    """Outcome of the most recent sync request."""

    IDLE = "idle"
    SYNCING = "syncing"
    SUCCESS = "success"
    FAILED = "failed"


class KeyValueKey(str, Enum):
    """Keys of the durable key-value store."""

    LAST_PULL_AT = "lastPullAt"
    CURRENT_USER_ID = "currentUserId"
    APP_DATA_VERSION = "appDataVersion"
    DIVIDEND_NUMERATOR = "dividendNumerator"
    DIVIDEND_DENOMINATOR = "dividendDenominator"
