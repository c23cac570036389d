"""Repository protocol definitions (interfaces)."""

from tradejournal.repositories.protocols.trade_day_repo import TradeDayRepository
from tradejournal.repositories.protocols.key_value_repo import KeyValueRepository

__all__ = [
    "TradeDayRepository",
    "KeyValueRepository",
]
