"""Repository layer - data access abstractions and implementations."""

from tradejournal.repositories.protocols import (
    TradeDayRepository,
    KeyValueRepository,
)

__all__ = [
    "TradeDayRepository",
    "KeyValueRepository",
]
