"""Validators for trade days and trades."""

import logging
from typing import Iterable, Optional

from tradejournal.core.clock import iso_date
from tradejournal.core.exceptions import DuplicateDateError, InvalidTradeError
from tradejournal.domain.models import Trade, TradeDay

logger = logging.getLogger(__name__)


class TradeDayValidator:
    """Rejects a day whose date is already used by another active day."""

    def validate(self, day: TradeDay, existing_days: Iterable[TradeDay]) -> TradeDay:
        """
        Validate a day before create/update.

        Soft-deleted days and the day itself (same id) never collide.
        Raises DuplicateDateError on collision.
        """
        for other in existing_days:
            if other.id == day.id or other.is_deleted:
                continue
            if other.date == day.date:
                raise DuplicateDateError(iso_date(day.date))
        return day


class TradeValidator:
    """Structural checks for a single trade."""

    def check(self, trade: Trade) -> Optional[str]:
        """Return the rejection reason, or None if the trade is valid."""
        if not trade.symbol.strip():
            return InvalidTradeError.EMPTY_SYMBOL
        if trade.quantity <= 0:
            return InvalidTradeError.INVALID_QUANTITY
        if not trade.price.is_positive:
            return InvalidTradeError.INVALID_PRICE
        return None

    def validate(self, trade: Trade) -> Trade:
        """Raise InvalidTradeError if the trade is invalid; return it otherwise."""
        reason = self.check(trade)
        if reason is not None:
            raise InvalidTradeError(reason)
        return trade

    def is_valid(self, trade: Trade) -> bool:
        return self.check(trade) is None

    def filter_valid(self, trades: Iterable[Trade]) -> list[Trade]:
        """Drop invalid trades (used by the importer)."""
        valid = []
        for trade in trades:
            reason = self.check(trade)
            if reason is None:
                valid.append(trade)
            else:
                logger.debug(f"Dropping invalid trade {trade.symbol!r}: {reason}")
        return valid
