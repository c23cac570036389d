"""Journal service for trade-day management."""

import logging
from datetime import date
from typing import Optional

from tradejournal.core.clock import now_utc
from tradejournal.core.exceptions import NotFoundError
from tradejournal.domain.models import TradeDay
from tradejournal.repositories.protocols import KeyValueRepository, TradeDayRepository
from tradejournal.services.validators import TradeDayValidator, TradeValidator

logger = logging.getLogger(__name__)


class JournalService:
    """
    Service for managing the trade journal.

    Handles trade-day CRUD against the local store. Every mutation leaves the
    day dirty so the next sync pushes it; deletion is a tombstone.
    """

    def __init__(
        self,
        trade_day_repo: TradeDayRepository,
        key_value_repo: KeyValueRepository,
        day_validator: Optional[TradeDayValidator] = None,
        trade_validator: Optional[TradeValidator] = None,
    ):
        self._trade_day_repo = trade_day_repo
        self._key_value_repo = key_value_repo
        self._day_validator = day_validator or TradeDayValidator()
        self._trade_validator = trade_validator or TradeValidator()

    async def list_days(self) -> list[TradeDay]:
        """List all days, tombstones included."""
        return await self._trade_day_repo.fetch_all()

    async def list_active_days(self) -> list[TradeDay]:
        """List non-deleted days, newest first."""
        days = await self._trade_day_repo.fetch_all()
        active = [d for d in days if not d.is_deleted]
        active.sort(key=lambda d: d.date, reverse=True)
        return active

    async def get_day_by_date(self, day_date: date) -> Optional[TradeDay]:
        return await self._trade_day_repo.fetch_by_date(day_date)

    async def get_day(self, day_id: str) -> TradeDay:
        """Get day by ID."""
        day = await self._trade_day_repo.fetch_by_id(day_id)
        if day is None:
            raise NotFoundError("TradeDay", day_id)
        return day

    async def add_or_update_day(self, day: TradeDay) -> TradeDay:
        """
        Create or replace a trade day.

        Raises DuplicateDateError if another active day uses the date and
        InvalidTradeError if any trade fails the structural checks. Nothing
        is persisted when validation fails.
        """
        existing = await self._trade_day_repo.fetch_all()
        self._day_validator.validate(day, existing)
        for trade in day.trades:
            self._trade_validator.validate(trade)

        saved = day.copy(updated_at=now_utc())
        await self._trade_day_repo.upsert(saved)
        logger.debug(f"Saved trade day {saved.id} ({saved.date}) with {len(saved.trades)} trades")
        return saved

    async def delete_day(self, day_id: str) -> None:
        """Soft-delete a day so the deletion propagates through sync."""
        await self._trade_day_repo.mark_deleted(day_id)

    async def clear_all(self) -> None:
        """Delete every local day and every key-value entry."""
        await self._trade_day_repo.delete_all()
        await self._key_value_repo.delete_all()
        logger.info("Cleared all local journal data")
