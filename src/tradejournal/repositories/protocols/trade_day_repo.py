"""Trade-day repository protocol (local store)."""

from datetime import date
from typing import Protocol, Optional

from tradejournal.domain.models import TradeDay


class TradeDayRepository(Protocol):
    """Interface for the local, offline-first trade-day store."""

    async def fetch_all(self) -> list[TradeDay]:
        """List every day, tombstones included, ordered by date descending."""
        ...

    async def fetch_by_date(self, day_date: date) -> Optional[TradeDay]:
        """Retrieve the day for a date, preferring a non-deleted one."""
        ...

    async def fetch_by_id(self, day_id: str) -> Optional[TradeDay]:
        """Retrieve day by ID."""
        ...

    async def upsert(self, day: TradeDay) -> None:
        """Insert or replace a day and mark it dirty."""
        ...

    async def mark_deleted(self, day_id: str) -> None:
        """Tombstone a day (sets deleted_at and updated_at, marks dirty)."""
        ...

    async def fetch_dirty(self) -> list[TradeDay]:
        """List days modified locally but not yet pushed."""
        ...

    async def mark_clean(self, pushed: list[TradeDay]) -> None:
        """
        Mark pushed days as synced and stamp last_synced_at.

        A row is cleaned only while its updated_at still equals the pushed
        copy; a row edited after the push snapshot stays dirty.
        """
        ...

    async def delete_all(self) -> None:
        """Physically delete every local day."""
        ...

    async def upsert_from_remote(self, day: TradeDay) -> None:
        """Write a remote day as clean, bypassing the dirty flag."""
        ...
