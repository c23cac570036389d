"""SQLAlchemy implementation of TradeDayRepository."""

from datetime import date
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import async_sessionmaker

from tradejournal.core.clock import (
    from_epoch_millis,
    iso_date,
    now_utc,
    parse_local_date,
    to_epoch_millis,
)
from tradejournal.domain.models import SyncState, TradeDay
from tradejournal.repositories.sqlalchemy.orm_models import TradeDayORM
from tradejournal.repositories.sqlalchemy.payload import decode_trades, encode_trades


class SqlAlchemyTradeDayRepository:
    """SQLAlchemy-backed local trade-day store."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def fetch_all(self) -> list[TradeDay]:
        """List every day, tombstones included, ordered by date descending."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(TradeDayORM).order_by(TradeDayORM.date.desc())
            )
            return self._to_domain_list(result.scalars().all())

    async def fetch_by_date(self, day_date: date) -> Optional[TradeDay]:
        """Retrieve the day for a date, preferring a non-deleted one."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(TradeDayORM)
                .where(TradeDayORM.date == iso_date(day_date))
                .order_by(
                    TradeDayORM.deleted_at.is_not(None),
                    TradeDayORM.updated_at.desc(),
                )
                .limit(1)
            )
            orm_day = result.scalars().first()
            return self._to_domain(orm_day) if orm_day else None

    async def fetch_by_id(self, day_id: str) -> Optional[TradeDay]:
        """Retrieve day by ID."""
        async with self._session_factory() as session:
            orm_day = await session.get(TradeDayORM, day_id)
            return self._to_domain(orm_day) if orm_day else None

    async def upsert(self, day: TradeDay) -> None:
        """Insert or replace a day and mark it dirty."""
        async with self._session_factory() as session:
            orm_day = await session.get(TradeDayORM, day.id)
            if orm_day is None:
                session.add(self._to_orm(day, SyncState.DIRTY))
            else:
                self._apply(orm_day, day)
                orm_day.sync_state = int(SyncState.DIRTY)
            await session.commit()

    async def mark_deleted(self, day_id: str) -> None:
        """Tombstone a day (sets deleted_at and updated_at, marks dirty)."""
        async with self._session_factory() as session:
            orm_day = await session.get(TradeDayORM, day_id)
            if orm_day is None:
                return

            now_ms = to_epoch_millis(now_utc())
            orm_day.deleted_at = now_ms
            orm_day.updated_at = now_ms
            orm_day.sync_state = int(SyncState.DIRTY)
            await session.commit()

    async def fetch_dirty(self) -> list[TradeDay]:
        """List days modified locally but not yet pushed."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(TradeDayORM).where(TradeDayORM.sync_state == int(SyncState.DIRTY))
            )
            return self._to_domain_list(result.scalars().all())

    async def mark_clean(self, pushed: list[TradeDay]) -> None:
        """Mark pushed days as synced unless edited since the push snapshot."""
        if not pushed:
            return
        now_ms = to_epoch_millis(now_utc())
        async with self._session_factory() as session:
            for day in pushed:
                await session.execute(
                    update(TradeDayORM)
                    .where(
                        TradeDayORM.id == day.id,
                        TradeDayORM.updated_at == to_epoch_millis(day.updated_at),
                    )
                    .values(sync_state=int(SyncState.CLEAN), last_synced_at=now_ms)
                )
            await session.commit()

    async def delete_all(self) -> None:
        """Physically delete every local day."""
        async with self._session_factory() as session:
            await session.execute(delete(TradeDayORM))
            await session.commit()

    async def upsert_from_remote(self, day: TradeDay) -> None:
        """
        Write a remote day as clean, bypassing the dirty flag.

        An existing row is replaced only when it is strictly older than the
        remote copy (ties keep the local row).
        """
        async with self._session_factory() as session:
            orm_day = await session.get(TradeDayORM, day.id)
            now_ms = to_epoch_millis(now_utc())

            if orm_day is None:
                orm_day = self._to_orm(day, SyncState.CLEAN)
                orm_day.last_synced_at = now_ms
                session.add(orm_day)
            elif orm_day.updated_at < to_epoch_millis(day.updated_at):
                self._apply(orm_day, day)
                orm_day.sync_state = int(SyncState.CLEAN)
                orm_day.last_synced_at = now_ms
            else:
                return

            await session.commit()

    async def get_sync_metadata(self, day_id: str) -> Optional[tuple[SyncState, Optional[int]]]:
        """Return (sync_state, last_synced_at epoch millis) for a day."""
        async with self._session_factory() as session:
            orm_day = await session.get(TradeDayORM, day_id)
            if orm_day is None:
                return None
            return SyncState(orm_day.sync_state), orm_day.last_synced_at

    @staticmethod
    def _apply(orm_day: TradeDayORM, day: TradeDay) -> None:
        """Copy domain fields onto an existing ORM row."""
        orm_day.date = iso_date(day.date)
        orm_day.payload = encode_trades(day.trades)
        orm_day.updated_at = to_epoch_millis(day.updated_at)
        orm_day.deleted_at = to_epoch_millis(day.deleted_at) if day.deleted_at else None

    @staticmethod
    def _to_orm(day: TradeDay, sync_state: SyncState) -> TradeDayORM:
        """Convert domain model to ORM model."""
        return TradeDayORM(
            id=day.id,
            date=iso_date(day.date),
            payload=encode_trades(day.trades),
            updated_at=to_epoch_millis(day.updated_at),
            deleted_at=to_epoch_millis(day.deleted_at) if day.deleted_at else None,
            sync_state=int(sync_state),
            last_synced_at=None,
        )

    @staticmethod
    def _to_domain(orm: TradeDayORM) -> Optional[TradeDay]:
        """Convert ORM model to domain model (None if the date is unreadable)."""
        day_date = parse_local_date(orm.date)
        if day_date is None:
            return None
        return TradeDay(
            id=orm.id,
            date=day_date,
            trades=decode_trades(orm.payload),
            updated_at=from_epoch_millis(orm.updated_at),
            deleted_at=from_epoch_millis(orm.deleted_at) if orm.deleted_at is not None else None,
        )

    def _to_domain_list(self, rows) -> list[TradeDay]:
        days = (self._to_domain(row) for row in rows)
        return [d for d in days if d is not None]
