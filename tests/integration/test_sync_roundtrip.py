"""
Integration tests for sync between two SQLite-backed devices.

Both devices share one in-memory remote, so a change made on one device
travels push -> remote -> pull to the other.
"""

import asyncio
from datetime import date

import pytest
import pytest_asyncio

from tradejournal.core.exceptions import NetworkUnavailableError
from tradejournal.domain.models import SyncState
from tradejournal.repositories.sqlalchemy import (
    Database,
    SqlAlchemyKeyValueRepository,
    SqlAlchemyTradeDayRepository,
)
from tradejournal.services import JournalService, SyncEngine

from tests.conftest import ACCOUNT_ID, InMemoryRemoteDataSource, buy, make_day, sell


class Device:
    """One local store plus the services that run on it."""

    def __init__(self, database: Database, remote: InMemoryRemoteDataSource):
        self.database = database
        self.trade_day_repo = SqlAlchemyTradeDayRepository(database.session_factory)
        self.key_value_repo = SqlAlchemyKeyValueRepository(database.session_factory)
        self.journal = JournalService(self.trade_day_repo, self.key_value_repo)
        self.engine = SyncEngine(self.trade_day_repo, self.key_value_repo, remote)


async def _tick() -> None:
    # Timestamps have millisecond resolution; keep successive edits apart
    await asyncio.sleep(0.005)


async def _device(remote: InMemoryRemoteDataSource) -> Device:
    # Separate engines on :memory: give each device its own database
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.init()
    return Device(database, remote)


@pytest_asyncio.fixture
async def devices(remote):
    first = await _device(remote)
    second = await _device(remote)
    yield first, second
    for device in (first, second):
        await device.database.dispose()


class TestTwoDeviceSync:
    """Changes converge across devices."""

    @pytest.mark.asyncio
    async def test_day_created_on_one_device_reaches_the_other(self, devices):
        phone, laptop = devices
        saved = await phone.journal.add_or_update_day(
            make_day(date(2025, 1, 6), [buy("7203", 100, 1000), sell("7203", 100, 1100)])
        )

        await phone.engine.sync(ACCOUNT_ID)
        result = await laptop.engine.sync(ACCOUNT_ID)

        assert result.applied == 1
        assert await laptop.journal.get_day(saved.id) == saved
        state, _ = await laptop.trade_day_repo.get_sync_metadata(saved.id)
        assert state == SyncState.CLEAN

    @pytest.mark.asyncio
    async def test_deletion_propagates(self, devices):
        phone, laptop = devices
        saved = await phone.journal.add_or_update_day(make_day(date(2025, 1, 6), [buy("7203", 100, 1000)]))
        await phone.engine.sync(ACCOUNT_ID)
        await laptop.engine.sync(ACCOUNT_ID)

        await _tick()
        await laptop.journal.delete_day(saved.id)
        await laptop.engine.sync(ACCOUNT_ID)
        await phone.engine.sync(ACCOUNT_ID)

        assert (await phone.journal.get_day(saved.id)).is_deleted
        assert await phone.journal.list_active_days() == []

    @pytest.mark.asyncio
    async def test_later_edit_wins(self, devices):
        """
        GIVEN both devices hold the same day
        WHEN each edits it and syncs in turn
        THEN both devices converge on the later edit
        """
        phone, laptop = devices
        saved = await phone.journal.add_or_update_day(make_day(date(2025, 1, 6), [buy("7203", 100, 1000)]))
        await phone.engine.sync(ACCOUNT_ID)
        await laptop.engine.sync(ACCOUNT_ID)

        await phone.journal.add_or_update_day(saved.copy(trades=[buy("7203", 200, 1000)]))
        await phone.engine.sync(ACCOUNT_ID)
        await _tick()

        later = await laptop.journal.add_or_update_day(saved.copy(trades=[buy("7203", 300, 1000)]))
        await laptop.engine.sync(ACCOUNT_ID)
        await phone.engine.sync(ACCOUNT_ID)

        for device in (phone, laptop):
            day = await device.journal.get_day(saved.id)
            assert day.trades[0].quantity == 300
            assert day.updated_at == later.updated_at

    @pytest.mark.asyncio
    async def test_failed_push_is_retried(self, devices, remote):
        """
        GIVEN the remote is down during the first sync
        WHEN sync runs again after it recovers
        THEN the dirty day is pushed and becomes clean
        """
        phone, _ = devices
        saved = await phone.journal.add_or_update_day(make_day(date(2025, 1, 6), [buy("7203", 100, 1000)]))
        remote.fail_push = True

        with pytest.raises(NetworkUnavailableError):
            await phone.engine.sync(ACCOUNT_ID)

        state, _ = await phone.trade_day_repo.get_sync_metadata(saved.id)
        assert state == SyncState.DIRTY

        remote.fail_push = False
        await phone.engine.sync(ACCOUNT_ID)

        state, last_synced_at = await phone.trade_day_repo.get_sync_metadata(saved.id)
        assert state == SyncState.CLEAN
        assert last_synced_at is not None
        assert saved.id in remote.days

    @pytest.mark.asyncio
    async def test_edit_saved_during_push_reaches_the_remote(self, devices, remote):
        """
        GIVEN a day whose push is in flight
        WHEN the user saves another trade on it before the push returns
        THEN the edit stays dirty and the next sync delivers it
        """
        phone, _ = devices
        saved = await phone.journal.add_or_update_day(make_day(date(2025, 1, 6), [buy("7203", 100, 1000)]))
        edits = []

        async def save_while_pushing():
            remote.during_upsert = None
            await _tick()
            edits.append(
                await phone.journal.add_or_update_day(
                    saved.copy(trades=[buy("7203", 100, 1000), sell("7203", 50, 1100)])
                )
            )

        remote.during_upsert = save_while_pushing
        await phone.engine.sync(ACCOUNT_ID)

        state, _ = await phone.trade_day_repo.get_sync_metadata(saved.id)
        assert state == SyncState.DIRTY
        assert len(remote.days[saved.id].trades) == 1

        await phone.engine.sync(ACCOUNT_ID)

        state, _ = await phone.trade_day_repo.get_sync_metadata(saved.id)
        assert state == SyncState.CLEAN
        assert remote.days[saved.id] == edits[0]

    @pytest.mark.asyncio
    async def test_repeated_sync_changes_nothing(self, devices):
        phone, _ = devices
        await phone.journal.add_or_update_day(make_day(date(2025, 1, 6), [buy("7203", 100, 1000)]))
        await phone.engine.sync(ACCOUNT_ID)
        before = await phone.journal.list_days()

        result = await phone.engine.sync(ACCOUNT_ID)

        assert result.pushed == 0
        assert result.applied == 0
        assert await phone.journal.list_days() == before
