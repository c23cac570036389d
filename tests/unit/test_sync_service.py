"""Unit tests for SyncService status tracking."""

from datetime import date

import pytest

from tradejournal.core.exceptions import NetworkUnavailableError, NotAuthenticatedError
from tradejournal.domain.models import KeyValueKey, SyncStatus
from tradejournal.services import SyncService

from tests.conftest import ACCOUNT_ID, buy, make_day


@pytest.fixture
def sync_service(sync_engine, identity, memory_key_value_repo) -> SyncService:
    return SyncService(engine=sync_engine, identity=identity, key_value_repo=memory_key_value_repo)


class TestSyncNow:
    """Tests for sync_now."""

    @pytest.mark.asyncio
    async def test_success_records_account_and_result(self, sync_service, memory_key_value_repo):
        result = await sync_service.sync_now()

        assert sync_service.status == SyncStatus.SUCCESS
        assert sync_service.last_result == result
        assert sync_service.last_error is None
        assert await memory_key_value_repo.get_string(KeyValueKey.CURRENT_USER_ID) == ACCOUNT_ID

    @pytest.mark.asyncio
    async def test_signed_out_is_refused_without_io(self, sync_service, identity, remote):
        """
        GIVEN no signed-in account
        WHEN sync is requested
        THEN NotAuthenticatedError is raised and no remote call is made
        """
        identity.account_id = None

        with pytest.raises(NotAuthenticatedError):
            await sync_service.sync_now()

        assert remote.upsert_calls == []
        assert remote.fetch_calls == []
        assert sync_service.status == SyncStatus.IDLE

    @pytest.mark.asyncio
    async def test_failure_is_recorded_and_reraised(
        self, sync_service, memory_trade_day_repo, remote
    ):
        await memory_trade_day_repo.upsert(make_day(date(2025, 1, 6), [buy("1301", 100, 1000)]))
        remote.fail_push = True

        with pytest.raises(NetworkUnavailableError):
            await sync_service.sync_now()

        assert sync_service.status == SyncStatus.FAILED
        assert sync_service.last_error == "Network unavailable"

    @pytest.mark.asyncio
    async def test_recovery_clears_error(self, sync_service, remote):
        remote.fail_pull = True
        with pytest.raises(NetworkUnavailableError):
            await sync_service.sync_now()

        remote.fail_pull = False
        await sync_service.sync_now()

        assert sync_service.status == SyncStatus.SUCCESS
        assert sync_service.last_error is None
