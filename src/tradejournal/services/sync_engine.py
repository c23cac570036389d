"""Offline-first sync between the local store and the remote store."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from tradejournal.core.clock import from_epoch_millis, now_utc, to_epoch_millis
from tradejournal.core.exceptions import NotAuthenticatedError
from tradejournal.domain.models import KeyValueKey
from tradejournal.providers.remote_data_source import RemoteDataSource
from tradejournal.repositories.protocols import KeyValueRepository, TradeDayRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    """Counts from one completed sync cycle."""

    pushed: int = 0
    pulled: int = 0
    applied: int = 0
    skipped: int = 0


class SyncEngine:
    """
    Push-then-pull reconciliation with last-writer-wins merge.

    At most one cycle runs per engine instance; a call made while a cycle
    is in flight returns None without touching either store.

    Push: dirty days (tombstones included) are upserted remotely, then
    marked clean. Marking clean is the commit point, so a failure or
    cancellation before it leaves the days dirty for the next cycle. Only
    the pushed versions are cleaned; a day edited while the push was in
    flight stays dirty.

    Pull: remote days updated after the lastPullAt cursor are merged.
    A remote day replaces a local one only if local.updated_at is strictly
    older; ties keep the local copy.
    """

    def __init__(
        self,
        trade_day_repo: TradeDayRepository,
        key_value_repo: KeyValueRepository,
        remote: RemoteDataSource,
    ):
        self._trade_day_repo = trade_day_repo
        self._key_value_repo = key_value_repo
        self._remote = remote
        self._lock = asyncio.Lock()

    @property
    def is_syncing(self) -> bool:
        return self._lock.locked()

    async def sync(self, account_id: str) -> Optional[SyncResult]:
        """
        Run one push/pull cycle for the account.

        Raises NotAuthenticatedError before any I/O when account_id is empty.
        Remote failures propagate and abort the cycle.
        """
        if not account_id:
            raise NotAuthenticatedError()

        if self._lock.locked():
            logger.info("Sync already in progress; skipping")
            return None

        async with self._lock:
            logger.info("Sync started")
            pushed = await self._push(account_id)
            pulled, applied = await self._pull(account_id)
            result = SyncResult(
                pushed=pushed,
                pulled=pulled,
                applied=applied,
                skipped=pulled - applied,
            )
            logger.info(
                f"Sync finished: pushed={result.pushed} pulled={result.pulled} "
                f"applied={result.applied} skipped={result.skipped}"
            )
            return result

    async def _push(self, account_id: str) -> int:
        dirty = await self._trade_day_repo.fetch_dirty()
        if not dirty:
            return 0

        try:
            await self._remote.upsert(dirty, account_id)
        except Exception:
            logger.warning(f"Push of {len(dirty)} dirty days failed; they stay dirty")
            raise

        await self._trade_day_repo.mark_clean(dirty)
        return len(dirty)

    async def _pull(self, account_id: str) -> tuple[int, int]:
        last_pull_ms = await self._key_value_repo.get_int(KeyValueKey.LAST_PULL_AT) or 0
        since = from_epoch_millis(last_pull_ms)

        try:
            remote_days = await self._remote.fetch_updated(since, account_id)
        except Exception:
            logger.warning("Pull failed; cursor left unchanged")
            raise

        applied = 0
        for remote_day in remote_days:
            local = await self._trade_day_repo.fetch_by_id(remote_day.id)
            if local is None or local.updated_at < remote_day.updated_at:
                await self._trade_day_repo.upsert_from_remote(remote_day)
                applied += 1

        await self._key_value_repo.set_int(KeyValueKey.LAST_PULL_AT, to_epoch_millis(now_utc()))
        return len(remote_days), applied
