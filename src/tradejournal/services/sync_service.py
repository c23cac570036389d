"""User-facing sync use case."""

import logging
from typing import Optional

from tradejournal.core.exceptions import NotAuthenticatedError, SyncError
from tradejournal.domain.models import KeyValueKey, SyncStatus
from tradejournal.providers.identity_provider import IdentityProvider
from tradejournal.repositories.protocols import KeyValueRepository
from tradejournal.services.sync_engine import SyncEngine, SyncResult

logger = logging.getLogger(__name__)


class SyncService:
    """
    Resolves the signed-in account and drives the sync engine.

    Tracks the status of the latest request for display.
    """

    def __init__(
        self,
        engine: SyncEngine,
        identity: IdentityProvider,
        key_value_repo: KeyValueRepository,
    ):
        self._engine = engine
        self._identity = identity
        self._key_value_repo = key_value_repo
        self.status: SyncStatus = SyncStatus.IDLE
        self.last_error: Optional[str] = None
        self.last_result: Optional[SyncResult] = None

    async def sync_now(self) -> Optional[SyncResult]:
        """
        Sync the current account.

        Raises NotAuthenticatedError when nobody is signed in; sync failures
        are recorded on the service and re-raised.
        """
        account_id = await self._identity.current_account_id()
        if not account_id:
            raise NotAuthenticatedError()

        self.status = SyncStatus.SYNCING
        try:
            result = await self._engine.sync(account_id)
        except SyncError as e:
            self.status = SyncStatus.FAILED
            self.last_error = e.message
            raise
        except Exception as e:
            self.status = SyncStatus.FAILED
            self.last_error = str(e)
            raise

        if result is None:
            # Another cycle owns the status
            return None

        await self._key_value_repo.set_string(KeyValueKey.CURRENT_USER_ID, account_id)
        self.status = SyncStatus.SUCCESS
        self.last_error = None
        self.last_result = result
        return result
