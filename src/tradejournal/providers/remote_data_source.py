"""Remote data source protocol."""

from datetime import datetime
from typing import Protocol

from tradejournal.domain.models import TradeDay


class RemoteDataSource(Protocol):
    """
    Protocol for the remote trade-day store.

    Implementations scope every call to one account and raise SyncError
    subclasses on failure (NetworkUnavailableError, RemoteSyncError).
    """

    async def upsert(self, days: list[TradeDay], account_id: str) -> None:
        """Insert or replace days keyed by id. Empty input performs no I/O."""
        ...

    async def fetch_updated(self, since: datetime, account_id: str) -> list[TradeDay]:
        """Return days with updated_at strictly after `since`, oldest first."""
        ...
