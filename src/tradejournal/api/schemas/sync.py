"""Pydantic schemas for sync endpoints."""

from typing import Optional

from pydantic import BaseModel

from tradejournal.domain.models import SyncStatus


class SyncResponse(BaseModel):
    """
    Outcome of a sync request.

    `skipped` is true when another cycle was already running; the counts
    are then zero. `stale` counts pulled days that lost to a newer local copy.
    """

    skipped: bool = False
    pushed: int = 0
    pulled: int = 0
    applied: int = 0
    stale: int = 0


class SyncStatusResponse(BaseModel):
    status: SyncStatus
    last_error: Optional[str] = None
    last_result: Optional[SyncResponse] = None
