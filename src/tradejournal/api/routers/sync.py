"""Sync endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from tradejournal.api.deps import get_sync_service
from tradejournal.api.schemas import SyncResponse, SyncStatusResponse
from tradejournal.services import SyncResult, SyncService

router = APIRouter(prefix="/sync", tags=["sync"])


def _to_response(result: Optional[SyncResult]) -> SyncResponse:
    if result is None:
        return SyncResponse(skipped=True)
    return SyncResponse(
        pushed=result.pushed,
        pulled=result.pulled,
        applied=result.applied,
        stale=result.skipped,
    )


@router.post("", response_model=SyncResponse)
async def sync_now(sync: SyncService = Depends(get_sync_service)) -> SyncResponse:
    """Run one push/pull cycle for the signed-in account."""
    return _to_response(await sync.sync_now())


@router.get("/status", response_model=SyncStatusResponse)
async def get_status(sync: SyncService = Depends(get_sync_service)) -> SyncStatusResponse:
    """Get the outcome of the latest sync request."""
    return SyncStatusResponse(
        status=sync.status,
        last_error=sync.last_error,
        last_result=_to_response(sync.last_result) if sync.last_result else None,
    )
