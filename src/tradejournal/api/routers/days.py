"""Trade-day management endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, status

from tradejournal.api.deps import get_journal_service
from tradejournal.api.schemas import TradeDayListResponse, TradeDayRequest, TradeDayResponse
from tradejournal.core.clock import iso_date
from tradejournal.core.exceptions import NotFoundError
from tradejournal.services import JournalService

router = APIRouter(prefix="/days", tags=["days"])


@router.get("", response_model=TradeDayListResponse)
async def list_days(
    include_deleted: bool = False,
    journal: JournalService = Depends(get_journal_service),
) -> TradeDayListResponse:
    """List trade days, newest first."""
    if include_deleted:
        days = await journal.list_days()
    else:
        days = await journal.list_active_days()
    return TradeDayListResponse(
        days=[TradeDayResponse.from_domain(d) for d in days],
        total=len(days),
    )


@router.get("/by-date/{day_date}", response_model=TradeDayResponse)
async def get_day_by_date(
    day_date: date,
    journal: JournalService = Depends(get_journal_service),
) -> TradeDayResponse:
    """Get the day recorded for a date."""
    day = await journal.get_day_by_date(day_date)
    if day is None or day.is_deleted:
        raise NotFoundError("TradeDay", iso_date(day_date))
    return TradeDayResponse.from_domain(day)


@router.get("/{day_id}", response_model=TradeDayResponse)
async def get_day(
    day_id: str,
    journal: JournalService = Depends(get_journal_service),
) -> TradeDayResponse:
    """Get a day by ID."""
    return TradeDayResponse.from_domain(await journal.get_day(day_id))


@router.put("", response_model=TradeDayResponse)
async def save_day(
    request: TradeDayRequest,
    journal: JournalService = Depends(get_journal_service),
) -> TradeDayResponse:
    """Create or replace a trade day."""
    saved = await journal.add_or_update_day(request.to_domain())
    return TradeDayResponse.from_domain(saved)


@router.delete("/{day_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_day(
    day_id: str,
    journal: JournalService = Depends(get_journal_service),
) -> None:
    """Soft-delete a day."""
    await journal.get_day(day_id)
    await journal.delete_day(day_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_all(
    journal: JournalService = Depends(get_journal_service),
) -> None:
    """Delete all local data."""
    await journal.clear_all()
