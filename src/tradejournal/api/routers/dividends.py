"""Dividend (profit-sharing) endpoints."""

from fastapi import APIRouter, Depends

from tradejournal.api.deps import (
    get_dividend_calculator,
    get_journal_service,
    get_preferences_service,
)
from tradejournal.api.schemas import (
    DividendHistoryResponse,
    DividendRatioRequest,
    DividendRatioResponse,
    DividendResultResponse,
    DividendSummaryResponse,
)
from tradejournal.domain.models import DividendRatio
from tradejournal.services import DividendCalculator, JournalService, PreferencesService

router = APIRouter(prefix="/dividends", tags=["dividends"])


def _ratio_response(ratio: DividendRatio) -> DividendRatioResponse:
    return DividendRatioResponse(
        numerator=ratio.numerator,
        denominator=ratio.denominator,
        value=ratio.decimal_value,
    )


@router.get("/history", response_model=DividendHistoryResponse)
async def get_history(
    journal: JournalService = Depends(get_journal_service),
    calculator: DividendCalculator = Depends(get_dividend_calculator),
) -> DividendHistoryResponse:
    """Get the per-day dividend history, newest first."""
    results = calculator.dividend_history(await journal.list_days())
    return DividendHistoryResponse(
        items=[
            DividendResultResponse(
                date=r.date,
                profit=r.profit.amount,
                dividend=r.dividend.amount,
            )
            for r in results
        ]
    )


@router.get("/summary", response_model=DividendSummaryResponse)
async def get_summary(
    journal: JournalService = Depends(get_journal_service),
    calculator: DividendCalculator = Depends(get_dividend_calculator),
) -> DividendSummaryResponse:
    """Get dividend and loss-share totals."""
    summary = calculator.dividend_summary(await journal.list_days())
    return DividendSummaryResponse(
        total_dividend=summary.total_dividend.amount,
        total_loss_share=summary.total_loss_share.amount,
        net_dividend=summary.net_dividend.amount,
    )


@router.get("/ratio", response_model=DividendRatioResponse)
async def get_ratio(
    preferences: PreferencesService = Depends(get_preferences_service),
) -> DividendRatioResponse:
    """Get the stored profit-sharing ratio."""
    return _ratio_response(await preferences.get_dividend_ratio())


@router.put("/ratio", response_model=DividendRatioResponse)
async def set_ratio(
    request: DividendRatioRequest,
    preferences: PreferencesService = Depends(get_preferences_service),
) -> DividendRatioResponse:
    """Store a new profit-sharing ratio."""
    ratio = await preferences.set_dividend_ratio(request.numerator, request.denominator)
    return _ratio_response(ratio)
