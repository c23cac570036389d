"""Profit and statistics endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradejournal.api.deps import (
    get_analysis_service,
    get_holdings_engine,
    get_journal_service,
    get_profit_calculator,
)
from tradejournal.api.schemas import (
    BestWorstResponse,
    DayProfitItem,
    DayProfitResponse,
    HoldingResponse,
    HoldingsResponse,
    MonthsResponse,
    ProfitResponse,
    RankingEntryResponse,
    RankingResponse,
    SeriesPointResponse,
    SeriesResponse,
    StatsResponse,
)
from tradejournal.domain.views import DayProfit
from tradejournal.services import AnalysisService, HoldingsEngine, JournalService, ProfitCalculator

router = APIRouter(prefix="/analysis", tags=["analysis"])


def _day_item(item: Optional[DayProfit]) -> Optional[DayProfitItem]:
    if item is None:
        return None
    return DayProfitItem(day_id=item.day.id, date=item.day.date, profit=item.profit.amount)


@router.get("/holdings", response_model=HoldingsResponse)
async def get_holdings(
    as_of: Optional[date] = Query(None, description="Inclusive cut-off date (all days if empty)"),
    journal: JournalService = Depends(get_journal_service),
    engine: HoldingsEngine = Depends(get_holdings_engine),
) -> HoldingsResponse:
    """Get open positions derived from the trade history."""
    days = await journal.list_days()
    holdings = engine.holdings_by_cost(days, as_of=as_of)
    return HoldingsResponse(
        holdings=[
            HoldingResponse(
                symbol=h.symbol,
                market=h.market,
                quantity=h.quantity,
                total_cost=h.total_cost.amount,
                average_price=h.average_price.amount,
            )
            for h in holdings
        ],
        total_cost=engine.total_cost(days, as_of=as_of).amount,
        as_of=as_of,
    )


@router.get("/profit", response_model=ProfitResponse)
async def get_profit(
    journal: JournalService = Depends(get_journal_service),
    calculator: ProfitCalculator = Depends(get_profit_calculator),
) -> ProfitResponse:
    """Get total and per-month realized profit."""
    days = await journal.list_days()
    monthly = calculator.monthly_profit(days)
    return ProfitResponse(
        total_profit=calculator.total_profit(days).amount,
        monthly={key: monthly[key].amount for key in sorted(monthly, reverse=True)},
    )


@router.get("/profit/{day_date}", response_model=DayProfitResponse)
async def get_profit_for_date(
    day_date: date,
    journal: JournalService = Depends(get_journal_service),
    calculator: ProfitCalculator = Depends(get_profit_calculator),
) -> DayProfitResponse:
    """Get the realized profit of one date (zero if nothing was traded)."""
    days = await journal.list_days()
    return DayProfitResponse(date=day_date, profit=calculator.profit_for_date(days, day_date).amount)


@router.get("/ranking", response_model=RankingResponse)
async def get_ranking(
    journal: JournalService = Depends(get_journal_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> RankingResponse:
    """Get realized profit per sold symbol."""
    days = await journal.list_days()
    return RankingResponse(
        entries=[
            RankingEntryResponse(
                symbol=e.symbol,
                profit=e.profit.amount,
                buy_count=e.buy_count,
                sell_count=e.sell_count,
            )
            for e in analysis.stock_ranking(days)
        ]
    )


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    journal: JournalService = Depends(get_journal_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> StatsResponse:
    """Get trading-frequency statistics."""
    stats = analysis.trading_stats(await journal.list_days())
    return StatsResponse(
        total_buy_count=stats.total_buy_count,
        total_sell_count=stats.total_sell_count,
        total_trade_count=stats.total_trade_count,
        trading_days=stats.trading_days,
        win_days=stats.win_days,
        loss_days=stats.loss_days,
        win_rate_percentage=stats.win_rate_percentage,
        average_daily_trades=stats.average_daily_trades,
        traded_symbol_count=stats.traded_symbol_count,
    )


@router.get("/best-worst", response_model=BestWorstResponse)
async def get_best_worst(
    journal: JournalService = Depends(get_journal_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> BestWorstResponse:
    """Get the best (positive) and worst (negative) days."""
    result = analysis.best_worst_days(await journal.list_days())
    return BestWorstResponse(best=_day_item(result.best), worst=_day_item(result.worst))


@router.get("/series", response_model=SeriesResponse)
async def get_series(
    since: Optional[date] = Query(None, description="Only include days on or after this date"),
    journal: JournalService = Depends(get_journal_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> SeriesResponse:
    """Get the cumulative profit series."""
    points = analysis.cumulative_profit_series(await journal.list_days(), since=since)
    return SeriesResponse(
        points=[
            SeriesPointResponse(
                date=p.date,
                profit=p.profit.amount,
                cumulative=p.cumulative.amount,
            )
            for p in points
        ],
        since=since,
    )


@router.get("/months", response_model=MonthsResponse)
async def get_months(
    journal: JournalService = Depends(get_journal_service),
    analysis: AnalysisService = Depends(get_analysis_service),
) -> MonthsResponse:
    """Get the months that have trade days, newest first."""
    return MonthsResponse(months=analysis.month_options(await journal.list_days()))
