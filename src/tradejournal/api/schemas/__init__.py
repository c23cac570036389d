"""API request/response schemas."""

from tradejournal.api.schemas.day import (
    TradeRequest,
    TradeDayRequest,
    TradeResponse,
    TradeDayResponse,
    TradeDayListResponse,
)
from tradejournal.api.schemas.analysis import (
    HoldingResponse,
    HoldingsResponse,
    ProfitResponse,
    DayProfitResponse,
    DayProfitItem,
    BestWorstResponse,
    RankingEntryResponse,
    RankingResponse,
    StatsResponse,
    SeriesPointResponse,
    SeriesResponse,
    MonthsResponse,
)
from tradejournal.api.schemas.dividend import (
    DividendResultResponse,
    DividendHistoryResponse,
    DividendSummaryResponse,
    DividendRatioRequest,
    DividendRatioResponse,
)
from tradejournal.api.schemas.sync import SyncResponse, SyncStatusResponse
from tradejournal.api.schemas.transfer import ImportResultResponse

__all__ = [
    "TradeRequest",
    "TradeDayRequest",
    "TradeResponse",
    "TradeDayResponse",
    "TradeDayListResponse",
    "HoldingResponse",
    "HoldingsResponse",
    "ProfitResponse",
    "DayProfitResponse",
    "DayProfitItem",
    "BestWorstResponse",
    "RankingEntryResponse",
    "RankingResponse",
    "StatsResponse",
    "SeriesPointResponse",
    "SeriesResponse",
    "MonthsResponse",
    "DividendResultResponse",
    "DividendHistoryResponse",
    "DividendSummaryResponse",
    "DividendRatioRequest",
    "DividendRatioResponse",
    "SyncResponse",
    "SyncStatusResponse",
    "ImportResultResponse",
]
