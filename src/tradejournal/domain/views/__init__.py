"""View models for service outputs."""

from tradejournal.domain.views.analysis import (
    DayProfit,
    DividendResult,
    DividendSummary,
    StockRankingEntry,
    TradingStats,
    ProfitPoint,
    BestWorstDays,
    JournalSummary,
    ImportSummary,
)

__all__ = [
    "DayProfit",
    "DividendResult",
    "DividendSummary",
    "StockRankingEntry",
    "TradingStats",
    "ProfitPoint",
    "BestWorstDays",
    "JournalSummary",
    "ImportSummary",
]
