"""View models for profit, dividend and statistics outputs."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from tradejournal.domain.models import Money, TradeDay


@dataclass(frozen=True)
class DayProfit:
    """A trade day paired with its realized profit."""

    day: TradeDay
    profit: Money


@dataclass(frozen=True)
class DividendResult:
    """Dividend owed for one day's profit."""

    date: date
    profit: Money
    dividend: Money


@dataclass(frozen=True)
class DividendSummary:
    """Totals over the dividend history."""

    total_dividend: Money
    total_loss_share: Money
    net_dividend: Money


@dataclass
class StockRankingEntry:
    """Realized profit and trade counts attributed to one symbol."""

    symbol: str
    profit: Money = field(default_factory=lambda: Money.ZERO)
    buy_count: int = 0
    sell_count: int = 0


@dataclass(frozen=True)
class TradingStats:
    """Trading-frequency statistics over non-deleted days."""

    total_buy_count: int = 0
    total_sell_count: int = 0
    trading_days: int = 0
    win_days: int = 0
    loss_days: int = 0
    traded_symbol_count: int = 0

    @property
    def total_trade_count(self) -> int:
        return self.total_buy_count + self.total_sell_count

    @property
    def average_daily_trades(self) -> Decimal:
        if self.trading_days <= 0:
            return Decimal("0")
        return Decimal(self.total_trade_count) / Decimal(self.trading_days)

    @property
    def win_rate(self) -> Decimal:
        if self.trading_days <= 0:
            return Decimal("0")
        return Decimal(self.win_days) / Decimal(self.trading_days)

    @property
    def win_rate_percentage(self) -> int:
        """Win rate as a whole percentage, half rounded away from zero."""
        return int((self.win_rate * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class ProfitPoint:
    """One point of the cumulative profit series."""

    date: date
    profit: Money
    cumulative: Money


@dataclass(frozen=True)
class BestWorstDays:
    """Best (positive) and worst (negative) days, if any."""

    best: Optional[DayProfit] = None
    worst: Optional[DayProfit] = None


@dataclass(frozen=True)
class JournalSummary:
    """Dashboard totals."""

    total_profit: Money
    stats: TradingStats
    best_worst: BestWorstDays


@dataclass
class ImportSummary:
    """Summary of a JSON import operation."""

    imported_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
