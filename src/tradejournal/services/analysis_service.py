"""Analysis service for journal statistics and rankings."""

from datetime import date
from typing import Optional, Sequence

from tradejournal.core.clock import month_key, previous_day
from tradejournal.domain.models import Money, TradeDay
from tradejournal.domain.views import (
    BestWorstDays,
    DayProfit,
    JournalSummary,
    ProfitPoint,
    StockRankingEntry,
    TradingStats,
)
from tradejournal.services.holdings_engine import (
    HoldingsEngine,
    active_days_ascending,
    apply_buy,
    apply_sell,
    copy_holdings,
)
from tradejournal.services.profit_calculator import ProfitCalculator


class AnalysisService:
    """
    Read-only aggregations over the trade-day history.

    Computes best/worst days, per-symbol ranking, trading frequency
    statistics and the cumulative profit series.
    """

    def __init__(
        self,
        profit_calculator: Optional[ProfitCalculator] = None,
        holdings_engine: Optional[HoldingsEngine] = None,
    ):
        self._holdings = holdings_engine or HoldingsEngine()
        self._profit = profit_calculator or ProfitCalculator(self._holdings)

    def day_profits(self, days: Sequence[TradeDay]) -> list[DayProfit]:
        """Pair every non-deleted day with its profit, most profitable first."""
        result = [
            DayProfit(day=day, profit=self._profit.day_profit(day, days))
            for day in days
            if not day.is_deleted
        ]
        result.sort(key=lambda item: item.profit, reverse=True)
        return result

    def best_worst_days(self, days: Sequence[TradeDay]) -> BestWorstDays:
        """
        Best = top day if its profit is positive.
        Worst = bottom day if its profit is negative.
        """
        ranked = self.day_profits(days)
        if not ranked:
            return BestWorstDays()

        best = ranked[0] if ranked[0].profit.is_positive else None
        worst = ranked[-1] if ranked[-1].profit.is_negative else None
        return BestWorstDays(best=best, worst=worst)

    def stock_ranking(self, days: Sequence[TradeDay]) -> list[StockRankingEntry]:
        """
        Attribute realized profit to the symbol sold.

        Each day is replayed against the positions held at the end of the
        previous day, buys before sells. Only symbols that were sold at
        least once appear, sorted by profit descending.
        """
        entries: dict[str, StockRankingEntry] = {}

        def entry_for(symbol: str) -> StockRankingEntry:
            if symbol not in entries:
                entries[symbol] = StockRankingEntry(symbol=symbol)
            return entries[symbol]

        for day in active_days_ascending(days):
            opening = self._holdings.compute_holdings(days, as_of=previous_day(day.date))
            holdings = copy_holdings(opening)

            for trade in day.buy_trades:
                entry_for(trade.symbol).buy_count += 1
                apply_buy(holdings, trade)

            for trade in day.sell_trades:
                entry = entry_for(trade.symbol)
                entry.sell_count += 1
                entry.profit = entry.profit + apply_sell(holdings, trade)

        ranking = [e for e in entries.values() if e.sell_count > 0]
        ranking.sort(key=lambda e: e.profit, reverse=True)
        return ranking

    def trading_stats(self, days: Sequence[TradeDay]) -> TradingStats:
        """Count buys, sells, trading days, win/loss days and distinct symbols."""
        buys = 0
        sells = 0
        trading_days = 0
        win_days = 0
        loss_days = 0
        symbols: set[str] = set()

        for day in days:
            if day.is_deleted:
                continue
            if day.trades:
                trading_days += 1

            for trade in day.trades:
                symbols.add(trade.symbol)
                if trade.is_buy:
                    buys += 1
                else:
                    sells += 1

            profit = self._profit.day_profit(day, days)
            if profit.is_positive:
                win_days += 1
            elif profit.is_negative:
                loss_days += 1

        return TradingStats(
            total_buy_count=buys,
            total_sell_count=sells,
            trading_days=trading_days,
            win_days=win_days,
            loss_days=loss_days,
            traded_symbol_count=len(symbols),
        )

    def month_options(self, days: Sequence[TradeDay]) -> list[str]:
        """Distinct YYYY-MM keys of non-deleted days, newest first."""
        return sorted({month_key(d.date) for d in days if not d.is_deleted}, reverse=True)

    def days_in_month(self, days: Sequence[TradeDay], key: str) -> list[TradeDay]:
        """Non-deleted days of one month, newest first."""
        selected = [d for d in days if not d.is_deleted and month_key(d.date) == key]
        selected.sort(key=lambda d: d.date, reverse=True)
        return selected

    def cumulative_profit_series(
        self,
        days: Sequence[TradeDay],
        since: Optional[date] = None,
    ) -> list[ProfitPoint]:
        """
        Running profit total in date order.

        When `since` is given only days on or after it are included and the
        running total starts from zero inside that window.
        """
        points: list[ProfitPoint] = []
        cumulative = Money.ZERO

        for day in active_days_ascending(days):
            if since is not None and day.date < since:
                continue
            profit = self._profit.day_profit(day, days)
            cumulative = cumulative + profit
            points.append(ProfitPoint(date=day.date, profit=profit, cumulative=cumulative))

        return points

    def summary(self, days: Sequence[TradeDay]) -> JournalSummary:
        """Totals bundle for dashboards."""
        return JournalSummary(
            total_profit=self._profit.total_profit(days),
            stats=self.trading_stats(days),
            best_worst=self.best_worst_days(days),
        )
