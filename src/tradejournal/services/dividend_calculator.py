"""Dividend (profit-sharing) calculations."""

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from tradejournal.domain.models import DividendRatio, DEFAULT_DIVIDEND_RATIO, Money, TradeDay
from tradejournal.domain.views import DividendResult, DividendSummary
from tradejournal.services.profit_calculator import ProfitCalculator

# Share of a positive profit that is split, after the tax-equivalent haircut
PAYOUT_FACTOR = Decimal("0.8")


class DividendCalculator:
    """
    Maps realized profit through the profit-sharing ratio.

    Gains: ceil(profit x ratio x 0.8). Losses: floor(profit x ratio).
    Both round at integer precision, so the loss share rounds up in magnitude.
    """

    def __init__(
        self,
        ratio: DividendRatio = DEFAULT_DIVIDEND_RATIO,
        profit_calculator: Optional[ProfitCalculator] = None,
    ):
        self.ratio = ratio
        self._profit = profit_calculator or ProfitCalculator()

    def dividend(self, profit: Money) -> Money:
        """Return the dividend (or negative loss share) for a profit figure."""
        # numerator and denominator applied separately to keep e.g. 30000 x 1/3 exact
        scaled = profit * self.ratio.numerator
        if profit.is_negative:
            return (scaled / self.ratio.denominator).floor()
        return (scaled * PAYOUT_FACTOR / self.ratio.denominator).ceil()

    def dividend_history(self, days: Sequence[TradeDay]) -> list[DividendResult]:
        """Per-day (date, profit, dividend) for days with non-zero profit, newest first."""
        results = []
        for day in days:
            if day.is_deleted:
                continue
            profit = self._profit.day_profit(day, days)
            if profit.is_zero:
                continue
            results.append(
                DividendResult(date=day.date, profit=profit, dividend=self.dividend(profit))
            )
        results.sort(key=lambda r: r.date, reverse=True)
        return results

    def dividend_summary(self, days: Sequence[TradeDay]) -> DividendSummary:
        total_dividend = Money.ZERO
        total_loss_share = Money.ZERO

        for day in days:
            if day.is_deleted:
                continue
            dividend = self.dividend(self._profit.day_profit(day, days))
            if dividend.is_negative:
                total_loss_share = total_loss_share + abs(dividend)
            else:
                total_dividend = total_dividend + dividend

        return DividendSummary(
            total_dividend=total_dividend,
            total_loss_share=total_loss_share,
            net_dividend=total_dividend - total_loss_share,
        )

    def dividend_for_date(self, days: Sequence[TradeDay], on: date) -> Money:
        """Dividend of the active day on the given date ("today's dividend")."""
        return self.dividend(self._profit.profit_for_date(days, on))
