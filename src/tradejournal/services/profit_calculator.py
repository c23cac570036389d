"""Realized profit per day, month and in total."""

from datetime import date
from typing import Optional, Sequence

from tradejournal.core.clock import month_key, previous_day
from tradejournal.domain.models import Money, TradeDay
from tradejournal.services.holdings_engine import HoldingsEngine, apply_day, copy_holdings


class ProfitCalculator:
    """
    Computes realized profit using weighted-average cost.

    A day's profit is measured against the positions held at the end of
    the previous calendar day; within the day buys are applied before sells,
    so same-day round trips realize against that day's own buys.
    """

    def __init__(self, holdings_engine: Optional[HoldingsEngine] = None):
        self._holdings = holdings_engine or HoldingsEngine()

    def day_profit(self, day: TradeDay, all_days: Sequence[TradeDay]) -> Money:
        """Return the realized profit of a single day (zero for tombstones)."""
        if day.is_deleted:
            return Money.ZERO

        opening = self._holdings.compute_holdings(all_days, as_of=previous_day(day.date))
        return apply_day(copy_holdings(opening), day)

    def total_profit(self, days: Sequence[TradeDay]) -> Money:
        """Sum of day profits over all non-deleted days."""
        total = Money.ZERO
        for day in days:
            if day.is_deleted:
                continue
            total = total + self.day_profit(day, days)
        return total

    def monthly_profit(self, days: Sequence[TradeDay]) -> dict[str, Money]:
        """Day profits bucketed by YYYY-MM; only months with an active day appear."""
        monthly: dict[str, Money] = {}
        for day in days:
            if day.is_deleted:
                continue
            key = month_key(day.date)
            monthly[key] = monthly.get(key, Money.ZERO) + self.day_profit(day, days)
        return monthly

    def profit_for_date(self, days: Sequence[TradeDay], on: date) -> Money:
        """Profit of the active day on the given date, or zero when there is none."""
        for day in days:
            if not day.is_deleted and day.date == on:
                return self.day_profit(day, days)
        return Money.ZERO
