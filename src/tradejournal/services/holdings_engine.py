"""Holdings engine for deriving positions from the trade-day history."""

from datetime import date
from typing import Iterable, Optional

from tradejournal.domain.models import Holding, Money, Trade, TradeDay

Holdings = dict[str, Holding]


def is_accountable(trade: Trade) -> bool:
    """
    Return True if the trade can affect positions.

    Trades with non-positive quantity or price are ignored while replaying.
    This tolerates malformed historical data; it is not input validation.
    """
    return trade.quantity > 0 and trade.price.is_positive


def apply_buy(holdings: Holdings, trade: Trade) -> None:
    """Add a buy to the running holdings (weighted-average cost)."""
    if not is_accountable(trade):
        return
    holding = holdings.get(trade.symbol)
    if holding is None:
        holding = Holding(symbol=trade.symbol, market=trade.market)
        holdings[trade.symbol] = holding
    holding.add_buy(trade.quantity, trade.price, trade.market)


def apply_sell(holdings: Holdings, trade: Trade) -> Money:
    """
    Remove a sell from the running holdings and return its realized profit.

    Realized profit = revenue of the shares actually sold - their average cost.
    Selling a symbol that is not held has no effect and realizes nothing.
    """
    if not is_accountable(trade):
        return Money.ZERO
    holding = holdings.get(trade.symbol)
    if holding is None or holding.is_empty:
        return Money.ZERO

    sold, cost_basis = holding.remove_sell(trade.quantity)
    revenue = trade.price * sold

    if holding.is_empty:
        del holdings[trade.symbol]

    return revenue - cost_basis


def apply_day(holdings: Holdings, day: TradeDay) -> Money:
    """
    Replay one day into the running holdings, buys first, then sells.

    Returns the day's realized profit.
    """
    for trade in day.buy_trades:
        apply_buy(holdings, trade)

    realized = Money.ZERO
    for trade in day.sell_trades:
        realized = realized + apply_sell(holdings, trade)
    return realized


def copy_holdings(holdings: Holdings) -> Holdings:
    """Deep-copy a holdings map so callers can replay without side effects."""
    return {symbol: holding.clone() for symbol, holding in holdings.items()}


def active_days_ascending(days: Iterable[TradeDay]) -> list[TradeDay]:
    """Return non-deleted days sorted by date ascending."""
    return sorted((d for d in days if not d.is_deleted), key=lambda d: d.date)


class HoldingsEngine:
    """
    Engine for computing net positions from trade days.

    Positions are never stored; every call replays the supplied history
    from scratch and returns a new map, so it is safe to call concurrently.
    """

    def compute_holdings(
        self,
        days: Iterable[TradeDay],
        as_of: Optional[date] = None,
    ) -> Holdings:
        """
        Compute positions per symbol.

        Args:
            days: Full trade-day history in any order (tombstones are skipped)
            as_of: Optional inclusive upper bound on the day date

        Returns:
            Map of symbol -> Holding for every non-empty position
        """
        holdings: Holdings = {}

        for day in active_days_ascending(days):
            if as_of is not None and day.date > as_of:
                break
            apply_day(holdings, day)

        return {symbol: h for symbol, h in holdings.items() if not h.is_empty}

    def holdings_by_cost(
        self,
        days: Iterable[TradeDay],
        as_of: Optional[date] = None,
    ) -> list[Holding]:
        """Return positions sorted by cost value descending, then symbol."""
        holdings = self.compute_holdings(days, as_of=as_of)
        return sorted(
            holdings.values(),
            key=lambda h: (-h.total_cost.amount, h.symbol),
        )

    def total_cost(self, days: Iterable[TradeDay], as_of: Optional[date] = None) -> Money:
        """Aggregate cost basis of all open positions."""
        total = Money.ZERO
        for holding in self.compute_holdings(days, as_of=as_of).values():
            total = total + holding.total_cost
        return total
