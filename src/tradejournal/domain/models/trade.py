"""Trade and TradeDay domain models."""

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from tradejournal.core.clock import now_utc
from tradejournal.domain.models.enums import TradeAction, Market
from tradejournal.domain.models.money import Money


def new_id() -> str:
    """Generate a new identifier for a trade or trade day."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Trade:
    """
    One buy or sell execution.

    - symbol is normalized to upper case
    - quantity is a whole number of shares
    - price is per unit
    - market is informational; it never changes accounting
    """

    symbol: str
    action: TradeAction
    quantity: int
    price: Money
    market: Market = Market.TSE
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbol", (self.symbol or "").strip().upper())
        if isinstance(self.action, str) and not isinstance(self.action, TradeAction):
            object.__setattr__(self, "action", TradeAction(self.action))
        if isinstance(self.market, str) and not isinstance(self.market, Market):
            object.__setattr__(self, "market", Market(self.market))
        if not isinstance(self.price, Money):
            object.__setattr__(self, "price", Money.of(self.price))

    @property
    def is_buy(self) -> bool:
        return self.action == TradeAction.BUY

    @property
    def is_sell(self) -> bool:
        return self.action == TradeAction.SELL

    @property
    def total_amount(self) -> Money:
        """Return price x quantity."""
        return self.price * self.quantity


@dataclass
class TradeDay:
    """
    All trades of one calendar date; the aggregate a user edits.

    Deletion is a tombstone (deleted_at set) so it can propagate through sync.
    Only one non-deleted day may exist per date; the validator enforces that.
    """

    date: date
    trades: list[Trade] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    updated_at: datetime = field(default_factory=now_utc)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def buy_trades(self) -> list[Trade]:
        return [t for t in self.trades if t.action == TradeAction.BUY]

    @property
    def sell_trades(self) -> list[Trade]:
        return [t for t in self.trades if t.action == TradeAction.SELL]

    def copy(self, **changes) -> "TradeDay":
        """Return a shallow copy with the given fields replaced."""
        return replace(self, trades=list(changes.pop("trades", self.trades)), **changes)
