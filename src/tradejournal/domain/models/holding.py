"""Derived holding model."""

from dataclasses import dataclass, field

from tradejournal.domain.models.enums import Market
from tradejournal.domain.models.money import Money


@dataclass
class Holding:
    """
    Net position in one symbol, derived by replaying trade days.

    IMPORTANT: Never persisted; always rebuilt from the trade history.
    Only the holdings engine mutates instances while replaying.
    """

    symbol: str
    quantity: int = 0
    total_cost: Money = field(default_factory=lambda: Money.ZERO)
    market: Market = Market.TSE

    @property
    def average_price(self) -> Money:
        """Weighted-average cost per share (zero when flat)."""
        if self.quantity <= 0:
            return Money.ZERO
        return self.total_cost / self.quantity

    @property
    def is_empty(self) -> bool:
        return self.quantity <= 0

    def add_buy(self, quantity: int, price: Money, market: Market) -> None:
        self.total_cost = self.total_cost + price * quantity
        self.quantity += quantity
        self.market = market

    def remove_sell(self, quantity: int) -> tuple[int, Money]:
        """
        Remove up to `quantity` shares at average cost.

        Returns (shares actually removed, cost basis of those shares).
        Sells beyond the position are capped; no short positions. Closing the
        position releases the whole remaining cost, so the bases of all sells
        add up to the total bought.
        """
        if self.quantity <= 0:
            return 0, Money.ZERO

        sell_quantity = min(quantity, self.quantity)
        if sell_quantity == self.quantity:
            cost_basis = self.total_cost
        else:
            cost_basis = self.total_cost * sell_quantity / self.quantity

        self.total_cost = self.total_cost - cost_basis
        self.quantity -= sell_quantity

        return sell_quantity, cost_basis

    def clone(self) -> "Holding":
        return Holding(
            symbol=self.symbol,
            quantity=self.quantity,
            total_cost=self.total_cost,
            market=self.market,
        )
