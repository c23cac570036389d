"""Profit-sharing ratio."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DividendRatio:
    """Share of profit paid out, as numerator/denominator (both clamped to >= 1)."""

    numerator: int = 1
    denominator: int = 3

    def __post_init__(self) -> None:
        object.__setattr__(self, "numerator", max(1, int(self.numerator)))
        object.__setattr__(self, "denominator", max(1, int(self.denominator)))

    @property
    def decimal_value(self) -> Decimal:
        return Decimal(self.numerator) / Decimal(self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


DEFAULT_DIVIDEND_RATIO = DividendRatio(1, 3)
