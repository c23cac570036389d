"""Exact decimal money value."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR
from functools import total_ordering
from typing import Union

Number = Union[Decimal, int, str]


def _to_decimal(value: Union[Number, float]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Route through str() so 0.1 becomes Decimal("0.1"), not its binary expansion
        return Decimal(str(value))
    return Decimal(value)


@total_ordering
@dataclass(frozen=True)
class Money:
    """
    Immutable decimal amount.

    All arithmetic stays in Decimal. Division by zero yields zero
    instead of raising, since averages over empty positions are zero.
    """

    amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", _to_decimal(self.amount))

    @classmethod
    def of(cls, value: Union[Number, float]) -> "Money":
        return cls(_to_decimal(value))

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        return Money(self.amount - other.amount)

    def __neg__(self) -> "Money":
        return Money(-self.amount)

    def __mul__(self, factor: Number) -> "Money":
        return Money(self.amount * _to_decimal(factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> "Money":
        divisor = _to_decimal(divisor)
        if divisor == 0:
            return ZERO
        return Money(self.amount / divisor)

    def __lt__(self, other: "Money") -> bool:
        return self.amount < other.amount

    def __abs__(self) -> "Money":
        return Money(abs(self.amount))

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def ceil(self) -> "Money":
        """Round toward positive infinity at integer precision."""
        return Money(self.amount.quantize(Decimal("1"), rounding=ROUND_CEILING))

    def floor(self) -> "Money":
        """Round toward negative infinity at integer precision."""
        return Money(self.amount.quantize(Decimal("1"), rounding=ROUND_FLOOR))

    def formatted(self, show_sign: bool = False) -> str:
        """Format as a yen amount, e.g. ¥1,234 or -¥1,234.5."""
        value = self.amount.quantize(Decimal("0.01"))
        text = f"{abs(value):,.2f}".rstrip("0").rstrip(".")
        if value < 0:
            return f"-¥{text}"
        if show_sign and value > 0:
            return f"+¥{text}"
        return f"¥{text}"

    def __str__(self) -> str:
        return str(self.amount)


ZERO = Money(Decimal("0"))
Money.ZERO = ZERO  # type: ignore[attr-defined]
