"""Lenient scalar fields for imported JSON (int-or-string, number-or-string)."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union


@dataclass(frozen=True)
class FlexibleInt:
    """A value that arrived as either a JSON integer or a string."""

    value: Union[int, str]

    @classmethod
    def parse(cls, raw: Any) -> Optional["FlexibleInt"]:
        """Try int first, then string; anything else is rejected."""
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return cls(raw)
        if isinstance(raw, float) and raw.is_integer():
            return cls(int(raw))
        if isinstance(raw, str):
            return cls(raw)
        return None

    @property
    def is_int(self) -> bool:
        return isinstance(self.value, int)

    @property
    def int_value(self) -> Optional[int]:
        if isinstance(self.value, int):
            return self.value
        try:
            return int(self.value.strip())
        except ValueError:
            return None


@dataclass(frozen=True)
class FlexibleNumber:
    """A value that arrived as either a JSON number or a string."""

    value: Union[int, float, str]

    @classmethod
    def parse(cls, raw: Any) -> Optional["FlexibleNumber"]:
        """Try number first, then string; anything else is rejected."""
        if isinstance(raw, bool):
            return None
        if isinstance(raw, (int, float, str)):
            return cls(raw)
        return None

    @property
    def is_number(self) -> bool:
        return not isinstance(self.value, str)

    @property
    def decimal_value(self) -> Optional[Decimal]:
        try:
            result = Decimal(str(self.value).strip())
        except InvalidOperation:
            return None
        return result if result.is_finite() else None
