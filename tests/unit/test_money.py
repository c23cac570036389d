"""Unit tests for Money and clock helpers."""

from datetime import date
from decimal import Decimal

from tradejournal.core.clock import (
    format_timestamp,
    from_epoch_millis,
    month_key,
    parse_local_date,
    parse_timestamp,
    to_epoch_millis,
)
from tradejournal.domain.models import Money

from tests.conftest import utc_datetime


class TestMoney:
    """Tests for decimal arithmetic."""

    def test_float_input_has_no_binary_noise(self):
        assert Money.of(0.1) + Money.of(0.2) == Money.of("0.3")

    def test_arithmetic(self):
        assert Money.of(1100) * 100 - Money.of(100000) == Money.of(10000)
        assert -Money.of(5) == Money.of(-5)
        assert abs(Money.of(-5)) == Money.of(5)

    def test_division_by_zero_is_zero(self):
        assert Money.of(100) / 0 == Money.ZERO

    def test_ceil_and_floor(self):
        assert Money(Decimal("2666.67")).ceil() == Money.of(2667)
        assert Money(Decimal("-3333.33")).floor() == Money.of(-3334)

    def test_ordering_and_predicates(self):
        assert Money.of(-1) < Money.ZERO < Money.of(1)
        assert Money.of(1).is_positive
        assert Money.of(-1).is_negative
        assert Money(Decimal("0.00")).is_zero

    def test_formatted(self):
        assert Money.of(1234).formatted() == "¥1,234"
        assert Money.of("1234.5").formatted(show_sign=True) == "+¥1,234.5"
        assert Money.of(-800).formatted() == "-¥800"


class TestClock:
    """Tests for date and timestamp helpers."""

    def test_epoch_millis_round_trip(self):
        moment = utc_datetime(2025, 1, 15, 14, 30, 5)

        assert from_epoch_millis(to_epoch_millis(moment)) == moment

    def test_parse_and_format_timestamp(self):
        parsed = parse_timestamp("2025-01-15T14:30:05.123456Z")

        assert format_timestamp(parsed) == "2025-01-15T14:30:05.123Z"
        assert parse_timestamp("2025-01-15T14:30:05") == utc_datetime(2025, 1, 15, 14, 30, 5)

    def test_parse_local_date(self):
        assert parse_local_date("2025-01-06") == date(2025, 1, 6)
        assert parse_local_date("2025-02-30") is None
        assert parse_local_date("not a date") is None

    def test_month_key(self):
        assert month_key(date(2025, 3, 9)) == "2025-03"
