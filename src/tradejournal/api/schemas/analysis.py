"""Pydantic schemas for analysis endpoints."""

from datetime import date as LocalDate
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from tradejournal.domain.models import Market


class HoldingResponse(BaseModel):
    """Response schema for one open position."""

    symbol: str
    market: Market
    quantity: int
    total_cost: Decimal
    average_price: Decimal


class HoldingsResponse(BaseModel):
    """Response schema for positions listing."""

    holdings: list[HoldingResponse]
    total_cost: Decimal
    as_of: Optional[LocalDate] = None


class ProfitResponse(BaseModel):
    """Response schema for total and monthly realized profit."""

    total_profit: Decimal
    monthly: dict[str, Decimal]


class DayProfitResponse(BaseModel):
    """Realized profit of one date."""

    date: LocalDate
    profit: Decimal


class DayProfitItem(BaseModel):
    """A ranked day."""

    day_id: str
    date: LocalDate
    profit: Decimal


class BestWorstResponse(BaseModel):
    best: Optional[DayProfitItem] = None
    worst: Optional[DayProfitItem] = None


class RankingEntryResponse(BaseModel):
    """Response schema for one symbol in the ranking."""

    symbol: str
    profit: Decimal
    buy_count: int
    sell_count: int


class RankingResponse(BaseModel):
    entries: list[RankingEntryResponse]


class StatsResponse(BaseModel):
    """Response schema for trading statistics."""

    total_buy_count: int
    total_sell_count: int
    total_trade_count: int
    trading_days: int
    win_days: int
    loss_days: int
    win_rate_percentage: int
    average_daily_trades: Decimal
    traded_symbol_count: int


class SeriesPointResponse(BaseModel):
    date: LocalDate
    profit: Decimal
    cumulative: Decimal


class SeriesResponse(BaseModel):
    """Response schema for the cumulative profit series."""

    points: list[SeriesPointResponse]
    since: Optional[LocalDate] = None


class MonthsResponse(BaseModel):
    months: list[str]
