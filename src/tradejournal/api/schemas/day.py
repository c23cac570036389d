"""Pydantic schemas for trade-day endpoints."""

from datetime import date as LocalDate, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tradejournal.domain.models import Market, Money, Trade, TradeAction, TradeDay


class TradeRequest(BaseModel):
    """Request schema for one trade of a day."""

    id: Optional[str] = Field(default=None, description="Trade ID; generated when omitted")
    symbol: str = Field(..., max_length=20, description="Stock symbol or code")
    action: TradeAction = Field(..., description="buy or sell")
    market: Market = Field(default=Market.TSE, description="Listing venue")
    quantity: int = Field(..., description="Number of shares")
    price: Decimal = Field(..., description="Price per share")

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()

    def to_domain(self) -> Trade:
        kwargs = dict(
            symbol=self.symbol,
            action=self.action,
            market=self.market,
            quantity=self.quantity,
            price=Money(self.price),
        )
        if self.id:
            kwargs["id"] = self.id
        return Trade(**kwargs)


class TradeDayRequest(BaseModel):
    """Request schema for creating or replacing a trade day."""

    id: Optional[str] = Field(default=None, description="Day ID; generated when omitted")
    date: LocalDate
    trades: list[TradeRequest] = Field(default_factory=list)

    def to_domain(self) -> TradeDay:
        trades = [t.to_domain() for t in self.trades]
        if self.id:
            return TradeDay(id=self.id, date=self.date, trades=trades)
        return TradeDay(date=self.date, trades=trades)


class TradeResponse(BaseModel):
    """Response schema for a single trade."""

    id: str
    symbol: str
    action: TradeAction
    market: Market
    quantity: int
    price: Decimal
    total_amount: Decimal

    @classmethod
    def from_domain(cls, trade: Trade) -> "TradeResponse":
        return cls(
            id=trade.id,
            symbol=trade.symbol,
            action=trade.action,
            market=trade.market,
            quantity=trade.quantity,
            price=trade.price.amount,
            total_amount=trade.total_amount.amount,
        )


class TradeDayResponse(BaseModel):
    """Response schema for a single trade day."""

    id: str
    date: LocalDate
    trades: list[TradeResponse]
    updated_at: datetime
    deleted_at: Optional[datetime] = None
    is_deleted: bool

    @classmethod
    def from_domain(cls, day: TradeDay) -> "TradeDayResponse":
        return cls(
            id=day.id,
            date=day.date,
            trades=[TradeResponse.from_domain(t) for t in day.trades],
            updated_at=day.updated_at,
            deleted_at=day.deleted_at,
            is_deleted=day.is_deleted,
        )


class TradeDayListResponse(BaseModel):
    """Response schema for day listing."""

    days: list[TradeDayResponse]
    total: int
