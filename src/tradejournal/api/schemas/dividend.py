"""Pydantic schemas for dividend endpoints."""

from datetime import date as LocalDate
from decimal import Decimal

from pydantic import BaseModel, Field


class DividendResultResponse(BaseModel):
    """Dividend owed for one day."""

    date: LocalDate
    profit: Decimal
    dividend: Decimal


class DividendHistoryResponse(BaseModel):
    items: list[DividendResultResponse]


class DividendSummaryResponse(BaseModel):
    """Response schema for dividend totals."""

    total_dividend: Decimal
    total_loss_share: Decimal
    net_dividend: Decimal


class DividendRatioRequest(BaseModel):
    """Request schema for updating the profit-sharing ratio."""

    numerator: int = Field(..., description="Ratio numerator (values below 1 become 1)")
    denominator: int = Field(..., description="Ratio denominator (values below 1 become 1)")


class DividendRatioResponse(BaseModel):
    numerator: int
    denominator: int
    value: Decimal
