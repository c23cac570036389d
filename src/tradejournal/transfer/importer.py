"""JSON import functionality."""

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Optional, Union

from tradejournal.core.clock import now_utc, parse_local_date
from tradejournal.core.exceptions import ValidationError
from tradejournal.domain.models import Market, Money, Trade, TradeAction, TradeDay
from tradejournal.domain.views import ImportSummary
from tradejournal.repositories.protocols import TradeDayRepository
from tradejournal.services.validators import TradeDayValidator, TradeValidator
from tradejournal.transfer.fields import FlexibleInt, FlexibleNumber

logger = logging.getLogger(__name__)

# Legacy rows carried only a profit figure; it is replayed as one sell of this size
LEGACY_PROFIT_QUANTITY = 100


class JsonImporter:
    """
    JSON importer for trade-day backups.

    Accepts the export object ({exportedAt, version, days}) or a bare list
    of day objects. Every imported day is stamped updated_at = now and
    saved dirty so the next sync pushes it.
    """

    def __init__(
        self,
        trade_day_repo: TradeDayRepository,
        day_validator: Optional[TradeDayValidator] = None,
        trade_validator: Optional[TradeValidator] = None,
    ):
        self._trade_day_repo = trade_day_repo
        self._day_validator = day_validator or TradeDayValidator()
        self._trade_validator = trade_validator or TradeValidator()

    async def import_file(self, path: str) -> ImportSummary:
        """Import days from a JSON file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ValidationError(f"File not found: {path}")
        return await self.import_json(file_path.read_text(encoding="utf-8"))

    async def import_json(self, data: Union[str, bytes]) -> ImportSummary:
        """
        Import days from JSON text.

        Returns summary with imported/skipped/error counts. Rows without a
        readable id or date are skipped; a date collision with another active
        day is recorded as an error for that row only.
        """
        try:
            document = json.loads(data)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON: {e.msg}")

        return await self.import_document(document)

    async def import_document(self, document: Any) -> ImportSummary:
        """Import days from an already-decoded JSON document."""
        rows = self._extract_days(document)
        if not rows:
            raise ValidationError("No trade days found in import data")

        summary = ImportSummary()
        existing = await self._trade_day_repo.fetch_all()

        for row_num, row in enumerate(rows, start=1):
            day = self._parse_day(row)
            if day is None:
                summary.skipped_count += 1
                logger.info(f"Skipping unreadable import row {row_num}")
                continue

            try:
                self._day_validator.validate(day, existing)
            except ValidationError as e:
                summary.error_count += 1
                summary.errors.append(f"Row {row_num}: {e.message}")
                continue

            await self._trade_day_repo.upsert(day)
            existing = [d for d in existing if d.id != day.id] + [day]
            summary.imported_count += 1

        logger.info(
            f"Import finished: imported={summary.imported_count} "
            f"skipped={summary.skipped_count} errors={summary.error_count}"
        )
        return summary

    @staticmethod
    def _extract_days(document: Any) -> list[Any]:
        if isinstance(document, list):
            return document
        if isinstance(document, dict) and isinstance(document.get("days"), list):
            return document["days"]
        raise ValidationError("Import data must be an object with 'days' or a list of days")

    def _parse_day(self, row: Any) -> Optional[TradeDay]:
        """Convert one day object; None if its id or date is unreadable."""
        if not isinstance(row, dict):
            return None

        try:
            day_id = str(uuid.UUID(str(row.get("id", ""))))
        except ValueError:
            return None

        day_date = parse_local_date(row.get("date") if isinstance(row.get("date"), str) else "")
        if day_date is None:
            return None

        trades = [
            trade
            for trade in (self._parse_trade(item) for item in row.get("trades") or [])
            if trade is not None
        ]

        return TradeDay(
            id=day_id,
            date=day_date,
            trades=self._trade_validator.filter_valid(trades),
            updated_at=now_utc(),
        )

    @staticmethod
    def _parse_trade(item: Any) -> Optional[Trade]:
        """
        Convert one trade object.

        A full row (action, quantity, price) becomes a normal trade.
        Otherwise a non-zero legacy `profit` becomes a synthetic sell of
        LEGACY_PROFIT_QUANTITY shares at |profit| / LEGACY_PROFIT_QUANTITY.
        This reconstruction is lossy.
        """
        if not isinstance(item, dict):
            return None

        symbol = item.get("symbol")
        if not isinstance(symbol, str) or not symbol.strip():
            return None

        quantity = FlexibleInt.parse(item.get("quantity"))
        price = FlexibleNumber.parse(item.get("price"))
        qty_value = quantity.int_value if quantity else None
        price_value = price.decimal_value if price else None

        try:
            action = TradeAction(item["action"]) if "action" in item else None
            market = Market(item.get("market") or Market.TSE.value)
        except (ValueError, TypeError):
            action = None
            market = None

        if action is not None and market is not None and qty_value is not None and price_value is not None:
            return Trade(
                symbol=symbol,
                action=action,
                market=market,
                quantity=qty_value,
                price=Money(price_value),
            )

        profit = FlexibleNumber.parse(item.get("profit"))
        profit_value = profit.decimal_value if profit else None
        if profit_value:
            return Trade(
                symbol=symbol,
                action=TradeAction.SELL,
                market=Market.TSE,
                quantity=LEGACY_PROFIT_QUANTITY,
                price=Money(abs(profit_value)) / LEGACY_PROFIT_QUANTITY,
            )

        return None
