"""JSON export functionality."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

from tradejournal.core.clock import format_timestamp, iso_date, now_utc
from tradejournal.domain.models import TradeDay
from tradejournal.services.journal_service import JournalService

EXPORT_VERSION = "3.0"


def _json_number(value: Decimal) -> Union[int, float]:
    """Emit integral prices as JSON integers, others as floats."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def day_to_export(day: TradeDay) -> dict[str, Any]:
    """Encode one day in the backup format."""
    return {
        "id": day.id,
        "date": iso_date(day.date),
        "status": "open",
        "trades": [
            {
                "symbol": t.symbol,
                "action": t.action.value,
                "market": t.market.value,
                "quantity": t.quantity,
                "price": _json_number(t.price.amount),
            }
            for t in day.trades
        ],
        "updatedAt": format_timestamp(day.updated_at),
        "deletedAt": None,
    }


class JsonExporter:
    """
    JSON exporter for trade-day backups.

    Exports non-deleted days only; the output can be fed back to JsonImporter.
    """

    def __init__(self, journal_service: JournalService):
        self._journal = journal_service

    async def export_data(self) -> dict[str, Any]:
        """Build the export document."""
        days = await self._journal.list_active_days()
        return {
            "exportedAt": format_timestamp(now_utc()),
            "version": EXPORT_VERSION,
            "days": [day_to_export(day) for day in days],
        }

    async def export_json(self) -> str:
        """Export as pretty-printed JSON with sorted keys."""
        return json.dumps(await self.export_data(), indent=2, sort_keys=True, ensure_ascii=False)

    async def export_file(self, path: str) -> None:
        """Write the export to a file."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(await self.export_json(), encoding="utf-8")
