"""Supabase (PostgREST) remote data source over httpx."""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from tradejournal.config.settings import Settings, get_settings
from tradejournal.core.clock import format_timestamp, iso_date, parse_local_date, parse_timestamp
from tradejournal.core.exceptions import NetworkUnavailableError, RemoteSyncError
from tradejournal.domain.models import Market, Money, Trade, TradeAction, TradeDay

logger = logging.getLogger(__name__)

TABLE_NAME = "trade_days"


def day_to_row(day: TradeDay, account_id: str) -> dict[str, Any]:
    """Encode a day as a `trade_days` row."""
    return {
        "id": day.id,
        "user_id": account_id,
        "date": iso_date(day.date),
        "payload": {
            "status": "open",
            "trades": [
                {
                    "id": t.id,
                    "symbol": t.symbol,
                    "action": t.action.value,
                    "market": t.market.value,
                    "quantity": t.quantity,
                    "price": str(t.price.amount),
                }
                for t in day.trades
            ],
        },
        "updated_at": format_timestamp(day.updated_at),
        "deleted_at": format_timestamp(day.deleted_at) if day.deleted_at else None,
    }


def row_to_day(row: dict[str, Any]) -> Optional[TradeDay]:
    """
    Decode a `trade_days` row.

    Returns None when the id, date or updated_at cannot be read. Trades
    with an unknown action or market are dropped.
    """
    day_id = row.get("id")
    day_date = parse_local_date(row.get("date") or "")
    if not day_id or day_date is None or not row.get("updated_at"):
        return None

    try:
        updated_at = parse_timestamp(row["updated_at"])
        deleted_at = parse_timestamp(row["deleted_at"]) if row.get("deleted_at") else None
    except (ValueError, TypeError):
        return None

    trades = []
    for item in (row.get("payload") or {}).get("trades", []):
        try:
            kwargs = dict(
                symbol=item["symbol"],
                action=TradeAction(item["action"]),
                market=Market(item.get("market", Market.TSE.value)),
                quantity=int(item["quantity"]),
                price=Money.of(item["price"]),
            )
        except (KeyError, TypeError, ValueError, ArithmeticError):
            continue
        if item.get("id"):
            kwargs["id"] = item["id"]
        trades.append(Trade(**kwargs))

    return TradeDay(
        id=day_id,
        date=day_date,
        trades=trades,
        updated_at=updated_at,
        deleted_at=deleted_at,
    )


class SupabaseDataSource:
    """
    Async PostgREST client for the `trade_days` table.

    Use as an async context manager, or pass a pre-built httpx.AsyncClient
    (e.g. one with a mock transport) which the caller then owns.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or get_settings()
        self.base_url = (self._settings.supabase_url or "").rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "SupabaseDataSource":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, creating one if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.remote_timeout_seconds)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{TABLE_NAME}"

    def _headers(self) -> dict[str, str]:
        """Get headers for a request."""
        anon_key = self._settings.supabase_anon_key or ""
        token = self._settings.supabase_access_token or anon_key
        return {
            "apikey": anon_key,
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    async def upsert(self, days: list[TradeDay], account_id: str) -> None:
        """Upsert days keyed by id (merge duplicates)."""
        if not days:
            return

        headers = self._headers()
        headers["Prefer"] = "resolution=merge-duplicates"
        await self._send(
            "POST",
            self.table_url,
            params={"on_conflict": "id"},
            headers=headers,
            json=[day_to_row(day, account_id) for day in days],
        )
        logger.debug(f"Pushed {len(days)} trade days to remote")

    async def fetch_updated(self, since: datetime, account_id: str) -> list[TradeDay]:
        """Fetch the account's days updated strictly after `since`."""
        resp = await self._send(
            "GET",
            self.table_url,
            params={
                "select": "*",
                "user_id": f"eq.{account_id}",
                "updated_at": f"gt.{format_timestamp(since)}",
                "order": "updated_at.asc",
            },
            headers=self._headers(),
        )

        days = []
        for row in resp.json():
            day = row_to_day(row)
            if day is None:
                logger.warning(f"Skipping undecodable remote row: {row.get('id')!r}")
                continue
            days.append(day)
        return days

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue a request, mapping httpx failures onto sync errors."""
        if not self._settings.remote_configured:
            raise NetworkUnavailableError("Remote store is not configured")
        try:
            resp = await self.client.request(method, url, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteSyncError(
                f"Remote store returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            raise NetworkUnavailableError(f"Remote store unreachable: {e}") from e
        return resp
