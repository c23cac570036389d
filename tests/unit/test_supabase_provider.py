"""
Unit tests for the Supabase remote data source.

Requests go through httpx.MockTransport so the wire shape can be inspected.
"""

import json
from datetime import date
from decimal import Decimal

import httpx
import pytest

from tradejournal.config.settings import Settings
from tradejournal.core.clock import EPOCH
from tradejournal.core.exceptions import NetworkUnavailableError, RemoteSyncError
from tradejournal.domain.models import Money, TradeAction
from tradejournal.providers import SupabaseDataSource
from tradejournal.providers.supabase_provider import day_to_row, row_to_day

from tests.conftest import ACCOUNT_ID, buy, make_day, sell, utc_datetime

TABLE_PATH = "/rest/v1/trade_days"


def _source(settings: Settings, handler) -> SupabaseDataSource:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SupabaseDataSource(settings=settings, client=client)


def _remote_row(**overrides):
    row = {
        "id": "day-1",
        "user_id": ACCOUNT_ID,
        "date": "2025-01-06",
        "payload": {
            "status": "open",
            "trades": [
                {"id": "t-1", "symbol": "7203", "action": "buy", "market": "tse", "quantity": 100, "price": 1000.0},
            ],
        },
        "updated_at": "2025-01-06T10:00:00.000Z",
        "deleted_at": None,
    }
    row.update(overrides)
    return row


# =============================================================================
# ROW CODEC
# =============================================================================


class TestRowCodec:
    """Tests for trade_days row encoding."""

    def test_day_to_row(self):
        day = make_day(
            date(2025, 1, 6),
            [buy("7203", 100, 1000), sell("7203", 100, "1100.5")],
            updated_at=utc_datetime(2025, 1, 6, 10),
            deleted_at=utc_datetime(2025, 1, 7, 10),
        )

        row = day_to_row(day, ACCOUNT_ID)

        assert row["id"] == day.id
        assert row["user_id"] == ACCOUNT_ID
        assert row["date"] == "2025-01-06"
        assert row["updated_at"] == "2025-01-06T10:00:00.000Z"
        assert row["deleted_at"] == "2025-01-07T10:00:00.000Z"
        assert row["payload"]["status"] == "open"
        assert row["payload"]["trades"][1]["price"] == "1100.5"
        assert row["payload"]["trades"][1]["action"] == "sell"

    def test_prices_survive_the_row_codec_exactly(self):
        price = "1234.567890123456789"
        day = make_day(date(2025, 1, 6), [buy("7203", 100, price)])

        decoded = row_to_day(day_to_row(day, ACCOUNT_ID))

        assert decoded.trades[0].price.amount == Decimal(price)

    def test_row_to_day(self):
        day = row_to_day(_remote_row())

        assert day.id == "day-1"
        assert day.date == date(2025, 1, 6)
        assert day.updated_at == utc_datetime(2025, 1, 6, 10)
        assert not day.is_deleted
        assert day.trades[0].id == "t-1"
        assert day.trades[0].price == Money.of(1000)

    @pytest.mark.parametrize(
        "overrides",
        [{"id": None}, {"date": "2025-02-30"}, {"updated_at": None}, {"updated_at": "yesterday"}],
    )
    def test_undecodable_rows(self, overrides):
        assert row_to_day(_remote_row(**overrides)) is None

    def test_bad_trades_are_dropped(self):
        payload = {
            "trades": [
                {"symbol": "7203", "action": "short", "quantity": 100, "price": 1000},
                {"symbol": "6758", "action": "sell", "quantity": 100, "price": 2000},
            ]
        }

        day = row_to_day(_remote_row(payload=payload))

        assert [t.symbol for t in day.trades] == ["6758"]
        assert day.trades[0].action == TradeAction.SELL


# =============================================================================
# HTTP CLIENT
# =============================================================================


class TestSupabaseDataSource:
    """Tests for requests against the PostgREST endpoint."""

    @pytest.mark.asyncio
    async def test_upsert_request(self, settings):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201)

        day = make_day(date(2025, 1, 6), [buy("7203", 100, 1000)])
        async with _source(settings, handler) as source:
            await source.upsert([day], ACCOUNT_ID)

        request = requests[0]
        assert request.method == "POST"
        assert request.url.host == "example.supabase.co"
        assert request.url.path == TABLE_PATH
        assert request.url.params["on_conflict"] == "id"
        assert request.headers["Prefer"] == "resolution=merge-duplicates"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["Authorization"] == "Bearer anon-key"
        body = json.loads(request.content)
        assert body[0]["id"] == day.id
        assert body[0]["user_id"] == ACCOUNT_ID

    @pytest.mark.asyncio
    async def test_access_token_is_bearer(self, settings):
        settings.supabase_access_token = "user-jwt"
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["Authorization"])
            return httpx.Response(200, json=[])

        async with _source(settings, handler) as source:
            await source.fetch_updated(EPOCH, ACCOUNT_ID)

        assert seen == ["Bearer user-jwt"]

    @pytest.mark.asyncio
    async def test_empty_upsert_is_noop(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        async with _source(settings, handler) as source:
            await source.upsert([], ACCOUNT_ID)

    @pytest.mark.asyncio
    async def test_fetch_updated_request_and_decoding(self, settings):
        """
        GIVEN the remote returns one good and one undecodable row
        WHEN fetching updates since the epoch
        THEN the query filters by account and cursor, and the bad row is skipped
        """
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=[_remote_row(), _remote_row(id="day-2", date="bad")])

        async with _source(settings, handler) as source:
            days = await source.fetch_updated(EPOCH, ACCOUNT_ID)

        params = requests[0].url.params
        assert requests[0].method == "GET"
        assert params["select"] == "*"
        assert params["user_id"] == f"eq.{ACCOUNT_ID}"
        assert params["updated_at"] == "gt.1970-01-01T00:00:00.000Z"
        assert params["order"] == "updated_at.asc"
        assert [d.id for d in days] == ["day-1"]

    @pytest.mark.asyncio
    async def test_error_status_maps_to_remote_sync_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "boom"})

        async with _source(settings, handler) as source:
            with pytest.raises(RemoteSyncError) as exc_info:
                await source.fetch_updated(EPOCH, ACCOUNT_ID)

        assert exc_info.value.status_code == 500
        assert exc_info.value.code == "REMOTE_ERROR"

    @pytest.mark.asyncio
    async def test_transport_error_maps_to_network_unavailable(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        day = make_day(date(2025, 1, 6))
        async with _source(settings, handler) as source:
            with pytest.raises(NetworkUnavailableError):
                await source.upsert([day], ACCOUNT_ID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["supabase_url", "supabase_anon_key"])
    async def test_unconfigured_remote(self, settings, field):
        setattr(settings, field, None)
        source = SupabaseDataSource(settings=settings)

        with pytest.raises(NetworkUnavailableError, match="not configured"):
            await source.fetch_updated(EPOCH, ACCOUNT_ID)
