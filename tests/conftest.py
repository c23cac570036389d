"""
Pytest configuration and fixtures for trade journal tests.

This module provides:
- In-memory async SQLite database fixtures
- Factory helpers for trades and trade days
- In-memory doubles for the local store, remote store and identity
- Service, engine and API client fixtures
"""

import asyncio
from datetime import date, datetime
from decimal import Decimal
from typing import Awaitable, Callable, Optional

import httpx
import pytest
import pytest_asyncio

from tradejournal.app_context import AppContext
from tradejournal.config.settings import Settings, reset_settings
from tradejournal.core.clock import UTC, now_utc
from tradejournal.core.exceptions import NetworkUnavailableError
from tradejournal.domain.models import (
    DividendRatio,
    KeyValueKey,
    Market,
    Money,
    Trade,
    TradeAction,
    TradeDay,
)
from tradejournal.main import create_app
from tradejournal.repositories.sqlalchemy import (
    Database,
    SqlAlchemyKeyValueRepository,
    SqlAlchemyTradeDayRepository,
)
from tradejournal.services import (
    AnalysisService,
    DividendCalculator,
    HoldingsEngine,
    JournalService,
    PreferencesService,
    ProfitCalculator,
    SyncEngine,
)

MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"
ACCOUNT_ID = "user-1"


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2025, 1, 15, 14, 30, 0)


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def buy(symbol: str, quantity: int, price, market: Market = Market.TSE) -> Trade:
    """Create a buy trade."""
    return Trade(symbol=symbol, action=TradeAction.BUY, quantity=quantity, price=Money.of(price), market=market)


def sell(symbol: str, quantity: int, price, market: Market = Market.TSE) -> Trade:
    """Create a sell trade."""
    return Trade(symbol=symbol, action=TradeAction.SELL, quantity=quantity, price=Money.of(price), market=market)


def make_day(
    day_date: date,
    trades: Optional[list[Trade]] = None,
    updated_at: Optional[datetime] = None,
    deleted_at: Optional[datetime] = None,
    day_id: Optional[str] = None,
) -> TradeDay:
    """Create a trade day."""
    kwargs = dict(
        date=day_date,
        trades=trades or [],
        updated_at=updated_at or now_utc(),
        deleted_at=deleted_at,
    )
    if day_id:
        kwargs["id"] = day_id
    return TradeDay(**kwargs)


# =============================================================================
# IN-MEMORY DOUBLES
# =============================================================================


class InMemoryTradeDayRepository:
    """TradeDayRepository double that keeps days and dirty ids in dicts."""

    def __init__(self):
        self.days: dict[str, TradeDay] = {}
        self.dirty: set[str] = set()
        self.cleaned_ids: list[str] = []
        self.remote_writes: list[str] = []

    async def fetch_all(self) -> list[TradeDay]:
        return sorted(self.days.values(), key=lambda d: d.date, reverse=True)

    async def fetch_by_date(self, day_date: date) -> Optional[TradeDay]:
        matches = [d for d in self.days.values() if d.date == day_date]
        matches.sort(key=lambda d: d.is_deleted)
        return matches[0] if matches else None

    async def fetch_by_id(self, day_id: str) -> Optional[TradeDay]:
        return self.days.get(day_id)

    async def upsert(self, day: TradeDay) -> None:
        self.days[day.id] = day
        self.dirty.add(day.id)

    async def mark_deleted(self, day_id: str) -> None:
        day = self.days.get(day_id)
        if day is None:
            return
        now = now_utc()
        self.days[day_id] = day.copy(deleted_at=now, updated_at=now)
        self.dirty.add(day_id)

    async def fetch_dirty(self) -> list[TradeDay]:
        return [self.days[i] for i in self.dirty if i in self.days]

    async def mark_clean(self, pushed: list[TradeDay]) -> None:
        for day in pushed:
            current = self.days.get(day.id)
            if current is not None and current.updated_at == day.updated_at:
                self.cleaned_ids.append(day.id)
                self.dirty.discard(day.id)

    async def delete_all(self) -> None:
        self.days.clear()
        self.dirty.clear()

    async def upsert_from_remote(self, day: TradeDay) -> None:
        existing = self.days.get(day.id)
        if existing is not None and not existing.updated_at < day.updated_at:
            return
        self.days[day.id] = day
        self.dirty.discard(day.id)
        self.remote_writes.append(day.id)


class InMemoryKeyValueRepository:
    """KeyValueRepository double backed by a dict."""

    def __init__(self):
        self.values: dict[str, str] = {}

    async def get_string(self, key: KeyValueKey) -> Optional[str]:
        return self.values.get(key.value)

    async def set_string(self, key: KeyValueKey, value: str) -> None:
        self.values[key.value] = value

    async def get_int(self, key: KeyValueKey) -> Optional[int]:
        value = self.values.get(key.value)
        try:
            return int(value) if value is not None else None
        except ValueError:
            return None

    async def set_int(self, key: KeyValueKey, value: int) -> None:
        self.values[key.value] = str(value)

    async def delete(self, key: KeyValueKey) -> None:
        self.values.pop(key.value, None)

    async def delete_all(self) -> None:
        self.values.clear()


class InMemoryRemoteDataSource:
    """
    RemoteDataSource double.

    Stores days by id and records every call. `fail_push`/`fail_pull` make
    the next calls raise NetworkUnavailableError; `gate` (an asyncio.Event)
    blocks upsert until set, for overlapping-sync tests. `during_upsert` is
    awaited after the days are stored, to interleave a local edit with a push.
    """

    def __init__(self):
        self.days: dict[str, TradeDay] = {}
        self.upsert_calls: list[list[str]] = []
        self.fetch_calls: list[datetime] = []
        self.fail_push = False
        self.fail_pull = False
        self.gate: Optional[asyncio.Event] = None
        self.during_upsert: Optional[Callable[[], Awaitable[None]]] = None

    async def upsert(self, days: list[TradeDay], account_id: str) -> None:
        if not days:
            return
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_push:
            raise NetworkUnavailableError()
        self.upsert_calls.append([d.id for d in days])
        for day in days:
            self.days[day.id] = day
        if self.during_upsert is not None:
            await self.during_upsert()

    async def fetch_updated(self, since: datetime, account_id: str) -> list[TradeDay]:
        if self.fail_pull:
            raise NetworkUnavailableError()
        self.fetch_calls.append(since)
        return sorted(
            (d for d in self.days.values() if d.updated_at > since),
            key=lambda d: d.updated_at,
        )


class FixedIdentityProvider:
    """IdentityProvider double returning a fixed account id."""

    def __init__(self, account_id: Optional[str] = ACCOUNT_ID):
        self.account_id = account_id

    async def current_account_id(self) -> Optional[str]:
        return self.account_id


@pytest.fixture
def memory_trade_day_repo() -> InMemoryTradeDayRepository:
    return InMemoryTradeDayRepository()


@pytest.fixture
def memory_key_value_repo() -> InMemoryKeyValueRepository:
    return InMemoryKeyValueRepository()


@pytest.fixture
def remote() -> InMemoryRemoteDataSource:
    return InMemoryRemoteDataSource()


@pytest.fixture
def identity() -> FixedIdentityProvider:
    return FixedIdentityProvider()


# =============================================================================
# SETTINGS & DATABASE FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at an in-memory database."""
    reset_settings()
    return Settings(
        database_url=MEMORY_DB_URL,
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon-key",
        account_id=ACCOUNT_ID,
    )


@pytest_asyncio.fixture
async def database() -> Database:
    """Create a shared in-memory database with tables."""
    db = Database(MEMORY_DB_URL)
    await db.init()
    yield db
    await db.drop_all()
    await db.dispose()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def trade_day_repo(database) -> SqlAlchemyTradeDayRepository:
    """Provide test TradeDayRepository."""
    return SqlAlchemyTradeDayRepository(database.session_factory)


@pytest.fixture
def key_value_repo(database) -> SqlAlchemyKeyValueRepository:
    """Provide test KeyValueRepository."""
    return SqlAlchemyKeyValueRepository(database.session_factory)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def holdings_engine() -> HoldingsEngine:
    return HoldingsEngine()


@pytest.fixture
def profit_calculator(holdings_engine) -> ProfitCalculator:
    return ProfitCalculator(holdings_engine)


@pytest.fixture
def dividend_calculator(profit_calculator) -> DividendCalculator:
    return DividendCalculator(DividendRatio(1, 3), profit_calculator)


@pytest.fixture
def analysis_service(profit_calculator, holdings_engine) -> AnalysisService:
    return AnalysisService(profit_calculator=profit_calculator, holdings_engine=holdings_engine)


@pytest.fixture
def journal_service(trade_day_repo, key_value_repo) -> JournalService:
    """Provide test JournalService over the SQLite store."""
    return JournalService(trade_day_repo=trade_day_repo, key_value_repo=key_value_repo)


@pytest.fixture
def preferences_service(key_value_repo, settings) -> PreferencesService:
    return PreferencesService(key_value_repo, settings)


@pytest.fixture
def sync_engine(memory_trade_day_repo, memory_key_value_repo, remote) -> SyncEngine:
    """Provide a SyncEngine over in-memory doubles."""
    return SyncEngine(
        trade_day_repo=memory_trade_day_repo,
        key_value_repo=memory_key_value_repo,
        remote=remote,
    )


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def app_context(settings, remote, identity) -> AppContext:
    """Initialized AppContext with in-memory doubles for remote and identity."""
    context = AppContext(
        settings=settings,
        database=Database(MEMORY_DB_URL),
        remote=remote,
        identity=identity,
    )
    await context.initialize()
    yield context
    await context.close()


@pytest_asyncio.fixture
async def api_client(app_context) -> httpx.AsyncClient:
    """HTTP client bound to the ASGI app."""
    app = create_app(app_context)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# =============================================================================
# PRESET DATA
# =============================================================================


@pytest.fixture
def round_trip_day() -> TradeDay:
    """Buy 100@1000 and sell 100@1100 on the same day."""
    return make_day(
        date(2025, 1, 6),
        [buy("7203", 100, 1000), sell("7203", 100, 1100)],
    )


def money(value) -> Money:
    return Money(Decimal(str(value)))
