"""Application context for in-process service management.

Owns the database handle, the remote data source and the single sync
engine of the process, and builds services on top of them. Both the HTTP
API and in-process callers go through one AppContext instance.
"""

from typing import Optional

from tradejournal.config.settings import Settings, get_settings
from tradejournal.providers import (
    IdentityProvider,
    RemoteDataSource,
    StaticIdentityProvider,
    SupabaseDataSource,
)
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
    SyncService,
)
from tradejournal.transfer import JsonExporter, JsonImporter


class AppContext:
    """
    Application context providing access to all services.

    Collaborators not supplied at construction are built from settings:
    a Database for the configured URL, a SupabaseDataSource and a
    StaticIdentityProvider.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        database: Optional[Database] = None,
        remote: Optional[RemoteDataSource] = None,
        identity: Optional[IdentityProvider] = None,
    ):
        self.settings = settings or get_settings()
        self._database = database
        self._remote = remote
        self._identity = identity
        self._initialized = False

        # Service instances (lazy initialized)
        self._holdings_engine: Optional[HoldingsEngine] = None
        self._profit_calculator: Optional[ProfitCalculator] = None
        self._analysis_service: Optional[AnalysisService] = None
        self._sync_engine: Optional[SyncEngine] = None
        self._sync_service: Optional[SyncService] = None

    async def initialize(self) -> None:
        """Open the database and create tables."""
        if self._initialized:
            return
        if self._database is None:
            self._database = Database(self.settings.get_database_url())
        await self._database.init()
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def database(self) -> Database:
        if self._database is None:
            raise RuntimeError("AppContext.initialize() has not been awaited")
        return self._database

    # Repository accessors
    @property
    def trade_day_repo(self) -> SqlAlchemyTradeDayRepository:
        return SqlAlchemyTradeDayRepository(self.database.session_factory)

    @property
    def key_value_repo(self) -> SqlAlchemyKeyValueRepository:
        return SqlAlchemyKeyValueRepository(self.database.session_factory)

    @property
    def remote(self) -> RemoteDataSource:
        if self._remote is None:
            self._remote = SupabaseDataSource(self.settings)
        return self._remote

    @property
    def identity(self) -> IdentityProvider:
        if self._identity is None:
            self._identity = StaticIdentityProvider(self.settings)
        return self._identity

    # Service accessors
    @property
    def journal(self) -> JournalService:
        return JournalService(
            trade_day_repo=self.trade_day_repo,
            key_value_repo=self.key_value_repo,
        )

    @property
    def preferences(self) -> PreferencesService:
        return PreferencesService(self.key_value_repo, self.settings)

    @property
    def holdings(self) -> HoldingsEngine:
        if self._holdings_engine is None:
            self._holdings_engine = HoldingsEngine()
        return self._holdings_engine

    @property
    def profit(self) -> ProfitCalculator:
        if self._profit_calculator is None:
            self._profit_calculator = ProfitCalculator(self.holdings)
        return self._profit_calculator

    @property
    def analysis(self) -> AnalysisService:
        if self._analysis_service is None:
            self._analysis_service = AnalysisService(
                profit_calculator=self.profit,
                holdings_engine=self.holdings,
            )
        return self._analysis_service

    async def dividend_calculator(self) -> DividendCalculator:
        """Build a calculator for the currently stored ratio."""
        ratio = await self.preferences.get_dividend_ratio()
        return DividendCalculator(ratio=ratio, profit_calculator=self.profit)

    @property
    def sync_engine(self) -> SyncEngine:
        """The process-wide engine; its lock is what keeps sync single-flight."""
        if self._sync_engine is None:
            self._sync_engine = SyncEngine(
                trade_day_repo=self.trade_day_repo,
                key_value_repo=self.key_value_repo,
                remote=self.remote,
            )
        return self._sync_engine

    @property
    def sync(self) -> SyncService:
        if self._sync_service is None:
            self._sync_service = SyncService(
                engine=self.sync_engine,
                identity=self.identity,
                key_value_repo=self.key_value_repo,
            )
        return self._sync_service

    # JSON utilities
    @property
    def json_importer(self) -> JsonImporter:
        return JsonImporter(trade_day_repo=self.trade_day_repo)

    @property
    def json_exporter(self) -> JsonExporter:
        return JsonExporter(journal_service=self.journal)

    async def close(self) -> None:
        """Clean up resources."""
        if isinstance(self._remote, SupabaseDataSource):
            await self._remote.aclose()
        if self._database is not None:
            await self._database.dispose()
        self._initialized = False
