"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from tradejournal.app_context import AppContext
from tradejournal.services import (
    AnalysisService,
    DividendCalculator,
    HoldingsEngine,
    JournalService,
    PreferencesService,
    ProfitCalculator,
    SyncService,
)
from tradejournal.transfer import JsonExporter, JsonImporter


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext attached to the running application."""
    return request.app.state.context


def get_journal_service(context: AppContext = Depends(get_app_context)) -> JournalService:
    """Provide JournalService instance."""
    return context.journal


def get_preferences_service(context: AppContext = Depends(get_app_context)) -> PreferencesService:
    """Provide PreferencesService instance."""
    return context.preferences


def get_holdings_engine(context: AppContext = Depends(get_app_context)) -> HoldingsEngine:
    """Provide HoldingsEngine instance."""
    return context.holdings


def get_profit_calculator(context: AppContext = Depends(get_app_context)) -> ProfitCalculator:
    """Provide ProfitCalculator instance."""
    return context.profit


def get_analysis_service(context: AppContext = Depends(get_app_context)) -> AnalysisService:
    """Provide AnalysisService instance."""
    return context.analysis


async def get_dividend_calculator(
    context: AppContext = Depends(get_app_context),
) -> DividendCalculator:
    """Provide DividendCalculator bound to the stored ratio."""
    return await context.dividend_calculator()


def get_sync_service(context: AppContext = Depends(get_app_context)) -> SyncService:
    """Provide the process-wide SyncService."""
    return context.sync


def get_json_importer(context: AppContext = Depends(get_app_context)) -> JsonImporter:
    """Provide JsonImporter instance."""
    return context.json_importer


def get_json_exporter(context: AppContext = Depends(get_app_context)) -> JsonExporter:
    """Provide JsonExporter instance."""
    return context.json_exporter
