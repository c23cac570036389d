"""Business logic services."""

from tradejournal.services.holdings_engine import HoldingsEngine
from tradejournal.services.profit_calculator import ProfitCalculator
from tradejournal.services.dividend_calculator import DividendCalculator
from tradejournal.services.analysis_service import AnalysisService
from tradejournal.services.validators import TradeDayValidator, TradeValidator
from tradejournal.services.journal_service import JournalService
from tradejournal.services.preferences_service import PreferencesService
from tradejournal.services.sync_engine import SyncEngine, SyncResult
from tradejournal.services.sync_service import SyncService

__all__ = [
    "HoldingsEngine",
    "ProfitCalculator",
    "DividendCalculator",
    "AnalysisService",
    "TradeDayValidator",
    "TradeValidator",
    "JournalService",
    "PreferencesService",
    "SyncEngine",
    "SyncResult",
    "SyncService",
]
