"""API routers package."""

from tradejournal.api.routers.days import router as days_router
from tradejournal.api.routers.analysis import router as analysis_router
from tradejournal.api.routers.dividends import router as dividends_router
from tradejournal.api.routers.sync import router as sync_router
from tradejournal.api.routers.transfer import router as transfer_router

__all__ = [
    "days_router",
    "analysis_router",
    "dividends_router",
    "sync_router",
    "transfer_router",
]
