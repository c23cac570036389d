"""Core utilities and shared functionality."""

from tradejournal.core.clock import (
    now_utc,
    to_utc,
    to_epoch_millis,
    from_epoch_millis,
    parse_timestamp,
    format_timestamp,
    iso_date,
    month_key,
    parse_local_date,
    previous_day,
    UTC,
)
from tradejournal.core.exceptions import (
    AppError,
    ValidationError,
    DuplicateDateError,
    InvalidTradeError,
    NotFoundError,
    SyncError,
    NotAuthenticatedError,
    NetworkUnavailableError,
    RemoteSyncError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "to_epoch_millis",
    "from_epoch_millis",
    "parse_timestamp",
    "format_timestamp",
    "iso_date",
    "month_key",
    "parse_local_date",
    "previous_day",
    "UTC",
    "AppError",
    "ValidationError",
    "DuplicateDateError",
    "InvalidTradeError",
    "NotFoundError",
    "SyncError",
    "NotAuthenticatedError",
    "NetworkUnavailableError",
    "RemoteSyncError",
]
