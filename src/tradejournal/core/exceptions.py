"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class DuplicateDateError(ValidationError):
    """Raised when another active trade day already uses the same date."""

    def __init__(self, date_iso: str):
        self.date_iso = date_iso
        super().__init__(
            f"A trade day already exists for {date_iso}",
            code="DUPLICATE_DATE",
        )


class InvalidTradeError(ValidationError):
    """Raised when a trade fails the structural checks."""

    EMPTY_SYMBOL = "empty_symbol"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"

    _MESSAGES = {
        EMPTY_SYMBOL: "Trade symbol must not be empty",
        INVALID_QUANTITY: "Trade quantity must be greater than 0",
        INVALID_PRICE: "Trade price must be greater than 0",
    }

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(self._MESSAGES.get(reason, reason), code="INVALID_TRADE")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class SyncError(AppError):
    """Base class for failures of a sync cycle."""

    def __init__(self, message: str, code: str = "SYNC_FAILED"):
        super().__init__(message, code=code)


class NotAuthenticatedError(SyncError):
    """Raised when sync is requested without an active account."""

    def __init__(self, message: str = "No authenticated account; sign in to sync"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class NetworkUnavailableError(SyncError):
    """Raised when the remote store cannot be reached."""

    def __init__(self, message: str = "Network unavailable"):
        super().__init__(message, code="NETWORK_UNAVAILABLE")


class RemoteSyncError(SyncError):
    """Raised when the remote store answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, code="REMOTE_ERROR")
