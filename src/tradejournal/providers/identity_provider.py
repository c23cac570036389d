"""Identity provider protocol and a settings-backed implementation."""

from typing import Optional, Protocol

from tradejournal.config.settings import Settings, get_settings


class IdentityProvider(Protocol):
    """Supplies the account id that scopes push and pull."""

    async def current_account_id(self) -> Optional[str]:
        """Return the signed-in account id, or None when signed out."""
        ...


class StaticIdentityProvider:
    """Identity taken from configuration (TRADEJOURNAL_ACCOUNT_ID)."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    async def current_account_id(self) -> Optional[str]:
        account_id = (self._settings.account_id or "").strip()
        return account_id or None
