"""User preferences stored in the key-value store."""

from typing import Optional

from tradejournal.config.settings import Settings, get_settings
from tradejournal.domain.models import DividendRatio, KeyValueKey
from tradejournal.repositories.protocols import KeyValueRepository


class PreferencesService:
    """Reads and writes the dividend ratio; missing values fall back to settings."""

    def __init__(self, key_value_repo: KeyValueRepository, settings: Optional[Settings] = None):
        self._key_value_repo = key_value_repo
        self._settings = settings or get_settings()

    async def get_dividend_ratio(self) -> DividendRatio:
        numerator = await self._key_value_repo.get_int(KeyValueKey.DIVIDEND_NUMERATOR)
        denominator = await self._key_value_repo.get_int(KeyValueKey.DIVIDEND_DENOMINATOR)
        return DividendRatio(
            numerator if numerator is not None else self._settings.default_dividend_numerator,
            denominator if denominator is not None else self._settings.default_dividend_denominator,
        )

    async def set_dividend_ratio(self, numerator: int, denominator: int) -> DividendRatio:
        """Persist a ratio (clamped to >= 1 on both sides) and return it."""
        ratio = DividendRatio(numerator, denominator)
        await self._key_value_repo.set_int(KeyValueKey.DIVIDEND_NUMERATOR, ratio.numerator)
        await self._key_value_repo.set_int(KeyValueKey.DIVIDEND_DENOMINATOR, ratio.denominator)
        return ratio
