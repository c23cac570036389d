"""Key-value repository protocol."""

from typing import Protocol, Optional

from tradejournal.domain.models import KeyValueKey


class KeyValueRepository(Protocol):
    """Interface for durable scalar state (sync cursor, preferences)."""

    async def get_string(self, key: KeyValueKey) -> Optional[str]:
        ...

    async def set_string(self, key: KeyValueKey, value: str) -> None:
        ...

    async def get_int(self, key: KeyValueKey) -> Optional[int]:
        """Return the value parsed as int, or None if missing or not numeric."""
        ...

    async def set_int(self, key: KeyValueKey, value: int) -> None:
        ...

    async def delete(self, key: KeyValueKey) -> None:
        ...

    async def delete_all(self) -> None:
        ...
