"""SQLAlchemy implementation of KeyValueRepository."""

from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import async_sessionmaker

from tradejournal.domain.models import KeyValueKey
from tradejournal.repositories.sqlalchemy.orm_models import KeyValueORM


class SqlAlchemyKeyValueRepository:
    """SQLAlchemy-backed key-value store. Values are stored as text."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def get_string(self, key: KeyValueKey) -> Optional[str]:
        async with self._session_factory() as session:
            record = await session.get(KeyValueORM, key.value)
            return record.value if record else None

    async def set_string(self, key: KeyValueKey, value: str) -> None:
        async with self._session_factory() as session:
            record = await session.get(KeyValueORM, key.value)
            if record:
                record.value = value
            else:
                session.add(KeyValueORM(key=key.value, value=value))
            await session.commit()

    async def get_int(self, key: KeyValueKey) -> Optional[int]:
        value = await self.get_string(key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    async def set_int(self, key: KeyValueKey, value: int) -> None:
        await self.set_string(key, str(int(value)))

    async def delete(self, key: KeyValueKey) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(KeyValueORM).where(KeyValueORM.key == key.value))
            await session.commit()

    async def delete_all(self) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(KeyValueORM))
            await session.commit()
