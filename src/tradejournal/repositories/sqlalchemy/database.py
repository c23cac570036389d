"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """
    Handle to the local database.

    Constructed once at process start and passed to repositories;
    there is no module-level engine.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        kwargs: dict = {"echo": echo}
        if ":memory:" in database_url:
            # One shared connection so every session sees the same in-memory DB
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        self._engine: AsyncEngine = create_async_engine(database_url, **kwargs)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        return self._session_factory

    async def init(self) -> None:
        """Create all tables if they do not exist."""
        from tradejournal.repositories.sqlalchemy import orm_models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables (tests only)."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provide a session that is closed on exit."""
        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self._engine.dispose()
