"""Async SQLAlchemy engine and session handling for the movement dictionary."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import DatabaseConfig, config
from .models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine for one dictionary database."""

    def __init__(self, settings: DatabaseConfig | None = None) -> None:
        self.settings = settings or config.database
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.settings.url.startswith("sqlite")

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._engine

    def _engine_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"echo": config.debug}
        # aiosqlite pools reject sizing arguments
        if not self.is_sqlite:
            options.update(
                pool_size=self.settings.pool_size,
                max_overflow=self.settings.max_overflow,
                pool_timeout=self.settings.pool_timeout,
                pool_pre_ping=True,
            )
        return options

    async def initialize(self) -> None:
        """Create the engine; calling twice is a no-op."""
        if self._engine is not None:
            return

        self._engine = create_async_engine(self.settings.url, **self._engine_options())
        self._sessionmaker = async_sessionmaker(self._engine, expire_on_commit=False)
        logger.debug("Movement database engine ready (%s)", self._engine.url.get_backend_name())

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session inside a transaction.

        The transaction commits when the block exits cleanly and rolls back
        if it raises.
        """
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        async with self._sessionmaker() as session, session.begin():
            yield session

    async def create_all(self, drop_first: bool = False) -> None:
        """Create missing tables, optionally dropping the existing schema first."""
        async with self.engine.begin() as conn:
            if drop_first:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

    async def table_names(self) -> list[str]:
        async with self.engine.connect() as conn:
            return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    async def health_check(self) -> bool:
        """Return True when the database answers a trivial query."""
        if self._engine is None:
            return False

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Movement database health check failed: %s", e)
            return False
        return True


db_manager = DatabaseManager()
