"""
Database connection management.

Provides the Database handle owning the async engine and session factory,
plus the FastAPI dependency for request-scoped session injection.

The handle is constructed once per application, connected during lifespan
startup, shared through the service container, and disposed at shutdown.

Dependencies: sqlalchemy, talentiq.configs
System role: Database connection lifecycle management
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from talentiq.boundary.db.base import Base
from talentiq.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


class Database:
    """
    Async engine and session factory with an explicit lifecycle.

    Usage:
        database = Database(settings.database)
        await database.connect()
        async with database.session() as db:
            ...
        await database.disconnect()
    """

    def __init__(self, config: DatabaseSettings) -> None:
        """
        Initialize the handle without opening any connection.

        Args:
            config: Database settings (URL, pool options)
        """
        self._config = config
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def _create_engine(self) -> AsyncEngine:
        """
        Create async SQLAlchemy engine.

        Pool sizing and pre-ping apply to server databases only; SQLite
        uses the driver's default pool.

        Returns:
            AsyncEngine: Configured async SQLAlchemy engine
        """
        if self._config.is_sqlite:
            return create_async_engine(
                self._config.async_database_url,
                echo=self._config.echo_sql,
            )
        return create_async_engine(
            self._config.async_database_url,
            echo=self._config.echo_sql,
            pool_size=self._config.pool_size,
            max_overflow=self._config.max_overflow,
            pool_timeout=self._config.pool_timeout,
            pool_pre_ping=True,
        )

    async def connect(self, create_tables: bool = True) -> None:
        """
        Create the engine and session factory, optionally creating tables.

        Args:
            create_tables: Run CREATE TABLE IF NOT EXISTS for all models

        Raises:
            SQLAlchemyError: If the database is unreachable
        """
        # Import models to register them with Base.metadata
        from talentiq.boundary.db import models  # noqa: F401

        self._engine = self._create_engine()
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
        if create_tables:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Database connected",
            extra={"dialect": self._engine.dialect.name},
        )

    async def disconnect(self) -> None:
        """Dispose the engine and release pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database disconnected")
        self._engine = None
        self._session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Open a new async session.

        Yields:
            AsyncSession: Session closed on exit, uncommitted work rolled back
        """
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        async with self._session_factory() as session:
            yield session


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request from the
    application's Database handle and ensures it's closed after the route
    completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        @router.get("/sessions/{id}")
        async def get_session(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await session_crud.get_with_users(db, id)
    """
    database: Database = request.app.state.services.database
    async with database.session() as session:
        yield session
