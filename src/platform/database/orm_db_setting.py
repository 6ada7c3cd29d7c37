"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: event-loop-aware engine/session maker for the configured database
2. Base: declarative base shared by every ORM model
3. Database class: injectable handle that owns an engine and hands out its session maker

Supported URLs:
- postgresql+asyncpg://... (production)
- sqlite+aiosqlite://...   (local development and tests; foreign keys are switched on per connection)
"""

import asyncio
from typing import Any, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


SQLITE_BUSY_TIMEOUT = 30  # seconds a writer waits for the database lock


def _on_sqlite_connect(dbapi_connection: Any, _connection_record: Any) -> None:
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINT works, and enforce foreign keys
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def _on_sqlite_begin(conn: Any) -> None:
    # Writers take the database lock at BEGIN and queue for it on the busy timeout
    conn.exec_driver_sql('BEGIN IMMEDIATE')


def build_async_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for ``url``

    Pool configuration only applies to server databases. SQLite connections
    get ``PRAGMA foreign_keys=ON`` and SQLAlchemy-emitted ``BEGIN IMMEDIATE``
    so referential constraints, SAVEPOINTs and competing seat allocations
    behave like on PostgreSQL: one writer wins, the next one sees its rows.
    """
    if url.startswith('sqlite'):
        engine = create_async_engine(
            url, echo=echo, future=True, connect_args={'timeout': SQLITE_BUSY_TIMEOUT}
        )
        event.listen(engine.sync_engine, 'connect', _on_sqlite_connect)
        event.listen(engine.sync_engine, 'begin', _on_sqlite_begin)
        return engine

    return create_async_engine(
        url,
        echo=echo,
        future=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Manages the SQLAlchemy async engine with event loop awareness.

    Ensures the engine is always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors.
    """

    def __init__(self, url: Optional[str] = None) -> None:
        self._url = url or settings.DATABASE_URL_ASYNC
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = build_async_engine(self._url, echo=settings.DB_ECHO)
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engine...')
                self._session_maker = None

            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = build_async_engine(self._url, echo=settings.DB_ECHO)
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = build_session_maker(engine)
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """Create database tables if they don't exist"""
    # Register every model on Base.metadata before create_all
    import src.service.cinema.driven_adapter.model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️ [DB] Tables ready')


async def drop_db_and_tables(engine: AsyncEngine) -> None:
    import src.service.cinema.driven_adapter.model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """
    Injectable database handle

    Owns an AsyncEngineManager for one URL and hands out the session maker
    used by SqlAlchemyUnitOfWork.
    """

    def __init__(self, *, url: Optional[str] = None) -> None:
        self._engine_manager = AsyncEngineManager(url)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine_manager.get_engine()

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return self._engine_manager.get_session_maker()

    async def create_tables(self) -> None:
        await create_db_and_tables(self.engine)

    async def dispose(self) -> None:
        await self._engine_manager.dispose()
