"""
Database Engine and Session Factory with Connection Pooling

This module builds the async SQLAlchemy engine the service talks to.
The engine owns the connection pool; sessions created from the factory
check a connection out on first use and return it when closed.

Key Features:
- Connection pooling: sized from settings, shared by all requests
- Async driver: aiosqlite runs SQLite calls on its own thread, so the
  event loop never blocks on storage
- No module-level engine: the app factory builds one per application
"""

from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from shorturl.core.setting import Settings


def _is_memory_database(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def get_engine_kwargs(settings: Settings) -> dict[str, Any]:
    """
    Build engine options from settings.

    In-memory SQLite uses a single static connection, so pool sizing only
    applies to file or server databases.

    Returns:
        Keyword arguments for create_async_engine
    """
    engine_kwargs: dict[str, Any] = {"echo": settings.DB_ECHO}

    if make_url(settings.DATABASE_URL).get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    if _is_memory_database(settings.DATABASE_URL):
        engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )

    return engine_kwargs


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled async engine for settings.DATABASE_URL."""
    return create_async_engine(settings.DATABASE_URL, **get_engine_kwargs(settings))


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create the async session factory bound to an engine.

    expire_on_commit=False keeps returned ShortLink objects readable after
    their session has closed.
    """
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
