"""
Async engine and session lifecycle.

`init_db()` builds one engine and session factory for the process from
`DatabaseSettings`; `close_db()` disposes them. Request handlers get a
session through `get_session`, scripts and tests through `session_scope`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tictactoe.data.config import get_settings
from tictactoe.data.models import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """
    Raises:
        RuntimeError: If init_db() has not run
    """
    if _engine is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _engine


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _session_factory


async def init_db() -> None:
    global _engine, _session_factory

    settings = get_settings()
    logger.info(f"Connecting to {settings.safe_url}")

    _engine = create_async_engine(settings.database_url, **settings.get_engine_kwargs())
    # Saved games stay readable after the repository commits
    _session_factory = async_sessionmaker(bind=_engine, expire_on_commit=False, autoflush=False)


async def close_db() -> None:
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database connection closed")


async def create_tables() -> None:
    """Create the Games table if missing. Managed deployments use Alembic instead."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def drop_tables() -> None:
    """Drop every table. Destroys all games."""
    logger.warning("Dropping all tables")
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    GameRepository commits each save itself, so this only rolls back
    whatever is left open when the request fails.
    """
    async with _get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """Session for use outside a request; commits on success, rolls back on error."""
    async with _get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
