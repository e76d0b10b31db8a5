"""Database configuration and engine management.

This module provides the SQLAlchemy 2.x infrastructure behind the document
store:
- Declarative base shared by the ORM models
- Database URL resolution with environment override
- Async engine and session factory creation
- Context manager for safe session usage

The database URL can be overridden via the DB_URL environment variable.
Defaults to sqlite+aiosqlite:///<project_root>/portfolio.db for local persistence.
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

_ASYNC_DRIVERS = {"sqlite": "sqlite+aiosqlite"}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


def get_database_url() -> str:
    """Return the database URL, allowing overrides via environment variable."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return _with_async_driver(env_url)

    project_root = Path(__file__).resolve().parents[3]
    db_path = project_root / "portfolio.db"
    return URL.create("sqlite+aiosqlite", database=str(db_path)).render_as_string(
        hide_password=False
    )


def _with_async_driver(database_url: str) -> str:
    """Swap a sync driver name for its async counterpart (``sqlite`` -> ``sqlite+aiosqlite``)."""
    url = make_url(database_url)
    async_driver = _ASYNC_DRIVERS.get(url.drivername)
    if async_driver is None:
        return database_url
    return url.set(drivername=async_driver).render_as_string(hide_password=False)


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """Create an async engine for *database_url* (or the configured URL)."""
    return create_async_engine(database_url or get_database_url(), echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to *engine*."""
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables defined on the Base metadata."""
    # Import ORM models so their metadata is registered on Base before create_all.
    from portfolio_cms.data.models import document  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope(factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """Provide a transactional scope around a series of operations."""
    session = factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
