"""
order_store.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Map a plain connection string onto an async driver.
- Create the async engine (connection pool) and sessionmaker with safe defaults.
- Turn on foreign-key enforcement and Unicode-aware lower() for SQLite connections.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Sync driver names that deployments commonly put in DATABASE_URL.
_ASYNC_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "postgresql+psycopg2": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
    "sqlite+pysqlite": "sqlite+aiosqlite",
}


def to_async_url(database_url: str) -> URL:
    url = make_url(database_url.strip())
    drivername = _ASYNC_DRIVERS.get(url.drivername)
    if drivername is not None:
        url = url.set(drivername=drivername)
    return url


def create_engine(database_url: str) -> AsyncEngine:
    url = to_async_url(database_url)
    # pool_pre_ping helps detect stale connections in long-lived processes.
    engine = create_async_engine(url, pool_pre_ping=True)
    if url.get_backend_name() == "sqlite":
        event.listen(engine.sync_engine, "connect", _configure_sqlite_connection)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps ORM rows readable after the transaction closes.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def _configure_sqlite_connection(dbapi_connection: Any, _: Any) -> None:
    # SQLite ships with FK checks off; ON DELETE CASCADE needs them on.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Built-in lower() only folds ASCII; search must fold like str.lower().
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


# --- Module Notes -----------------------------------------------------------
# `order_store.stores.sql.SqlOrderStore` owns the engine for its lifetime and
# disposes it in `close()`.
