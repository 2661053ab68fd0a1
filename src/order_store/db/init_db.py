"""
order_store.db.init_db

Idempotent schema bootstrap.

Responsibilities:
- Create both tables and the order-reference index if they don't exist.
- Run the PostgreSQL-only DDL hooked onto the metadata (pgcrypto, uuid defaults).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from order_store.db import models  # noqa: F401  # registers tables on Base.metadata
from order_store.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Safe to run on every start: create_all checks for existing tables first.
    """

    # Transactional DDL where the backend supports it.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


# --- Module Notes -----------------------------------------------------------
# Schema changes beyond initial creation are out of scope for this package.
