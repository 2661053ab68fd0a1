"""
order_store.stores.sql

Relational backend (SQLAlchemy async; PostgreSQL or SQLite).

Responsibilities:
- Own the engine (connection pool) and session factory.
- Scope each write in a session transaction: commit on success, rollback and
  re-raise on any failure, always return the connection to the pool.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from order_store.db.init_db import init_db
from order_store.db.repositories.orders import OrderRepo
from order_store.db.session import create_engine, create_sessionmaker
from order_store.domain import OrderLine, OrderRecord, OrderTotals
from order_store.errors import StoreNotInitializedError
from order_store.observability.logging import get_logger
from order_store.stores.base import Clock, OrderStore

log = get_logger(__name__)


class SqlOrderStore(OrderStore):
    backend = "sql"

    def __init__(self, *, database_url: str, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self._database_url = database_url
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    async def initialize(self) -> None:
        # The pool is created once; later calls only re-run the idempotent DDL.
        if self._engine is None:
            self._engine = create_engine(self._database_url)
            self._sessionmaker = create_sessionmaker(self._engine)
        await init_db(self._engine)
        log.info("store_initialized", backend=self.backend, dialect=self._engine.dialect.name)

    def _sessions(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            raise StoreNotInitializedError(self.backend)
        return self._sessionmaker

    async def create_order(
        self,
        *,
        email: str,
        lines: Sequence[OrderLine],
        totals: OrderTotals,
        gateway: str | None = None,
        gateway_ref: str | None = None,
    ) -> str:
        session_factory = self._sessions()
        try:
            # session.begin(): commit on clean exit, rollback on exception;
            # closing the session releases the pooled connection.
            async with session_factory() as session, session.begin():
                await OrderRepo(session).create(
                    email=email,
                    lines=lines,
                    totals=totals,
                    gateway=gateway or None,
                    gateway_ref=gateway_ref or None,
                    created_at=self._now(),
                )
        except Exception as e:
            log.warning(
                "order_create_failed",
                backend=self.backend,
                order_ref=totals.order_ref,
                error_type=type(e).__name__,
            )
            raise

        log.info("order_created", backend=self.backend, order_ref=totals.order_ref, items=len(lines))
        return totals.order_ref

    async def mark_paid(self, order_ref: str, gateway: str, gateway_ref: str) -> None:
        session_factory = self._sessions()
        async with session_factory() as session, session.begin():
            rows = await OrderRepo(session).mark_paid(
                order_ref=order_ref, gateway=gateway, gateway_ref=gateway_ref
            )
        # Zero rows is not an error at this layer.
        log.info("order_marked_paid", backend=self.backend, order_ref=order_ref, matched=rows > 0)

    async def list_orders(self, query: str = "") -> list[OrderRecord]:
        session_factory = self._sessions()
        async with session_factory() as session:
            orders = await OrderRepo(session).search(query or "")
            return [o.to_record() for o in orders]

    async def close(self) -> None:
        # Dispose the engine to close pooled connections gracefully.
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None
            log.info("store_closed", backend=self.backend)


# --- Module Notes -----------------------------------------------------------
# No retries: connectivity errors surface to the caller exactly as raised.
