"""
tests.conftest

Shared fixtures.

Responsibilities:
- Run parity tests against both backends (in-memory and SQLite via aiosqlite).
- Provide a stepping clock so creation order is deterministic.
- Expose line items, which the public store API never returns.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy import select

from order_store.db.models import OrderItem
from order_store.domain import OrderItemRecord, OrderLine, OrderTotals
from order_store.stores.base import OrderStore
from order_store.stores.memory import InMemoryOrderStore
from order_store.stores.sql import SqlOrderStore


class StepClock:
    """Returns a fixed start time, advancing by `step` on every call."""

    def __init__(self, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture(autouse=True)
def _no_database_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer's DATABASE_URL must never leak into backend selection in tests.
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ORDER_STORE_DATABASE_URL", raising=False)


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    # Plain sqlite:// on purpose: the store maps it onto aiosqlite.
    return f"sqlite:///{tmp_path / 'orders.db'}"


@pytest.fixture(params=["memory", "sqlite"])
def backend(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest_asyncio.fixture
async def store(backend: str, sqlite_url: str, clock: StepClock):
    s: OrderStore
    if backend == "memory":
        s = InMemoryOrderStore(clock=clock)
    else:
        s = SqlOrderStore(database_url=sqlite_url, clock=clock)
    await s.initialize()
    try:
        yield s
    finally:
        await s.close()


@pytest_asyncio.fixture
async def sql_store(sqlite_url: str, clock: StepClock):
    s = SqlOrderStore(database_url=sqlite_url, clock=clock)
    await s.initialize()
    try:
        yield s
    finally:
        await s.close()


@pytest_asyncio.fixture
async def memory_store(clock: StepClock):
    s = InMemoryOrderStore(clock=clock)
    await s.initialize()
    return s


def totals_for(order_ref: str, *, subtotal: int = 2598, tax: int = 208, shipping: int = 500) -> OrderTotals:
    return OrderTotals(
        order_ref=order_ref,
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=subtotal + tax + shipping,
    )


def sample_lines() -> list[OrderLine]:
    return [
        OrderLine(sku="MUG-01", title="Enamel mug", price="12.99", qty=1),
        OrderLine(sku="TEE-M", title="T-shirt (M)", price=12.99, qty=1),
    ]


async def create(
    store: OrderStore,
    order_ref: str,
    *,
    email: str = "buyer@example.com",
    lines: list[OrderLine] | None = None,
    gateway: str | None = None,
    gateway_ref: str | None = None,
) -> str:
    return await store.create_order(
        email=email,
        lines=sample_lines() if lines is None else lines,
        totals=totals_for(order_ref),
        gateway=gateway,
        gateway_ref=gateway_ref,
    )


async def stored_items(store: OrderStore, order_ref: str) -> list[OrderItemRecord]:
    if isinstance(store, InMemoryOrderStore):
        return [i for i in (store._items or []) if i.order_ref == order_ref]
    assert isinstance(store, SqlOrderStore)
    async with store._sessions()() as session:
        rows = (
            await session.execute(select(OrderItem).where(OrderItem.order_ref == order_ref))
        ).scalars()
        return [r.to_record() for r in rows]
