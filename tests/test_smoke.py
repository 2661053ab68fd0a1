"""
tests.test_smoke

Minimal smoke test: the default (unconfigured) store boots and round-trips an order.
"""

from __future__ import annotations

import pytest

import order_store
from order_store import OrderLine, OrderTotals, create_order_store
from order_store.settings import Settings


@pytest.mark.asyncio
async def test_default_store_boots() -> None:
    store = create_order_store(Settings(env="test"))
    await store.initialize()
    try:
        ref = await store.create_order(
            email="smoke@shop.test",
            lines=[OrderLine(sku="SMOKE", title="Smoke test", price="1.00", qty=1)],
            totals=OrderTotals(order_ref="ORD-SMOKE", subtotal=100, tax=0, shipping=0, total=100),
        )
        assert ref == "ORD-SMOKE"
        assert [o.order_ref for o in await store.list_orders("smoke")] == ["ORD-SMOKE"]
    finally:
        await store.close()

    assert order_store.__version__ == "0.1.0"
