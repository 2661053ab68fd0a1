"""
order_store.stores.memory

Process-memory backend, used when no database is configured.

Responsibilities:
- Keep orders and items in containers owned by the store instance.
- Make create_order all-or-nothing: build every row first, publish under a lock.
- Serialise all access with a mutex so threads see the same atomicity the
  relational backend gets from transactions.
"""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Sequence

from order_store.domain import (
    MAX_LIST_RESULTS,
    OrderItemRecord,
    OrderLine,
    OrderRecord,
    OrderStatus,
    OrderTotals,
)
from order_store.errors import DuplicateOrderRefError, StoreNotInitializedError
from order_store.money import to_minor_units
from order_store.observability.logging import get_logger
from order_store.stores.base import Clock, OrderStore

log = get_logger(__name__)


class InMemoryOrderStore(OrderStore):
    backend = "memory"

    def __init__(self, *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self._lock = threading.Lock()
        # None until initialize(); keyed by order_ref, insertion ordered.
        self._orders: dict[str, OrderRecord] | None = None
        self._items: list[OrderItemRecord] | None = None

    async def initialize(self) -> None:
        with self._lock:
            if self._orders is None:
                self._orders = {}
                self._items = []
        log.info("store_initialized", backend=self.backend)

    def _require_ready(self) -> tuple[dict[str, OrderRecord], list[OrderItemRecord]]:
        if self._orders is None or self._items is None:
            raise StoreNotInitializedError(self.backend)
        return self._orders, self._items

    async def create_order(
        self,
        *,
        email: str,
        lines: Sequence[OrderLine],
        totals: OrderTotals,
        gateway: str | None = None,
        gateway_ref: str | None = None,
    ) -> str:
        orders, items = self._require_ready()

        # Anything that can fail (price/qty conversion) happens before publishing.
        order = OrderRecord(
            order_ref=totals.order_ref,
            email=email,
            subtotal_cents=totals.subtotal,
            tax_cents=totals.tax,
            shipping_cents=totals.shipping,
            total_cents=totals.total,
            status=OrderStatus.pending.value,
            gateway=gateway or None,
            gateway_ref=gateway_ref or None,
            created_at=self._now(),
        )
        new_items = [
            OrderItemRecord(
                order_ref=totals.order_ref,
                sku=line.sku,
                title=line.title,
                unit_price_cents=to_minor_units(line.price),
                qty=int(line.qty),
            )
            for line in lines
        ]

        with self._lock:
            if order.order_ref in orders:
                raise DuplicateOrderRefError(order.order_ref)
            orders[order.order_ref] = order
            items.extend(new_items)

        log.info("order_created", backend=self.backend, order_ref=order.order_ref, items=len(new_items))
        return order.order_ref

    async def mark_paid(self, order_ref: str, gateway: str, gateway_ref: str) -> None:
        orders, _ = self._require_ready()
        with self._lock:
            current = orders.get(order_ref)
            if current is not None:
                orders[order_ref] = dataclasses.replace(
                    current,
                    status=OrderStatus.paid.value,
                    gateway=gateway,
                    gateway_ref=gateway_ref,
                )
        log.info("order_marked_paid", backend=self.backend, order_ref=order_ref, matched=current is not None)

    async def list_orders(self, query: str = "") -> list[OrderRecord]:
        orders, _ = self._require_ready()
        needle = (query or "").lower()
        with self._lock:
            matches = [
                o
                for o in orders.values()
                if needle in o.order_ref.lower() or needle in o.email.lower()
            ]
        # Same ordering as the SQL backend: created_at DESC, order_ref DESC.
        matches.sort(key=lambda o: (o.created_at, o.order_ref), reverse=True)
        return matches[:MAX_LIST_RESULTS]


# --- Module Notes -----------------------------------------------------------
# Data lives for the lifetime of the store instance; nothing is persisted.
