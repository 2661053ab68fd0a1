"""
order_store.db.repositories.orders

Repository for `Order` and `OrderItem` rows.

Responsibilities:
- Insert an order followed by its items, flushing in input order.
- Update payment status/gateway fields by order reference.
- Search orders by reference or email.

Transaction boundaries belong to the caller (`SqlOrderStore`).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import desc, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from order_store.db.models import Order, OrderItem
from order_store.domain import MAX_LIST_RESULTS, OrderLine, OrderStatus, OrderTotals
from order_store.money import to_minor_units


class OrderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        email: str,
        lines: Sequence[OrderLine],
        totals: OrderTotals,
        gateway: str | None,
        gateway_ref: str | None,
        created_at: datetime,
    ) -> Order:
        order = Order(
            order_ref=totals.order_ref,
            email=email,
            subtotal_cents=totals.subtotal,
            tax_cents=totals.tax,
            shipping_cents=totals.shipping,
            total_cents=totals.total,
            status=OrderStatus.pending.value,
            gateway=gateway,
            gateway_ref=gateway_ref,
            created_at=created_at,
        )
        self._session.add(order)
        # Order row first: items reference it by order_ref.
        await self._session.flush()

        for line in lines:
            self._session.add(
                OrderItem(
                    order_ref=totals.order_ref,
                    sku=line.sku,
                    title=line.title,
                    unit_price_cents=to_minor_units(line.price),
                    qty=int(line.qty),
                )
            )
            await self._session.flush()
        return order

    async def mark_paid(self, *, order_ref: str, gateway: str, gateway_ref: str) -> int:
        stmt = (
            update(Order)
            .where(Order.order_ref == order_ref)
            .values(status=OrderStatus.paid.value, gateway=gateway, gateway_ref=gateway_ref)
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def search(self, query: str, *, limit: int = MAX_LIST_RESULTS) -> list[Order]:
        # autoescape: '%' and '_' in the term match literally, like str containment.
        stmt = (
            select(Order)
            .where(
                or_(
                    Order.order_ref.icontains(query, autoescape=True),
                    Order.email.icontains(query, autoescape=True),
                )
            )
            .order_by(desc(Order.created_at), desc(Order.order_ref))
            .limit(limit)
        )
        return list((await self._session.execute(stmt)).scalars().all())


# --- Module Notes -----------------------------------------------------------
# `idx_orders_ref` serves the exact-match update; substring search scans, which
# is acceptable at the 200-row cap this layer exposes.
