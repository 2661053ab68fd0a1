"""
order_store.db.models

Relational schema for orders and their line items.

Responsibilities:
- Define the `orders` and `order_items` tables.
- Attach PostgreSQL-only DDL (pgcrypto, `gen_random_uuid()` defaults) so rows
  written outside this package still get server-generated ids.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    DDL,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    Uuid as SAUuid,
    event,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from order_store.db.base import Base
from order_store.domain import OrderItemRecord, OrderRecord, OrderStatus


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    order_ref: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)

    subtotal_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    tax_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    shipping_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    total_cents: Mapped[int] = mapped_column(Integer, nullable=False)

    status: Mapped[str] = mapped_column(
        Text, nullable=False, server_default=text(f"'{OrderStatus.pending.value}'")
    )
    gateway: Mapped[str | None] = mapped_column(Text, nullable=True)
    gateway_ref: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("idx_orders_ref", "order_ref"),)

    def to_record(self) -> OrderRecord:
        return OrderRecord(
            order_ref=self.order_ref,
            email=self.email,
            subtotal_cents=self.subtotal_cents,
            tax_cents=self.tax_cents,
            shipping_cents=self.shipping_cents,
            total_cents=self.total_cents,
            status=self.status,
            gateway=self.gateway,
            gateway_ref=self.gateway_ref,
            created_at=_as_utc(self.created_at),
        )


class OrderItem(Base):
    __tablename__ = "order_items"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    order_ref: Mapped[str] = mapped_column(
        Text, ForeignKey("orders.order_ref", ondelete="CASCADE"), nullable=False
    )
    sku: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    unit_price_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    qty: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_record(self) -> OrderItemRecord:
        return OrderItemRecord(
            order_ref=self.order_ref,
            sku=self.sku,
            title=self.title,
            unit_price_cents=self.unit_price_cents,
            qty=self.qty,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# PostgreSQL: fire on every create_all (idempotent), before tables are created.
event.listen(
    Base.metadata,
    "before_create",
    DDL("CREATE EXTENSION IF NOT EXISTS pgcrypto").execute_if(dialect="postgresql"),
)
for _table in (Order.__table__, OrderItem.__table__):
    # Only runs when the table is actually created, so re-running is a no-op.
    event.listen(
        _table,
        "after_create",
        DDL(f"ALTER TABLE {_table.name} ALTER COLUMN id SET DEFAULT gen_random_uuid()").execute_if(
            dialect="postgresql"
        ),
    )


# --- Module Notes -----------------------------------------------------------
# ids are also generated client-side (uuid4) so SQLite, which has no UUID
# function, behaves the same as PostgreSQL for rows written through the ORM.
