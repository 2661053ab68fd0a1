"""
order_store.domain

Backend-neutral types exchanged with callers.

Responsibilities:
- Input shapes for order creation (`OrderLine`, `OrderTotals`).
- Read models returned by the stores (`OrderRecord`, `OrderItemRecord`).
- Order status values and the listing cap.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

# Hard cap on rows returned by `list_orders`.
MAX_LIST_RESULTS = 200


class OrderStatus(enum.StrEnum):
    # Stored as plain text; new values can be added without a schema change.
    pending = "pending"
    paid = "paid"


@dataclass(frozen=True, slots=True)
class OrderLine:
    """
    One requested line item. `price` is in major currency units (e.g. 19.99)
    and is converted with `order_store.money.to_minor_units` at insert time.
    """

    sku: str
    title: str
    price: Decimal | str | int | float
    qty: int


@dataclass(frozen=True, slots=True)
class OrderTotals:
    """Pre-computed totals plus the caller-generated order reference."""

    order_ref: str
    subtotal: int
    tax: int
    shipping: int
    total: int


@dataclass(frozen=True, slots=True)
class OrderRecord:
    order_ref: str
    email: str
    subtotal_cents: int
    tax_cents: int
    shipping_cents: int
    total_cents: int
    status: str
    gateway: str | None
    gateway_ref: str | None
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "order_ref": self.order_ref,
            "email": self.email,
            "subtotal_cents": self.subtotal_cents,
            "tax_cents": self.tax_cents,
            "shipping_cents": self.shipping_cents,
            "total_cents": self.total_cents,
            "status": self.status,
            "gateway": self.gateway,
            "gateway_ref": self.gateway_ref,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class OrderItemRecord:
    order_ref: str
    sku: str
    title: str
    unit_price_cents: int
    qty: int


# --- Module Notes -----------------------------------------------------------
# Records are immutable snapshots; the in-memory store swaps in a new record
# when an order is marked paid.
