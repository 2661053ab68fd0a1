"""
order_store.stores.base

The capability set every backend implements.

Responsibilities:
- Define the `OrderStore` interface (initialize / create_order / mark_paid /
  list_orders / close).
- Hold the timestamp clock shared by both backends.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from order_store.domain import OrderLine, OrderRecord, OrderTotals

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStore(abc.ABC):
    """
    Persistence facade over orders and their line items.

    Both variants share the same observable behaviour:
    - `create_order` is all-or-nothing and always starts an order as "pending".
    - `mark_paid` on an unknown reference is a silent no-op.
    - `list_orders` matches case-insensitively on order_ref OR email, newest
      first (ties: order_ref descending), capped at `MAX_LIST_RESULTS`.
    """

    backend: str

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock or utcnow

    def _now(self) -> datetime:
        # Normalised to UTC so stored timestamps sort the same on every backend.
        return self._clock().astimezone(timezone.utc)

    @abc.abstractmethod
    async def initialize(self) -> None: ...

    @abc.abstractmethod
    async def create_order(
        self,
        *,
        email: str,
        lines: Sequence[OrderLine],
        totals: OrderTotals,
        gateway: str | None = None,
        gateway_ref: str | None = None,
    ) -> str: ...

    @abc.abstractmethod
    async def mark_paid(self, order_ref: str, gateway: str, gateway_ref: str) -> None: ...

    @abc.abstractmethod
    async def list_orders(self, query: str = "") -> list[OrderRecord]: ...

    async def close(self) -> None:
        return None


# --- Module Notes -----------------------------------------------------------
# A naive datetime from a custom clock is treated as local time by astimezone();
# clocks should return aware datetimes.
