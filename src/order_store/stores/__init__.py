"""
order_store.stores

Storage backends and the startup-time selector.

Responsibilities:
- Export the `OrderStore` interface and both variants.
- Pick the variant from settings once, so callers never branch on backend.
"""

from __future__ import annotations

from order_store.settings import Settings
from order_store.stores.base import Clock, OrderStore
from order_store.stores.memory import InMemoryOrderStore


def create_order_store(settings: Settings, *, clock: Clock | None = None) -> OrderStore:
    if settings.uses_database:
        # Imported lazily: the in-memory path never needs SQLAlchemy drivers.
        from order_store.stores.sql import SqlOrderStore

        return SqlOrderStore(database_url=settings.database_url or "", clock=clock)
    return InMemoryOrderStore(clock=clock)


__all__ = ["InMemoryOrderStore", "OrderStore", "create_order_store"]
