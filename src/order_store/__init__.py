"""
order_store

Top-level package for the order persistence layer.

Responsibilities:
- Expose package version metadata.
- Re-export the store interface, its factory, and the domain types callers need.
"""

from order_store.domain import (
    MAX_LIST_RESULTS,
    OrderItemRecord,
    OrderLine,
    OrderRecord,
    OrderStatus,
    OrderTotals,
)
from order_store.errors import DuplicateOrderRefError, OrderStoreError, StoreNotInitializedError
from order_store.money import to_minor_units
from order_store.stores import OrderStore, create_order_store

__all__ = [
    "__version__",
    "MAX_LIST_RESULTS",
    "DuplicateOrderRefError",
    "OrderItemRecord",
    "OrderLine",
    "OrderRecord",
    "OrderStatus",
    "OrderStore",
    "OrderStoreError",
    "OrderTotals",
    "StoreNotInitializedError",
    "create_order_store",
    "to_minor_units",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep imports here limited to lightweight modules; backends are only touched
# when a store is actually created.
