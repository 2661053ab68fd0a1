"""
order_store.errors

Exceptions raised by the store layer itself.

Relational driver errors (integrity violations, connectivity failures) are
never wrapped; they reach the caller exactly as SQLAlchemy raised them.
"""

from __future__ import annotations


class OrderStoreError(Exception):
    """Base exception for all order store errors."""


class StoreNotInitializedError(OrderStoreError, RuntimeError):
    """Raised when an operation runs before `initialize()`."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(f"{backend} order store used before initialize()")


class DuplicateOrderRefError(OrderStoreError, ValueError):
    """Raised by the in-memory store when an order reference is reused."""

    def __init__(self, order_ref: str) -> None:
        self.order_ref = order_ref
        super().__init__(f"Order reference already exists: {order_ref}")


# --- Module Notes -----------------------------------------------------------
# The relational store relies on the unique constraint for duplicates and lets
# `sqlalchemy.exc.IntegrityError` propagate unmodified.
