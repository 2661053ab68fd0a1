"""
order_store.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, schema bootstrap, and the order repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only `order_store.stores.sql` imports from here; the in-memory store never
# touches SQLAlchemy.
