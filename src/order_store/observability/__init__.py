"""
order_store.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
