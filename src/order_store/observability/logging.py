"""
order_store.observability.logging

Structured logging for store events (store_initialized, order_created,
order_marked_paid, order_create_failed, store_closed).

Responsibilities:
- Route structlog events through stdlib logging as one JSON object per line.
- Let the CLI send logs to stderr so `list` output on stdout stays parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def configure_logging(*, service_name: str, level: str, stream: TextIO = sys.stdout) -> None:
    """
    Call once per process: from the embedding service at startup, or from
    `order_store.__main__` with `stream=sys.stderr`.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    # Order events from checkout, webhook and admin processes share one sink;
    # "service" tells them apart.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Store modules log at INFO; `filter_by_level` drops them cheaply when the
# embedding service runs at WARNING. Callers can bind a request or webhook id
# with `structlog.contextvars.bind_contextvars` and it lands on every store event.
