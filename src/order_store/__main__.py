"""
order_store.__main__

Operator entrypoint: `python -m order_store {init,list}`.

Responsibilities:
- Load settings and configure logging.
- `init`: bootstrap the schema of the selected backend.
- `list`: print matching orders as JSON lines.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from sqlalchemy.exc import SQLAlchemyError

from order_store.errors import OrderStoreError
from order_store.observability.logging import configure_logging
from order_store.settings import Settings, get_settings
from order_store.stores import create_order_store


async def _init(settings: Settings) -> int:
    store = create_order_store(settings)
    try:
        await store.initialize()
    finally:
        await store.close()
    print(f"Initialized {store.backend} order store")
    return 0


async def _list(settings: Settings, query: str) -> int:
    store = create_order_store(settings)
    try:
        await store.initialize()
        for order in await store.list_orders(query):
            print(json.dumps(order.to_dict()))
    finally:
        await store.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="order_store", description="Order store maintenance")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create tables and indexes if they don't exist")

    list_parser = sub.add_parser("list", help="Search orders by reference or email")
    list_parser.add_argument("query", nargs="?", default="", help="Case-insensitive substring")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    # stdout is reserved for command output.
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, stream=sys.stderr
    )

    try:
        if args.command == "init":
            return asyncio.run(_init(settings))
        return asyncio.run(_list(settings, args.query))
    except (OrderStoreError, SQLAlchemyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())


# --- Module Notes -----------------------------------------------------------
# `list` against the in-memory backend always prints nothing: a fresh process
# starts with empty containers.
