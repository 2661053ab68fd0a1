"""
order_store.money

Decimal currency -> integer minor units.

Both backends call `to_minor_units` so a price is stored identically no
matter where the order lives.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

MINOR_UNITS_PER_MAJOR = 100

_ONE = Decimal(1)


def to_minor_units(amount: Decimal | str | int | float) -> int:
    """
    Convert a decimal currency amount to integer cents, rounding half-up.

    Floats go through `str()` first so `1.005` is read as the literal decimal
    1.005 (-> 101); float math gives `1.005 * 100 == 100.49999999999999`,
    which would round down to 100.
    Ties round away from zero: `0.125 -> 13`, `-0.125 -> -13`.

    Non-numeric input raises `decimal.InvalidOperation`.
    """

    if isinstance(amount, Decimal):
        value = amount
    else:
        value = Decimal(str(amount).strip())
    cents = (value * MINOR_UNITS_PER_MAJOR).quantize(_ONE, rounding=ROUND_HALF_UP)
    return int(cents)
