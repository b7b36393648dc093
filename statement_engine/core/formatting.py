"""Helper functions for formatting rupee amounts."""

from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal

_UNITS = [
    (Decimal("1e7"), "crore", "Cr"),
    (Decimal("1e5"), "lakh", "L"),
    (Decimal("1e3"), "thousand", "k"),
]


def _group_indian(whole: str) -> str:
    """Insert separators using the 3-2-2 Indian grouping."""

    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(value: int | float | Decimal, symbol: str = "", decimals: int = 2) -> str:
    """Format an amount with Indian digit grouping, e.g. ``12,34,567.89``.

    Args:
        value: The amount to format
        symbol: Optional currency prefix such as ``"₹"``
        decimals: Number of decimal places to show
    """
    d = Decimal(str(value))
    sign = "-" if d < 0 else ""
    quantum = Decimal(1).scaleb(-decimals)
    text = format(abs(d).quantize(quantum, rounding=ROUND_HALF_UP), "f")
    whole, _, fraction = text.partition(".")
    grouped = _group_indian(whole)
    body = f"{grouped}.{fraction}" if fraction else grouped
    prefix = f"{symbol} " if symbol else ""
    return f"{sign}{prefix}{body}"


def humanize_inr(
    value: int | float | Decimal,
    symbol: str = "₹",
    short: bool = False,
    decimals: int = 1,
) -> str:
    """Format a rupee amount using lakh / crore units.

    Args:
        value: The amount to format
        symbol: Currency symbol to use (default: ₹)
        short: If True, use short suffixes (k, L, Cr) instead of full words
        decimals: Number of decimal places to show
    """
    d = Decimal(str(value))
    sign = "-" if d < 0 else ""
    d = abs(d)

    if d >= Decimal("1e5"):
        for threshold, long_name, short_name in _UNITS:
            if d >= threshold:
                scaled = f"{(d / threshold):.{decimals}f}"
                if short:
                    return f"{sign}{symbol} {scaled}{short_name}"
                return f"{sign}{symbol} {scaled} {long_name}"

    return f"{sign}{symbol} {format_inr(d, decimals=0 if d == d.to_integral() else 2)}"
