from __future__ import annotations

from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Comma-grouped number, e.g. 12345 -> '12,345'.
    Fractions keep up to three decimals: 1234.5 -> '1,234.5'.
    """
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


def format_currency(value: Number) -> str:
    """
    Short dollar amount: '$1.2B', '$3.4M', '$12K', or '$950' below a thousand.
    """
    if value >= 1_000_000_000:
        return f"${value / 1_000_000_000:.1f}B"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.0f}K"
    return "$" + format_number(value)


def format_similarity(score: float) -> str:
    return f"{score:.2f}"
