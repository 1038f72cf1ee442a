"""Margin helpers used by catalog maintenance.

These work on tax-exclusive unit prices and never round; callers format
or round the result as needed.
"""

from __future__ import annotations

from decimal import Decimal

_HUNDRED = Decimal("100")


def margin_percent(cost: Decimal, price: Decimal) -> Decimal:
    """Markup of *price* over *cost* as a percentage (0 when cost <= 0)."""
    if cost <= 0:
        return Decimal("0")
    return (price - cost) / cost * _HUNDRED


def price_from_margin(cost: Decimal, margin_pct: Decimal) -> Decimal:
    return cost * (1 + margin_pct / _HUNDRED)


def apply_discount_percent(price: Decimal, discount_pct: Decimal) -> Decimal:
    return price * (1 - discount_pct / _HUNDRED)
