"""Presentation helpers derived from pricing results.

Nothing here computes prices; it only turns resolver output into text.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.pricing import PriceCalculation
from pos.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    currency_symbol,
    round_percent,
    to_cents,
)


@dataclass(frozen=True)
class PriceBadge:
    text: str
    kind: str  # "promo" or "wholesale"
    savings: Decimal


def format_price(value: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount as ``"<symbol> <value with 2 decimals>"``."""
    return f"{currency_symbol(currency)} {to_cents(value)}"


def price_badge(calculation: PriceCalculation) -> PriceBadge | None:
    """Badge shown next to a discounted price, or None for regular prices."""
    if calculation.discount_percent is None:
        return None
    percent = round_percent(calculation.discount_percent)
    savings = calculation.savings or Decimal("0")
    if calculation.is_promo:
        return PriceBadge(text=f"OFERTA -{percent}%", kind="promo", savings=savings)
    if calculation.is_wholesale:
        return PriceBadge(text=f"MAYORISTA -{percent}%", kind="wholesale", savings=savings)
    return None
