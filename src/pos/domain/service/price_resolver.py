"""Product price resolution.

Picks the unit price a product sells at for a quantity. Rules are tried
in priority order and the first match wins; they are never combined:

1. an active promotion with a promo price,
2. a wholesale price once the line reaches the minimum quantity,
3. the retail price.

A promotion always beats wholesale pricing, whatever the order size.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pos.domain.model.pricing import PriceCalculation
from pos.domain.model.product import Product
from pos.domain.model.value_objects import round_percent

logger = logging.getLogger(__name__)

DEFAULT_WHOLESALE_MIN_QTY = 1

_HUNDRED = Decimal("100")


def wholesale_threshold(product: Product) -> int:
    if product.wholesale_min_qty is None:
        return DEFAULT_WHOLESALE_MIN_QTY
    return product.wholesale_min_qty


def qualifies_for_wholesale(product: Product, quantity: int) -> bool:
    """True when a wholesale price is set and *quantity* reaches its threshold."""
    return (
        product.wholesale_price is not None
        and quantity >= wholesale_threshold(product)
    )


def units_until_wholesale(product: Product, quantity: int) -> int | None:
    """Units still missing before wholesale pricing applies.

    None when the product has no wholesale price; 0 once the threshold
    is reached.
    """
    if product.wholesale_price is None:
        return None
    return max(0, wholesale_threshold(product) - quantity)


def resolve_price(product: Product, quantity: int = 1) -> PriceCalculation:
    """Resolve the unit price for *quantity* units of *product*.

    Quantity is not validated here: a negative quantity yields negative
    savings, which are then dropped like any non-positive value.
    """
    base_price = product.retail_price.amount
    final_price = base_price
    is_promo = False
    is_wholesale = False

    if product.promo_active and product.promo_price is not None:
        final_price = product.promo_price.amount
        is_promo = True
    elif qualifies_for_wholesale(product, quantity):
        final_price = product.wholesale_price.amount  # type: ignore[union-attr]
        is_wholesale = True

    unit_discount = base_price - final_price

    discount_percent = None
    # A zero retail price has no meaningful percentage.
    if base_price != 0:
        percent = unit_discount / base_price * _HUNDRED
        if percent > 0:
            discount_percent = percent

    savings = unit_discount * quantity
    if savings <= 0:
        savings = None

    logger.debug(
        "Resolved product %s x%s: base=%s final=%s promo=%s wholesale=%s",
        product.id, quantity, base_price, final_price, is_promo, is_wholesale,
    )

    return PriceCalculation(
        base_price=base_price,
        final_price=final_price,
        quantity=quantity,
        is_promo=is_promo,
        is_wholesale=is_wholesale,
        discount_percent=discount_percent,
        savings=savings,
    )


def describe_price(product: Product, quantity: int) -> str:
    """Short human-readable label for the kind of price applied."""
    calculation = resolve_price(product, quantity)
    if calculation.is_promo:
        percent = calculation.discount_percent or Decimal("0")
        return f"En oferta ({round_percent(percent)}% desc.)"
    if calculation.is_wholesale:
        return f"Precio mayorista ({quantity} unidades)"
    return "Precio normal"
