"""Reconcile an operator-entered price with the catalog's discounts.

When the operator types a unit price at sale time (a negotiated price,
for instance), the discounts configured on the product are carried over
as absolute amounts rather than percentages of the new base:

    promo discount     = retail - promo price      (while the promo is active)
    wholesale discount = retail - wholesale price  (once the threshold is met)
    final price        = max(0.01, operator price - promo - wholesale)

Unlike ``price_resolver.resolve_price``, both discounts are subtracted
together when both apply.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pos.domain.model.pricing import OverrideResult
from pos.domain.model.product import Product
from pos.domain.model.value_objects import CENT
from pos.domain.service.price_resolver import qualifies_for_wholesale

logger = logging.getLogger(__name__)

MIN_UNIT_PRICE = CENT


def resolve_with_override(
    product: Product,
    quantity: int,
    custom_base_price: Decimal,
) -> OverrideResult:
    """Price *quantity* units of *product* at the operator's *custom_base_price*."""
    retail = product.retail_price.amount

    promo_discount = Decimal("0")
    if product.promo_active and product.promo_price is not None:
        promo_discount = retail - product.promo_price.amount

    wholesale_discount = Decimal("0")
    if qualifies_for_wholesale(product, quantity):
        wholesale_discount = retail - product.wholesale_price.amount  # type: ignore[union-attr]

    total_discount = promo_discount + wholesale_discount
    raw_price = custom_base_price - total_discount
    final_price = max(MIN_UNIT_PRICE, raw_price)
    if final_price != raw_price:
        logger.warning(
            "Override price for product %s clamped to %s (computed %s)",
            product.id, MIN_UNIT_PRICE, raw_price,
        )

    # The threshold is only meaningful when explicitly configured.
    is_wholesale = (
        product.wholesale_min_qty is not None
        and quantity >= product.wholesale_min_qty
    )

    logger.debug(
        "Override for product %s x%s: custom=%s promo=-%s wholesale=-%s final=%s",
        product.id, quantity, custom_base_price,
        promo_discount, wholesale_discount, final_price,
    )

    return OverrideResult(
        base_price=custom_base_price,
        final_price=final_price,
        quantity=quantity,
        promo_discount=promo_discount,
        wholesale_discount=wholesale_discount,
        is_promo=product.promo_active,
        is_wholesale=is_wholesale,
    )
