"""Cart aggregation.

Prices every line (through the override reconciler when the operator
entered a price, the plain resolver otherwise) and folds the results into
cart totals. The fold only adds, so line order never changes the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.cart import CartLine
from pos.domain.model.pricing import OverrideResult, PriceCalculation
from pos.domain.service.override_reconciler import resolve_with_override
from pos.domain.service.price_resolver import resolve_price

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    total_discount: Decimal
    grand_total: Decimal
    discounted_line_count: int

    @property
    def has_discounts(self) -> bool:
        return self.total_discount > 0


@dataclass(frozen=True)
class CheckoutLineRecord:
    """Normalized line sent to the sales-recording service.

    ``original_price`` is always the catalog retail price; when the
    operator entered a price it is kept separately in ``custom_base_price``.
    """

    product_id: str
    product_name: str
    quantity: int
    original_price: Decimal
    final_price: Decimal
    promo_discount: Decimal
    wholesale_discount: Decimal
    total_discount: Decimal
    is_promo: bool
    is_wholesale: bool
    has_custom_price: bool
    custom_base_price: Decimal | None

    @property
    def line_total(self) -> Decimal:
        return self.final_price * self.quantity


LinePricing = PriceCalculation | OverrideResult


def price_line(line: CartLine) -> LinePricing:
    """Price a single cart line."""
    quantity = line.quantity.value
    if line.custom_price is not None:
        return resolve_with_override(line.product, quantity, line.custom_price)
    return resolve_price(line.product, quantity)


def aggregate(lines: list[CartLine]) -> CartTotals:
    """Fold the priced lines into subtotal, discount and grand total.

    Amounts are summed as bare Decimals, so every line must be priced in
    the same currency. ``load_cart`` rejects carts that mix currencies.
    """
    subtotal = Decimal("0")
    total_discount = Decimal("0")
    discounted_line_count = 0

    for line in lines:
        pricing = price_line(line)
        quantity = line.quantity.value
        line_subtotal = pricing.base_price * quantity
        line_total = pricing.final_price * quantity

        subtotal += line_subtotal
        total_discount += line_subtotal - line_total
        if pricing.is_promo or pricing.is_wholesale:
            discounted_line_count += 1

    totals = CartTotals(
        subtotal=subtotal,
        total_discount=total_discount,
        grand_total=subtotal - total_discount,
        discounted_line_count=discounted_line_count,
    )
    logger.debug(
        "Aggregated %d lines: subtotal=%s discount=%s total=%s",
        len(lines), totals.subtotal, totals.total_discount, totals.grand_total,
    )
    return totals


def checkout_record(line: CartLine) -> CheckoutLineRecord:
    """Project a cart line into the record persisted with the sale."""
    pricing = price_line(line)
    product = line.product

    if isinstance(pricing, OverrideResult):
        total_discount = pricing.total_discount
        custom_base_price = pricing.base_price
    else:
        total_discount = pricing.promo_discount + pricing.wholesale_discount
        custom_base_price = None

    return CheckoutLineRecord(
        product_id=product.id,
        product_name=product.name,
        quantity=line.quantity.value,
        original_price=product.retail_price.amount,
        final_price=pricing.final_price,
        promo_discount=pricing.promo_discount,
        wholesale_discount=pricing.wholesale_discount,
        total_discount=total_discount,
        is_promo=pricing.is_promo,
        is_wholesale=pricing.is_wholesale,
        has_custom_price=custom_base_price is not None,
        custom_base_price=custom_base_price,
    )
