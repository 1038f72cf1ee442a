"""Application service: Quote Cart use case (query)."""

from __future__ import annotations

import logging
from decimal import Decimal

from pos.application.dto import CartItemSpec, CartLineDTO, CartSummaryDTO
from pos.application.formatting import format_price, price_badge
from pos.application.load_cart import load_cart
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.pricing import PriceCalculation
from pos.domain.model.value_objects import DEFAULT_CURRENCY
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.cart_aggregator import aggregate, price_line
from pos.domain.service.tax_calculator import compute_tax

logger = logging.getLogger(__name__)


class QuoteCartHandler:

    def __init__(
        self, product_repo: ProductRepository, currency: str = DEFAULT_CURRENCY
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, item_specs: list[CartItemSpec]) -> CartSummaryDTO:
        """Price every line of the cart and compute totals with IGV."""
        cart = load_cart(self._product_repo, item_specs)
        return self.summarize(cart)

    def summarize(self, cart: Cart) -> CartSummaryDTO:
        totals = aggregate(cart.lines)
        tax = compute_tax(totals.grand_total)
        fmt = self._format

        logger.info(
            "Cart of %d lines: total %s + IGV %s", len(cart.lines), tax.subtotal, tax.tax
        )

        return CartSummaryDTO(
            lines=[self._to_line_dto(line) for line in cart.lines],
            subtotal=totals.subtotal,
            total_discount=totals.total_discount,
            grand_total=totals.grand_total,
            discounted_line_count=totals.discounted_line_count,
            tax=tax,
            subtotal_text=fmt(totals.subtotal),
            discount_text=fmt(totals.total_discount),
            grand_total_text=fmt(totals.grand_total),
            tax_text=fmt(tax.tax),
            total_with_tax_text=fmt(tax.total),
        )

    # --- Mapping --------------------------------------------------------------

    def _format(self, value: Decimal) -> str:
        return format_price(value, self._currency)

    def _to_line_dto(self, line: CartLine) -> CartLineDTO:
        pricing = price_line(line)
        badge = price_badge(pricing) if isinstance(pricing, PriceCalculation) else None
        return CartLineDTO(
            product_id=line.product_id,
            product_name=line.product.name,
            quantity=line.quantity.value,
            unit_price=self._format(pricing.base_price),
            final_price=self._format(pricing.final_price),
            line_total=self._format(pricing.line_total),
            badge=badge.text if badge is not None else None,
            custom_price=line.has_custom_price,
        )
