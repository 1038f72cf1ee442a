"""Application service: Checkout use case.

Builds the payload the sales-recording service expects for a finished
sale. Nothing is persisted here; submitting the payload is the caller's
job.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pos.application.dto import CartItemSpec, CheckoutPayload
from pos.application.load_cart import load_cart
from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import Cart
from pos.domain.model.value_objects import DEFAULT_CURRENCY, to_decimal
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.cart_aggregator import aggregate, checkout_record
from pos.domain.service.tax_calculator import compute_tax

logger = logging.getLogger(__name__)

PAYMENT_METHODS = {
    "cash": "EFECTIVO",
    "card": "TARJETA",
    "transfer": "TRANSFERENCIA",
    "yape": "YAPE",
    "plin": "PLIN",
}
DEFAULT_PAYMENT_METHOD = "EFECTIVO"


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        item_specs: list[CartItemSpec],
        payment_method: str,
        received_amount: str | None = None,
    ) -> CheckoutPayload:
        cart = load_cart(self._product_repo, item_specs)
        return self.checkout(cart, payment_method, received_amount)

    def checkout(
        self,
        cart: Cart,
        payment_method: str,
        received_amount: str | None = None,
    ) -> CheckoutPayload:
        """Price the cart, add IGV and compute the change owed.

        Raises ValidationError for an empty cart or when the amount
        received does not cover the total.
        """
        if cart.is_empty:
            raise ValidationError("Cannot check out an empty cart")

        totals = aggregate(cart.lines)
        tax = compute_tax(totals.grand_total)

        received = None
        change = None
        if received_amount is not None:
            received = to_decimal(received_amount)
            if received < tax.total:
                raise ValidationError(
                    f"Received amount {received} is below the total {tax.total}"
                )
            change = received - tax.total

        method = PAYMENT_METHODS.get(payment_method.lower(), DEFAULT_PAYMENT_METHOD)

        payload = CheckoutPayload(
            payment_method=method,
            currency=self._currency,
            lines=[checkout_record(line) for line in cart.lines],
            subtotal=totals.subtotal,
            total_discount=totals.total_discount,
            grand_total=totals.grand_total,
            tax=tax,
            received_amount=received,
            change=change,
        )
        logger.info(
            "Checkout of %d lines via %s: total %s", len(payload.lines), method, tax.total
        )
        return payload
