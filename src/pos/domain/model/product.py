"""Product aggregate.

Products are owned by the catalog. The pricing engine only ever reads
their pricing attributes; every optional attribute is ``None`` when the
feature is not configured, never zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money
from pos.domain.service.margin import margin_percent


@dataclass
class Product:
    """A product in the catalog together with its pricing attributes.

    ``retail_price`` is the tax-exclusive reference price. The promotional
    price only applies while ``promo_active`` is set; the wholesale price
    applies from ``wholesale_min_qty`` units per line (1 when omitted).
    """

    id: str
    name: str
    retail_price: Money
    unit_cost: Money | None = None
    promo_active: bool = False
    promo_price: Money | None = None
    wholesale_price: Money | None = None
    wholesale_min_qty: int | None = None

    # --- Mutations ------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the retail price.

        Carts price lines against the product at aggregation time, so the
        new price is picked up by the next recomputation.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.retail_price = new_price

    def start_promo(self, promo_price: Money) -> None:
        self.promo_price = promo_price
        self.promo_active = True

    def end_promo(self) -> None:
        """Deactivate the promotion; the configured promo price is kept."""
        self.promo_active = False

    def set_wholesale(self, price: Money, min_qty: int | None = None) -> None:
        if min_qty is not None and min_qty < 1:
            raise ValidationError("Wholesale minimum quantity must be at least 1")
        self.wholesale_price = price
        self.wholesale_min_qty = min_qty

    def clear_wholesale(self) -> None:
        self.wholesale_price = None
        self.wholesale_min_qty = None

    # --- Queries --------------------------------------------------------------

    @property
    def margin_percent(self) -> Decimal | None:
        """Retail margin over unit cost, or None when no cost is recorded."""
        if self.unit_cost is None:
            return None
        return margin_percent(self.unit_cost.amount, self.retail_price.amount)

    def validate_prices(self) -> list[str]:
        """Check the pricing attributes for coherence.

        Returns every violated rule; an empty list means the prices are
        consistent. The resolver never calls this, it applies whatever
        the catalog holds.
        """
        errors: list[str] = []
        retail = self.retail_price.amount
        cost = self.unit_cost.amount if self.unit_cost is not None else None

        if cost is not None and retail <= cost:
            errors.append("Retail price must be greater than unit cost")

        if self.wholesale_price is not None:
            wholesale = self.wholesale_price.amount
            if cost is not None and wholesale <= cost:
                errors.append("Wholesale price must be greater than unit cost")
            if wholesale >= retail:
                errors.append("Wholesale price must be lower than retail price")

        if self.wholesale_min_qty is not None and self.wholesale_min_qty < 1:
            errors.append("Wholesale minimum quantity must be at least 1")

        if self.promo_price is not None:
            promo = self.promo_price.amount
            if promo <= 0:
                errors.append("Promo price must be greater than zero")
            if promo >= retail:
                errors.append("Promo price must be lower than retail price")

        return errors
