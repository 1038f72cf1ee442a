"""Cart aggregate: the lines a customer is about to buy.

A cart lives only for the duration of a sale: lines are created when a
product is scanned, mutated as the quantity changes and discarded on
removal or once the sale is recorded. Totals are never stored here; they
are recomputed from the lines by ``cart_aggregator.aggregate``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    """A product on the cart, with an optional operator price override."""

    product: Product
    quantity: Quantity
    # Tax-exclusive unit price typed by the operator. Not validated: the
    # override reconciler floors whatever it receives.
    custom_price: Decimal | None = None

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def has_custom_price(self) -> bool:
        return self.custom_price is not None


@dataclass
class Cart:
    """Aggregate root for the lines of an in-progress sale.

    Each product appears on at most one line; adding it again increases
    that line's quantity.
    """

    _lines: dict[str, CartLine] = field(default_factory=dict, init=False, repr=False)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartLine:
        added = Quantity(quantity)
        existing = self._lines.get(product.id)
        if existing is not None:
            existing.quantity = Quantity(existing.quantity.value + added.value)
            existing.product = product
            return existing
        line = CartLine(product=product, quantity=added)
        self._lines[product.id] = line
        return line

    def update_quantity(self, product_id: str, quantity: int) -> None:
        self._find_line(product_id).quantity = Quantity(quantity)

    def set_custom_price(self, product_id: str, price: Decimal | None) -> None:
        """Set or clear (``None``) the operator price for a line."""
        self._find_line(product_id).custom_price = price

    def remove(self, product_id: str) -> None:
        self._find_line(product_id)
        del self._lines[product_id]

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines.values())

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine:
        line = self._lines.get(product_id)
        if line is None:
            raise ValidationError(f"Product ID '{product_id}' is not in the cart")
        return line
