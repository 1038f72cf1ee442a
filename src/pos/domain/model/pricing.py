"""Results produced by the pricing engine.

Both are value objects with no identity. They hold raw Decimal amounts
(unrounded) so that aggregation can sum exact values; rounding happens
only when presenting or taxing.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PriceCalculation:
    """Unit price a product sells at for a given quantity.

    ``is_promo`` and ``is_wholesale`` are mutually exclusive.
    ``discount_percent`` and ``savings`` are only set when positive.
    """

    base_price: Decimal
    final_price: Decimal
    quantity: int
    is_promo: bool = False
    is_wholesale: bool = False
    discount_percent: Decimal | None = None
    savings: Decimal | None = None

    @property
    def has_discount(self) -> bool:
        return self.is_promo or self.is_wholesale

    @property
    def unit_discount(self) -> Decimal:
        return self.base_price - self.final_price

    @property
    def promo_discount(self) -> Decimal:
        """Absolute per-unit amount taken off by the promotion."""
        return self.unit_discount if self.is_promo else Decimal("0")

    @property
    def wholesale_discount(self) -> Decimal:
        """Absolute per-unit amount taken off by wholesale pricing."""
        return self.unit_discount if self.is_wholesale else Decimal("0")

    @property
    def line_total(self) -> Decimal:
        return self.final_price * self.quantity


@dataclass(frozen=True)
class OverrideResult:
    """Unit price for a line whose base price was entered by the operator.

    ``base_price`` is the operator's price. ``promo_discount`` and
    ``wholesale_discount`` are the absolute amounts implied by the
    catalog, and both are subtracted from the operator's price.
    """

    base_price: Decimal
    final_price: Decimal
    quantity: int
    promo_discount: Decimal
    wholesale_discount: Decimal
    is_promo: bool
    is_wholesale: bool

    @property
    def total_discount(self) -> Decimal:
        return self.promo_discount + self.wholesale_discount

    @property
    def has_discount(self) -> bool:
        return self.is_promo or self.is_wholesale

    @property
    def line_total(self) -> Decimal:
        return self.final_price * self.quantity
