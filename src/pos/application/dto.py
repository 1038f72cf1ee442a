"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amount fields named
``*_text`` are already formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.application.formatting import PriceBadge
from pos.domain.model.value_objects import to_cents
from pos.domain.service.cart_aggregator import CheckoutLineRecord
from pos.domain.service.tax_calculator import TaxBreakdown


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product on the cart and, optionally, the operator's price."""

    product_id: str
    quantity: int
    custom_price: str | None = None


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Output: how a single product is priced for a quantity."""

    product_id: str
    product_name: str
    quantity: int
    base_price: Decimal
    final_price: Decimal
    line_total: Decimal
    discount_percent: Decimal | None
    savings: Decimal | None
    is_promo: bool
    is_wholesale: bool
    base_price_text: str
    final_price_text: str
    savings_text: str | None
    line_total_text: str
    badge: PriceBadge | None
    qualifies_for_wholesale: bool
    units_until_wholesale: int | None
    description: str

    @property
    def has_discount(self) -> bool:
        return self.is_promo or self.is_wholesale


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single priced cart line as displayed to the operator."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    final_price: str
    line_total: str
    badge: str | None
    custom_price: bool


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output: the priced cart with its totals and tax breakdown."""

    lines: list[CartLineDTO]
    subtotal: Decimal
    total_discount: Decimal
    grand_total: Decimal
    discounted_line_count: int
    tax: TaxBreakdown
    subtotal_text: str
    discount_text: str
    grand_total_text: str
    tax_text: str
    total_with_tax_text: str


@dataclass(frozen=True)
class CheckoutPayload:
    """Output: the sale as submitted to the sales-recording service."""

    payment_method: str
    currency: str
    lines: list[CheckoutLineRecord]
    subtotal: Decimal
    total_discount: Decimal
    grand_total: Decimal
    tax: TaxBreakdown
    received_amount: Decimal | None
    change: Decimal | None

    def to_dict(self) -> dict:
        """Serialize with decimal strings, ready for JSON encoding."""
        return {
            "metodo_pago": self.payment_method,
            "moneda": self.currency,
            "productos": [
                {
                    "id_producto": line.product_id,
                    "cantidad": line.quantity,
                    "precio_original": _amount(line.original_price),
                    "precio_final": _amount(line.final_price),
                    "descuento_oferta": _amount(line.promo_discount),
                    "descuento_mayorista": _amount(line.wholesale_discount),
                    "descuento_total": _amount(line.total_discount),
                    "es_oferta": line.is_promo,
                    "es_mayorista": line.is_wholesale,
                    "tiene_precio_personalizado": line.has_custom_price,
                    "precio_personalizado_base": (
                        _amount(line.custom_base_price)
                        if line.custom_base_price is not None
                        else None
                    ),
                }
                for line in self.lines
            ],
            "subtotal": str(self.tax.subtotal),
            "descuentos": _amount(self.total_discount),
            "igv": str(self.tax.tax),
            "total": str(self.tax.total),
            "monto_recibido": (
                _amount(self.received_amount) if self.received_amount is not None else None
            ),
            "vuelto": _amount(self.change) if self.change is not None else None,
        }


def _amount(value: Decimal) -> str:
    return str(to_cents(value))
