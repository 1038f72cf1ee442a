"""IGV (sales tax) breakdown applied once at checkout."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.value_objects import to_cents

IGV_RATE = Decimal("0.18")


@dataclass(frozen=True)
class TaxBreakdown:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def compute_tax(subtotal: Decimal) -> TaxBreakdown:
    """Split a tax-exclusive *subtotal* into subtotal, IGV and total.

    Each field is rounded from its own exact value, so ``total`` may differ
    by a cent from ``subtotal + tax``. Negative input is not rejected.
    """
    tax = subtotal * IGV_RATE
    total = subtotal + tax
    return TaxBreakdown(
        subtotal=to_cents(subtotal),
        tax=to_cents(tax),
        total=to_cents(total),
    )
