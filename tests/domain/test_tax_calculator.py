"""Unit tests for the IGV breakdown."""

from decimal import Decimal

import pytest

from pos.domain.service.tax_calculator import IGV_RATE, compute_tax


class TestComputeTax:

    def test_rate_is_eighteen_percent(self):
        assert IGV_RATE == Decimal("0.18")

    def test_breakdown(self):
        tax = compute_tax(Decimal("100"))
        assert tax.subtotal == Decimal("100.00")
        assert tax.tax == Decimal("18.00")
        assert tax.total == Decimal("118.00")

    def test_each_field_rounded_from_exact_value(self):
        # 10.005 * 0.18 = 1.8009; total 11.8059
        tax = compute_tax(Decimal("10.005"))
        assert tax.subtotal == Decimal("10.01")
        assert tax.tax == Decimal("1.80")
        assert tax.total == Decimal("11.81")

    def test_negative_subtotal_propagates(self):
        tax = compute_tax(Decimal("-50"))
        assert tax.tax == Decimal("-9.00")
        assert tax.total == Decimal("-59.00")

    @pytest.mark.parametrize(
        "subtotal", ["0", "0.01", "0.05", "1.11", "10.005", "33.33", "99.99", "1234.567"]
    )
    def test_total_minus_tax_matches_subtotal(self, subtotal):
        tax = compute_tax(Decimal(subtotal))
        assert abs((tax.total - tax.tax) - tax.subtotal) <= Decimal("0.01")
