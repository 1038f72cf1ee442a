"""Unit tests for operator price overrides."""

from decimal import Decimal

import pytest

from pos.domain.service.override_reconciler import resolve_with_override
from tests.fakes import make_product


class TestOverrideDiscounts:

    def test_both_discounts_are_subtracted(self):
        product = make_product(retail="10", promo="8", wholesale="7", min_qty=1)
        result = resolve_with_override(product, 1, Decimal("6"))
        assert result.promo_discount == Decimal("2")
        assert result.wholesale_discount == Decimal("3")
        assert result.total_discount == Decimal("5")
        assert result.final_price == Decimal("1")
        assert result.base_price == Decimal("6")

    def test_no_discounts_keeps_operator_price(self):
        result = resolve_with_override(make_product(retail="10"), 2, Decimal("9.50"))
        assert result.final_price == Decimal("9.50")
        assert result.total_discount == Decimal("0")
        assert not result.is_promo
        assert not result.is_wholesale
        assert result.line_total == Decimal("19.00")

    def test_discount_is_absolute_not_percentage(self):
        # 20% off 10 is 2; on an operator price of 20 it stays 2, not 4.
        result = resolve_with_override(make_product(retail="10", promo="8"), 1, Decimal("20"))
        assert result.final_price == Decimal("18")

    def test_wholesale_discount_needs_threshold(self):
        product = make_product(retail="10", wholesale="7", min_qty=5)
        assert resolve_with_override(product, 4, Decimal("10")).wholesale_discount == 0
        assert resolve_with_override(product, 5, Decimal("10")).wholesale_discount == 3


class TestOverrideFlags:

    def test_promo_flag_passes_through(self):
        product = make_product(retail="10", promo_active=True)
        result = resolve_with_override(product, 1, Decimal("10"))
        assert result.is_promo
        assert result.promo_discount == Decimal("0")

    def test_wholesale_flag_needs_explicit_threshold(self):
        product = make_product(retail="10", wholesale="7")
        result = resolve_with_override(product, 50, Decimal("10"))
        assert result.wholesale_discount == Decimal("3")
        assert not result.is_wholesale

    def test_wholesale_flag_at_threshold(self):
        product = make_product(retail="10", wholesale="7", min_qty=3)
        assert resolve_with_override(product, 3, Decimal("10")).is_wholesale
        assert not resolve_with_override(product, 2, Decimal("10")).is_wholesale


class TestOverrideFloor:

    def test_clamped_to_one_cent(self):
        product = make_product(retail="10", promo="8", wholesale="7")
        result = resolve_with_override(product, 1, Decimal("3"))
        assert result.final_price == Decimal("0.01")

    def test_negative_operator_price_clamped(self):
        result = resolve_with_override(make_product(retail="10"), 1, Decimal("-5"))
        assert result.base_price == Decimal("-5")
        assert result.final_price == Decimal("0.01")

    @pytest.mark.parametrize("custom", ["-5", "0", "0.01", "1", "4.99", "5", "250"])
    @pytest.mark.parametrize("qty", [1, 4, 10])
    def test_final_price_never_below_floor(self, custom, qty):
        product = make_product(retail="10", promo="8", wholesale="7", min_qty=4)
        result = resolve_with_override(product, qty, Decimal(custom))
        assert result.final_price >= Decimal("0.01")
