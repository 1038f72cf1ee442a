"""Unit tests for cart aggregation and the checkout line projection."""

from decimal import Decimal
from itertools import permutations

from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import Quantity
from pos.domain.service.cart_aggregator import aggregate, checkout_record
from tests.fakes import make_product


def _line(product, qty: int, custom: str | None = None) -> CartLine:
    return CartLine(
        product=product,
        quantity=Quantity(qty),
        custom_price=Decimal(custom) if custom is not None else None,
    )


def _mixed_lines() -> list[CartLine]:
    return [
        _line(make_product(id="1", retail="10"), 2),
        _line(make_product(id="2", retail="10", promo="8"), 3),
        _line(make_product(id="3", retail="20", wholesale="15", min_qty=4), 5),
        _line(make_product(id="4", retail="10", promo="8", wholesale="7"), 1, custom="6"),
    ]


class TestAggregate:

    def test_empty_cart(self):
        totals = aggregate([])
        assert totals.subtotal == 0
        assert totals.total_discount == 0
        assert totals.grand_total == 0
        assert totals.discounted_line_count == 0
        assert not totals.has_discounts

    def test_regular_lines(self):
        totals = aggregate([_line(make_product(retail="12.50"), 4)])
        assert totals.subtotal == Decimal("50.00")
        assert totals.total_discount == 0
        assert totals.grand_total == Decimal("50.00")

    def test_mixed_cart(self):
        totals = aggregate(_mixed_lines())
        # subtotal: 20 + 30 + 100 + 6 (operator base) = 156
        assert totals.subtotal == Decimal("156")
        # discount: 0 + 6 + 25 + 5 = 36
        assert totals.total_discount == Decimal("36")
        assert totals.grand_total == Decimal("120")
        assert totals.discounted_line_count == 3
        assert totals.has_discounts

    def test_override_line_uses_operator_price_as_base(self):
        product = make_product(retail="10", promo="8")
        totals = aggregate([_line(product, 2, custom="15")])
        assert totals.subtotal == Decimal("30")
        assert totals.total_discount == Decimal("4")
        assert totals.grand_total == Decimal("26")

    def test_order_does_not_matter(self):
        lines = _mixed_lines()
        expected = aggregate(lines)
        for ordering in permutations(lines):
            totals = aggregate(list(ordering))
            assert totals.subtotal == expected.subtotal
            assert totals.total_discount == expected.total_discount
            assert totals.grand_total == expected.grand_total

    def test_accepts_cart_lines(self):
        cart = Cart()
        cart.add(make_product(id="1", retail="10", promo="8"), 2)
        assert aggregate(cart.lines).grand_total == Decimal("16")


class TestCheckoutRecord:

    def test_regular_line(self):
        record = checkout_record(_line(make_product(id="7", name="Tape", retail="10", promo="8"), 3))
        assert record.product_id == "7"
        assert record.product_name == "Tape"
        assert record.original_price == Decimal("10")
        assert record.final_price == Decimal("8")
        assert record.promo_discount == Decimal("2")
        assert record.wholesale_discount == Decimal("0")
        assert record.total_discount == Decimal("2")
        assert record.is_promo
        assert not record.has_custom_price
        assert record.custom_base_price is None
        assert record.line_total == Decimal("24")

    def test_override_line(self):
        product = make_product(retail="10", promo="8", wholesale="7", min_qty=1)
        record = checkout_record(_line(product, 1, custom="6"))
        assert record.original_price == Decimal("10")
        assert record.final_price == Decimal("1")
        assert record.promo_discount == Decimal("2")
        assert record.wholesale_discount == Decimal("3")
        assert record.total_discount == Decimal("5")
        assert record.has_custom_price
        assert record.custom_base_price == Decimal("6")
        assert record.is_promo
        assert record.is_wholesale
