"""Integration tests for the QuoteCart use case.

Uses the in-memory fake repository: no file I/O.
"""

from decimal import Decimal

import pytest

from pos.application.dto import CartItemSpec
from pos.application.quote_cart import QuoteCartHandler
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository, make_product


def _setup() -> tuple[QuoteCartHandler, FakeProductRepository]:
    repo = FakeProductRepository([
        make_product(id="1", name="Notebook", retail="10", promo="8"),
        make_product(id="2", name="Pens", retail="20", wholesale="15", min_qty=6),
        make_product(id="3", name="Eraser", retail="1.50"),
    ])
    return QuoteCartHandler(repo), repo


class TestQuoteCart:

    def test_totals_and_tax(self):
        handler, _ = _setup()
        dto = handler.handle([
            CartItemSpec("1", 2),
            CartItemSpec("2", 6),
            CartItemSpec("3", 4),
        ])
        # subtotal 20 + 120 + 6 = 146; discounts 4 + 30 = 34
        assert dto.subtotal == Decimal("146")
        assert dto.total_discount == Decimal("34")
        assert dto.grand_total == Decimal("112")
        assert dto.discounted_line_count == 2
        assert dto.tax.subtotal == Decimal("112.00")
        assert dto.tax.tax == Decimal("20.16")
        assert dto.tax.total == Decimal("132.16")
        assert dto.total_with_tax_text == "S/. 132.16"
        assert dto.discount_text == "S/. 34.00"

    def test_line_dtos(self):
        handler, _ = _setup()
        dto = handler.handle([CartItemSpec("1", 2), CartItemSpec("3", 1, custom_price="1.20")])
        promo_line, custom_line = dto.lines
        assert promo_line.badge == "OFERTA -20%"
        assert promo_line.final_price == "S/. 8.00"
        assert promo_line.line_total == "S/. 16.00"
        assert not promo_line.custom_price
        assert custom_line.custom_price
        assert custom_line.unit_price == "S/. 1.20"
        assert custom_line.badge is None

    def test_repeated_product_merged(self):
        handler, _ = _setup()
        dto = handler.handle([CartItemSpec("2", 3), CartItemSpec("2", 3)])
        assert len(dto.lines) == 1
        assert dto.lines[0].quantity == 6
        assert dto.grand_total == Decimal("90")

    def test_currency_is_configurable_for_display(self):
        _, repo = _setup()
        dto = QuoteCartHandler(repo, currency="USD").handle([CartItemSpec("3", 2)])
        assert dto.grand_total_text == "$ 3.00"

    def test_unknown_product_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle([CartItemSpec("404", 1)])

    def test_non_positive_quantity_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle([CartItemSpec("1", 0)])

    def test_negative_custom_price_floored_to_one_cent(self):
        handler, _ = _setup()
        dto = handler.handle([CartItemSpec("1", 1, custom_price="-5")])
        assert dto.grand_total == Decimal("0.01")
        assert dto.lines[0].final_price == "S/. 0.01"

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf"])
    def test_invalid_custom_price_rejected(self, raw):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid amount"):
            handler.handle([CartItemSpec("1", 1, custom_price=raw)])

    def test_mixed_currencies_rejected(self):
        handler, repo = _setup()
        repo.save(Product(id="9", name="Import", retail_price=Money.of("5", "USD")))
        with pytest.raises(ValidationError, match="Cannot mix PEN and USD"):
            handler.handle([CartItemSpec("1", 1), CartItemSpec("9", 1)])
