"""Tests for the QuotePrice use case and the formatting helpers.

Uses the in-memory fake repository: no file I/O.
"""

from decimal import Decimal

import pytest

from pos.application.formatting import format_price, price_badge
from pos.application.quote_price import QuotePriceHandler
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.service.price_resolver import resolve_price
from tests.fakes import FakeProductRepository, make_product


def _handler() -> QuotePriceHandler:
    return QuotePriceHandler(
        FakeProductRepository([
            make_product(id="1", name="Notebook", retail="10", promo="8"),
            make_product(id="2", name="Pens", retail="20", wholesale="15", min_qty=6),
            make_product(id="3", name="Eraser", retail="1.50"),
        ])
    )


class TestQuotePrice:

    def test_promo_quote(self):
        dto = _handler().handle("1", 2)
        assert dto.final_price == Decimal("8")
        assert dto.final_price_text == "S/. 8.00"
        assert dto.base_price_text == "S/. 10.00"
        assert dto.savings_text == "S/. 4.00"
        assert dto.line_total_text == "S/. 16.00"
        assert dto.badge is not None
        assert dto.badge.text == "OFERTA -20%"
        assert dto.has_discount
        assert dto.description == "En oferta (20% desc.)"

    def test_wholesale_progress(self):
        dto = _handler().handle("2", 4)
        assert not dto.is_wholesale
        assert not dto.qualifies_for_wholesale
        assert dto.units_until_wholesale == 2
        assert dto.badge is None
        assert dto.savings_text is None

        dto = _handler().handle("2", 6)
        assert dto.is_wholesale
        assert dto.units_until_wholesale == 0
        assert dto.badge.text == "MAYORISTA -25%"

    def test_regular_product(self):
        dto = _handler().handle("3", 3)
        assert dto.line_total_text == "S/. 4.50"
        assert dto.units_until_wholesale is None
        assert dto.description == "Precio normal"

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            _handler().handle("99")


class TestFormatting:

    def test_format_price_symbols(self):
        assert format_price(Decimal("5")) == "S/. 5.00"
        assert format_price(Decimal("5"), "USD") == "$ 5.00"
        assert format_price(Decimal("5"), "EUR") == "€ 5.00"
        assert format_price(Decimal("5"), "CLP") == "CLP 5.00"

    def test_badge_percent_rounded_to_integer(self):
        calc = resolve_price(make_product(retail="3", promo="2"))  # 33.33%
        assert price_badge(calc).text == "OFERTA -33%"

    def test_no_badge_without_discount(self):
        assert price_badge(resolve_price(make_product())) is None

    def test_no_badge_when_promo_is_not_cheaper(self):
        assert price_badge(resolve_price(make_product(retail="10", promo="11"))) is None
