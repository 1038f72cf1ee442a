"""Application service: Quote Price use case (query).

Everything the point-of-sale screen shows for one product at one
quantity: the resolved price, its formatted variants, the discount badge
and how far the line is from wholesale pricing.
"""

from __future__ import annotations

import logging

from pos.application.dto import PriceQuoteDTO
from pos.application.formatting import format_price, price_badge
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.price_resolver import (
    describe_price,
    qualifies_for_wholesale,
    resolve_price,
    units_until_wholesale,
)

logger = logging.getLogger(__name__)


class QuotePriceHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int = 1) -> PriceQuoteDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        calculation = resolve_price(product, quantity)
        currency = product.retail_price.currency
        line_total = calculation.line_total

        logger.info(
            "Quoted product %s x%s at %s", product.id, quantity, calculation.final_price
        )

        return PriceQuoteDTO(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            base_price=calculation.base_price,
            final_price=calculation.final_price,
            line_total=line_total,
            discount_percent=calculation.discount_percent,
            savings=calculation.savings,
            is_promo=calculation.is_promo,
            is_wholesale=calculation.is_wholesale,
            base_price_text=format_price(calculation.base_price, currency),
            final_price_text=format_price(calculation.final_price, currency),
            savings_text=(
                format_price(calculation.savings, currency)
                if calculation.savings is not None
                else None
            ),
            line_total_text=format_price(line_total, currency),
            badge=price_badge(calculation),
            qualifies_for_wholesale=qualifies_for_wholesale(product, quantity),
            units_until_wholesale=units_until_wholesale(product, quantity),
            description=describe_price(product, quantity),
        )
