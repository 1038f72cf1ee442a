"""Application services: catalog price maintenance.

Each handler loads the product, applies one pricing change and refuses
to save a product whose prices are no longer coherent.
"""

from __future__ import annotations

import logging

from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class _ProductPriceHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def _save(self, product: Product) -> None:
        errors = product.validate_prices()
        if errors:
            raise ValidationError("; ".join(errors))
        self._product_repo.save(product)


class UpdateProductHandler(_ProductPriceHandler):

    def handle(self, product_id: str, new_price: str) -> None:
        """Update a product's retail price.

        Carts are priced against the catalog when aggregated, so open
        carts see the new price on their next recomputation.
        """
        product = self._load(product_id)
        product.update_price(Money.of(new_price, product.retail_price.currency))
        self._save(product)
        logger.info("Product %s retail price set to %s", product_id, new_price)


class SetPromoHandler(_ProductPriceHandler):

    def handle(self, product_id: str, promo_price: str | None) -> Product:
        """Start a promotion at *promo_price*, or end it when None."""
        product = self._load(product_id)
        if promo_price is None:
            product.end_promo()
        else:
            product.start_promo(Money.of(promo_price, product.retail_price.currency))
        self._save(product)
        logger.info("Product %s promo: %s", product_id, promo_price or "ended")
        return product


class SetWholesaleHandler(_ProductPriceHandler):

    def handle(
        self,
        product_id: str,
        wholesale_price: str | None,
        min_qty: int | None = None,
    ) -> Product:
        """Configure wholesale pricing, or remove it when the price is None."""
        product = self._load(product_id)
        if wholesale_price is None:
            product.clear_wholesale()
        else:
            product.set_wholesale(
                Money.of(wholesale_price, product.retail_price.currency), min_qty
            )
        self._save(product)
        logger.info(
            "Product %s wholesale: %s from %s units",
            product_id, wholesale_price or "cleared", min_qty,
        )
        return product
