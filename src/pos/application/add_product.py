"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        cost: str | None = None,
        wholesale_price: str | None = None,
        wholesale_min_qty: int | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        The prices must be coherent (see ``Product.validate_prices``);
        every violated rule is reported in a single ValidationError.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        retail_price = Money.of(price)
        if retail_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        product = Product(
            id=next_id,
            name=name.strip(),
            retail_price=retail_price,
            unit_cost=Money.of(cost) if cost is not None else None,
            wholesale_price=(
                Money.of(wholesale_price) if wholesale_price is not None else None
            ),
            wholesale_min_qty=wholesale_min_qty,
        )

        errors = product.validate_prices()
        if errors:
            raise ValidationError("; ".join(errors))

        self._product_repo.save(product)
        logger.info("Added product %s '%s' at %s", product.id, product.name, price)
        return product
