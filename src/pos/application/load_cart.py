"""Build a Cart from item specs by looking each product up in the catalog."""

from __future__ import annotations

from pos.application.dto import CartItemSpec
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.cart import Cart
from pos.domain.model.value_objects import to_decimal
from pos.domain.repository.product_repository import ProductRepository


def load_cart(product_repo: ProductRepository, item_specs: list[CartItemSpec]) -> Cart:
    """Resolve every spec to a catalog product and put it on a new cart.

    Specs naming the same product are merged into one line; the last
    custom price given for it wins. All products must be priced in the
    same currency.
    """
    cart = Cart()
    currency = None
    for spec in item_specs:
        product = product_repo.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Product with ID '{spec.product_id}' not found"
            )
        product_currency = product.retail_price.currency
        if currency is None:
            currency = product_currency
        elif product_currency != currency:
            raise ValidationError(
                f"Cannot mix {currency} and {product_currency} prices in one cart"
            )
        cart.add(product, spec.quantity)
        if spec.custom_price is not None:
            cart.set_custom_price(product.id, to_decimal(spec.custom_price))
    return cart
