"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.application.add_product import AddProductHandler
from pos.application.update_product import (
    SetPromoHandler,
    SetWholesaleHandler,
    UpdateProductHandler,
)
from pos.domain.exceptions import DomainException
from pos.domain.service.price_resolver import wholesale_threshold
from pos.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Retail price, tax excluded (e.g. 15.00).")
@click.option("--cost", default=None, help="Unit cost.")
@click.option("--wholesale-price", default=None, help="Wholesale unit price.")
@click.option("--wholesale-min-qty", type=int, default=None, help="Units needed for wholesale.")
def product_add(
    name: str,
    price: str,
    cost: str | None,
    wholesale_price: str | None,
    wholesale_min_qty: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            cost=cost,
            wholesale_price=wholesale_price,
            wholesale_min_qty=wholesale_min_qty,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.retail_price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Retail':>12} {'Promo':>12} {'Wholesale':>16}")
    click.echo("-" * 70)
    for p in products:
        promo = str(p.promo_price) if p.promo_active and p.promo_price is not None else "-"
        if p.wholesale_price is not None:
            wholesale = f"{p.wholesale_price} x{wholesale_threshold(p)}"
        else:
            wholesale = "-"
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.retail_price):>12} {promo:>12} {wholesale:>16}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New retail price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's retail price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {price}")


@click.command("promo")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="Promo price. Omit with --end.")
@click.option("--end", is_flag=True, default=False, help="End the current promotion.")
def product_promo(product_id: str, price: str | None, end: bool) -> None:
    """Start or end a promotion on a product."""
    if not end and price is None:
        raise click.ClickException("--price is required unless --end is given")

    handler = SetPromoHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, promo_price=None if end else price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product.promo_active:
        click.echo(f"Product #{product_id} on promo at {product.promo_price}")
    else:
        click.echo(f"Product #{product_id} promo ended.")


@click.command("wholesale")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="Wholesale unit price. Omit with --clear.")
@click.option("--min-qty", type=int, default=None, help="Units needed for wholesale.")
@click.option("--clear", is_flag=True, default=False, help="Remove wholesale pricing.")
def product_wholesale(
    product_id: str, price: str | None, min_qty: int | None, clear: bool
) -> None:
    """Configure wholesale pricing on a product."""
    if not clear and price is None:
        raise click.ClickException("--price is required unless --clear is given")

    handler = SetWholesaleHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            wholesale_price=None if clear else price,
            min_qty=min_qty,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product.wholesale_price is None:
        click.echo(f"Product #{product_id} wholesale pricing removed.")
    else:
        click.echo(
            f"Product #{product_id} wholesale at {product.wholesale_price} "
            f"from {wholesale_threshold(product)} units"
        )
