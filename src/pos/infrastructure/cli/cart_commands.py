"""CLI commands for pricing carts and checking out."""

from __future__ import annotations

import json

import click

from pos.application.checkout import PAYMENT_METHODS, CheckoutHandler
from pos.application.dto import CartItemSpec
from pos.application.quote_cart import QuoteCartHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import product_repository, settings


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:3,2:5@12.50' into CartItemSpec list.

    The optional ``@PRICE`` suffix is the operator's unit price override.
    """
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity[@Price]'."
            )
        product_id, rest = pair.split(":", 1)
        qty_str, _, custom_price = rest.partition("@")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(
            CartItemSpec(
                product_id=product_id.strip(),
                quantity=qty,
                custom_price=custom_price.strip() or None,
            )
        )
    return specs


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ID:Qty,ID:Qty@Price'.")
def cart_quote(items: str) -> None:
    """Price a cart, including IGV."""
    specs = _parse_items(items)
    handler = QuoteCartHandler(
        product_repo=product_repository(), currency=settings().currency
    )

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Final':>12} {'Total':>12}")
    click.echo(f"  {'-'*65}")
    for line in dto.lines:
        marker = " *" if line.custom_price else ""
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>12} "
            f"{line.final_price:>12} {line.line_total:>12}{marker}"
        )
        if line.badge:
            click.echo(f"    {line.badge}")
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal_text:>40}")
    click.echo(f"  {'Discounts':<27} {dto.discount_text:>40}")
    click.echo(f"  {'Total (excl. IGV)':<27} {dto.grand_total_text:>40}")
    click.echo(f"  {'IGV 18%':<27} {dto.tax_text:>40}")
    click.echo(f"  {'Total':<27} {dto.total_with_tax_text:>40}")


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'ID:Qty,ID:Qty@Price'.")
@click.option(
    "--payment",
    type=click.Choice(sorted(PAYMENT_METHODS)),
    default="cash",
    show_default=True,
    help="Payment method.",
)
@click.option("--received", default=None, help="Amount handed over by the customer.")
def cart_checkout(items: str, payment: str, received: str | None) -> None:
    """Print the sale payload for a cart as JSON."""
    specs = _parse_items(items)
    handler = CheckoutHandler(
        product_repo=product_repository(), currency=settings().currency
    )

    try:
        payload = handler.handle(specs, payment_method=payment, received_amount=received)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(payload.to_dict(), indent=2, ensure_ascii=False))
