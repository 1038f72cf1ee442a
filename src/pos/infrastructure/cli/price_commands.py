"""CLI commands for single-product pricing."""

from __future__ import annotations

import click

from pos.application.quote_price import QuotePriceHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import product_repository


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", type=int, default=1, show_default=True, help="Quantity.")
def price_show(product_id: str, quantity: int) -> None:
    """Show how a product is priced for a quantity."""
    handler = QuotePriceHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.product_name}  x{dto.quantity}")
    click.echo(f"  Base price:  {dto.base_price_text}")
    click.echo(f"  Final price: {dto.final_price_text}")
    if dto.badge is not None:
        click.echo(f"  Badge:       {dto.badge.text}")
    if dto.savings_text is not None:
        click.echo(f"  Savings:     {dto.savings_text}")
    click.echo(f"  Line total:  {dto.line_total_text}")
    click.echo(f"  {dto.description}")
    if dto.units_until_wholesale:
        click.echo(f"  {dto.units_until_wholesale} more unit(s) for wholesale price")
