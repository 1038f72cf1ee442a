import click

from pos.infrastructure.bootstrap import settings
from pos.infrastructure.cli.cart_commands import cart_checkout, cart_quote
from pos.infrastructure.cli.price_commands import price_show
from pos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_promo,
    product_update,
    product_wholesale,
)
from pos.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING...). Defaults to POS_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """POS: point-of-sale pricing"""
    configure_logging(log_level or settings().log_level)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def price() -> None:
    """Inspect product pricing."""


@cli.group()
def cart() -> None:
    """Price carts and build checkout payloads."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_promo)
product.add_command(product_update)
product.add_command(product_wholesale)
price.add_command(price_show)
cart.add_command(cart_checkout)
cart.add_command(cart_quote)
