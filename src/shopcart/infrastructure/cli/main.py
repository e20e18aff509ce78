import logging

import click

from shopcart.infrastructure.cli.cart_commands import cart_quote
from shopcart.infrastructure.cli.product_commands import product_list


@click.group()
@click.option(
    "--log-level",
    envvar="SHOPCART_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """shopcart: immutable shopping cart pricing"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def cart() -> None:
    """Price shopping carts."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
cart.add_command(cart_quote)
product.add_command(product_list)
