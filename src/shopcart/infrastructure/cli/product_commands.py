"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.application.list_products import ListProductsHandler
from shopcart.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>14}")
    click.echo("-" * 42)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>14}")
