"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from shopcart.application.dto import CartDTO, CartItemSpec
from shopcart.application.quote_cart import QuoteCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import product_repository


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '001:1,002:2' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a priced cart."""
    if not dto.items:
        click.echo("Cart is empty.")
    else:
        click.echo(
            f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>14} {'Subtotal':>14}"
        )
        click.echo(f"  {'-'*63}")
        for item in dto.items:
            click.echo(
                f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
                f"{item.unit_price:>14} {item.subtotal:>14}"
            )
        click.echo(f"  {'-'*63}")

    click.echo(f"  {'Subtotal':<47} {dto.subtotal:>15}")
    click.echo(f"  {'Discount':<47} {dto.discount_percent + '%':>15}")
    click.echo(f"  {'Total':<47} {dto.total:>15}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--coupon", default=None, help="Discount percentage (0 to 30).")
@click.option(
    "--remove",
    multiple=True,
    help="Product ID to drop from the cart. May be repeated.",
)
def cart_quote(items: str, coupon: str | None, remove: tuple[str, ...]) -> None:
    """Price a cart built from catalog products."""
    specs = _parse_items(items)

    handler = QuoteCartHandler(product_repo=product_repository())

    try:
        dto = handler.handle(specs, coupon=coupon, remove=remove)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)
