"""Application service: Quote Cart use case.

Resolves product ids against the catalog, builds a Cart through its
pure transitions and prices it.  Nothing is stored: the cart exists
only for the duration of the call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from shopcart.application.dto import CartDTO, CartItemSpec, CartLineDTO
from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.cart import Cart, LineItem
from shopcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class QuoteCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        item_specs: list[CartItemSpec],
        coupon: str | int | Decimal | None = None,
        remove: Iterable[str] = (),
    ) -> CartDTO:
        """Price a cart.

        Steps:
        1. Resolve each product id to a Product (fail if not found).
        2. Add one LineItem per spec, in order.
        3. Drop every line for the product ids in *remove*.
        4. Apply the coupon, if any, and return a DTO.
        """
        cart = Cart.create()

        for spec in item_specs:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_id}'"
                )
            cart = cart.add_item(LineItem(product=product, quantity=spec.quantity))

        for product_id in remove:
            before = len(cart)
            cart = cart.remove_item(product_id)
            logger.debug(
                "Removed %d line(s) for product %s", before - len(cart), product_id
            )

        if coupon is not None:
            cart = cart.apply_coupon(coupon)

        dto = self._to_dto(cart)
        logger.info(
            "Quoted cart with %d line(s): total %s", len(dto.items), dto.total
        )
        return dto

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(cart: Cart) -> CartDTO:
        total = cart.calculate_total()
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=item.product.id,
                    product_name=item.product.name,
                    quantity=item.quantity,
                    unit_price=str(item.product.price.rounded()),
                    subtotal=str(item.subtotal().rounded()),
                )
                for item in cart.items
            ],
            subtotal=str(cart.subtotal().rounded()),
            discount_percent=f"{cart.discount_percent:f}",
            total=str(total.rounded()),
            currency=total.currency.code,
        )
