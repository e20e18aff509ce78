"""Cart aggregate, the core of the domain.

The Cart is an immutable aggregate: every operation that looks like a
mutation (adding or removing items, applying a coupon) returns a brand-new
Cart and leaves the receiver untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.exceptions import (
    CurrencyMismatchError,
    InvalidQuantityError,
    ValidationError,
)
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    validate_discount_percent,
)


@dataclass(frozen=True)
class LineItem:
    """A product reference plus the quantity being bought.

    The product is shared, not owned: many line items (in many carts) may
    point at the same Product.
    """

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.product, Product):
            raise ValidationError("Line item requires a product")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise InvalidQuantityError(
                f"Quantity must be positive, got {self.quantity}"
            )

    def subtotal(self) -> Money:
        return self.product.price.multiply(self.quantity)

    def __str__(self) -> str:
        return f"{self.quantity} x {self.product.name} @ {self.product.price}"


@dataclass(frozen=True)
class Cart:
    """Aggregate root for a shopping cart.

    Use ``Cart.create()`` for a new, empty cart.  ``items`` is always
    stored as a tuple built from whatever sequence the caller passed, so
    holding on to (or mutating) that sequence never affects the cart.
    """

    items: tuple[LineItem, ...] = ()
    discount_percent: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, LineItem):
                raise ValidationError(
                    f"Cart items must be LineItem, got {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)
        object.__setattr__(
            self, "discount_percent", validate_discount_percent(self.discount_percent)
        )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create() -> Cart:
        return Cart()

    # --- Transitions (each returns a new Cart) --------------------------------

    def add_item(self, item: LineItem) -> Cart:
        """Append *item*. Lines for the same product are not merged."""
        return Cart(self.items + (item,), self.discount_percent)

    def remove_item(self, product_id: str) -> Cart:
        """Drop every line for *product_id*; an unknown id is a no-op."""
        remaining = tuple(item for item in self.items if item.product.id != product_id)
        return Cart(remaining, self.discount_percent)

    def apply_coupon(self, percent: str | int | float | Decimal) -> Cart:
        """Replace the discount percentage (0 to 30)."""
        return Cart(self.items, validate_discount_percent(percent))

    # --- Computed values ------------------------------------------------------

    def subtotal(self) -> Money:
        """Sum of line subtotals, before any discount.

        Lines are folded in insertion order; mixing currencies raises
        CurrencyMismatchError.
        """
        if not self.items:
            return Money.of(0, DEFAULT_CURRENCY)

        result = self.items[0].subtotal()
        for item in self.items[1:]:
            result = result.add(item.subtotal())
        return result

    def calculate_total(self) -> Money:
        """Subtotal with the discount applied once to the grand total."""
        total = self.subtotal()
        if self.discount_percent > 0 and not total.is_zero():
            total = total.apply_discount(self.discount_percent)
        return total

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        lines = ", ".join(str(item) for item in self.items)
        try:
            total = str(self.calculate_total())
        except CurrencyMismatchError:
            total = "n/a (mixed currencies)"
        return (
            f"Cart(items=[{lines}], discount={self.discount_percent:f}%, "
            f"total={total})"
        )
