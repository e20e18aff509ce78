"""Product value.

Products live independently of carts. A single Product is shared by
reference among every line item that sells it.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog: stable id, display name and unit price."""

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Product ID is required")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(f"Product price is required for '{self.name}'")

    def __str__(self) -> str:
        return f"Product(id='{self.id}', name='{self.name}', price={self.price})"
