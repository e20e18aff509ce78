"""Data Transfer Objects, plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the shopper asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "BRL 89.90"


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a priced cart as displayed to the user."""

    items: list[CartLineDTO]
    subtotal: str
    discount_percent: str
    total: str
    currency: str
