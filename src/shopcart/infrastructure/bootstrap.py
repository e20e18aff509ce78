"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Currency, Money
from shopcart.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def default_catalog() -> list[Product]:
    return [
        Product(id="001", name="Notebook Dell", price=Money.of("2500.00", Currency.BRL)),
        Product(id="002", name="Mouse Sem Fio", price=Money.of("89.90", Currency.BRL)),
        Product(id="003", name="Teclado Mecânico", price=Money.of("299.90", Currency.BRL)),
    ]


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(default_catalog())
