"""Dict-backed implementation of ProductRepository.

Nothing is written anywhere: the catalog lives as long as the process.
"""

from __future__ import annotations

import logging

from shopcart.domain.model.product import Product
from shopcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for product in products or []:
            self.save(product)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id in self._store:
            logger.debug("Replacing product %s in catalog", product.id)
        self._store[product.id] = product
