"""In-memory implementation of ProductRepository.

The catalog lives for the life of the process; nothing is written out.
"""

from __future__ import annotations

from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        # dicts keep insertion order, which is the display order
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def next_id(self) -> int:
        if not self._store:
            return 1
        return max(self._store) + 1
