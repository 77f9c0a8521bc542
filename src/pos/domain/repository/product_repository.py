"""Abstract store for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in
``pos.infrastructure.memory``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a new or updated product."""

    @abstractmethod
    def next_id(self) -> int:
        """Return the ID the next new product should get."""
