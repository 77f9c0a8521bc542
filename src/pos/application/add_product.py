"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, unit_label: str) -> Product:
        """Add a new product to the catalog.

        Nothing is stored unless every field is valid.
        """
        try:
            amount = Money.of(price)
        except ValidationError:
            raise ValidationError(
                f"Product price must be a positive number, got {price!r}"
            ) from None

        product = Product.create(
            product_id=self._product_repo.next_id(),
            name=name,
            price=amount,
            unit_label=unit_label,
        )
        self._product_repo.save(product)
        logger.info(
            "Added product %s '%s' at %s per %s",
            product.id, product.name, product.price, product.unit_label,
        )
        return product
