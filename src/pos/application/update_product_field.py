"""Application service: edit a product's price or label in place."""

from __future__ import annotations

import logging

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product, ProductField
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductFieldHandler:
    """Apply a single field edit coming from the product list.

    Unparseable prices are stored as zero unless ``strict_prices`` is
    set, in which case the edit is rejected with ValidationError and the
    product keeps its old price.
    """

    def __init__(self, product_repo: ProductRepository, strict_prices: bool = False) -> None:
        self._product_repo = product_repo
        self._strict_prices = strict_prices

    def handle(self, product_id: int, field: str, raw_value: str) -> Product | None:
        """Returns the updated product, or None if the ID is unknown.

        Bill lines already holding the product are not touched.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.debug("Ignoring edit for unknown product %s", product_id)
            return None

        target = ProductField.parse(field)

        if target is ProductField.PRICE:
            product.update_price(self._parse_price(product_id, raw_value))
        else:
            product.update_unit_label(raw_value)

        self._product_repo.save(product)
        logger.info("Updated product %s: %s to %s", product_id, target.value, raw_value)
        return product

    def _parse_price(self, product_id: int, raw_value: str) -> Money:
        try:
            return Money.of(raw_value)
        except ValidationError:
            if self._strict_prices:
                raise ValidationError(
                    f"Price must be a number zero or above, got {raw_value!r}"
                ) from None
            logger.warning(
                "Invalid price %r for product %s; storing 0", raw_value, product_id
            )
            return Money.zero()
