"""Product entity.

Products live independently of any bill. The cashier can add new
products and edit the price or unit label of existing ones; there is
no delete.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


class ProductField(Enum):
    """Fields of a product that can be edited in place."""

    PRICE = "price"
    WEIGHT = "weight"

    @staticmethod
    def parse(raw: str) -> ProductField:
        try:
            return ProductField(raw.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown product field: {raw!r}") from None


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price and label edits are
    legitimate mutations. Use ``Product.create()`` for new products;
    ``__init__`` does not validate so demo data can be loaded as-is.
    """

    id: int
    name: str
    price: Money
    unit_label: str  # e.g. "1kg", "500ml"

    @staticmethod
    def create(product_id: int, name: str, price: Money, unit_label: str) -> Product:
        """Create a new product, enforcing the new-product form rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if not unit_label or not unit_label.strip():
            raise ValidationError("Product weight/size label is required")
        return Product(
            id=product_id,
            name=name.strip(),
            price=price,
            unit_label=unit_label.strip(),
        )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Bill lines already holding this product keep the price they were
        added at. Zero is allowed here; negatives are rejected by Money.
        """
        self.price = new_price

    def update_unit_label(self, label: str) -> None:
        """Store the label verbatim."""
        self.unit_label = label
