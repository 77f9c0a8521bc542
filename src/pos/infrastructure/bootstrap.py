"""Composition root: wires stores, session and display together.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.application.display import Display
from pos.application.session import PosSession
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.infrastructure.memory.in_memory_bill_repository import InMemoryBillRepository
from pos.infrastructure.memory.in_memory_product_repository import (
    InMemoryProductRepository,
)


@dataclass(frozen=True)
class Settings:
    """Runtime options, filled from CLI flags or their env vars."""

    demo_catalog: bool = True
    strict_prices: bool = False


def demo_products() -> list[Product]:
    """The starter catalog shown on a fresh till."""
    return [
        Product(id=1, name="Rice", price=Money(Decimal("60.00")), unit_label="1kg"),
        Product(id=2, name="Sugar", price=Money(Decimal("45.50")), unit_label="1kg"),
        Product(id=3, name="Toor Dal", price=Money(Decimal("120.00")), unit_label="1kg"),
        Product(id=4, name="Sunflower Oil", price=Money(Decimal("150.00")), unit_label="1L"),
        Product(id=5, name="Milk", price=Money(Decimal("30.00")), unit_label="500ml"),
    ]


def product_repository(settings: Settings) -> InMemoryProductRepository:
    return InMemoryProductRepository(demo_products() if settings.demo_catalog else [])


def bill_repository() -> InMemoryBillRepository:
    return InMemoryBillRepository()


def pos_session(settings: Settings, display: Display) -> PosSession:
    return PosSession(
        product_repo=product_repository(settings),
        bill_repo=bill_repository(),
        display=display,
        strict_prices=settings.strict_prices,
    )
