"""Display models: plain containers handed to the Display port.

They carry already-formatted text so a host UI only has to lay them
out. Nothing here refers back to domain objects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductRowDTO:
    """One catalog row: name, editable price and label, and an add action."""

    product_id: int
    name: str
    price_field: str  # e.g. "60.00", no currency symbol
    unit_label_field: str


@dataclass(frozen=True)
class ProductListView:
    rows: list[ProductRowDTO]
    placeholder: str | None = None


@dataclass(frozen=True)
class BillRowDTO:
    """One bill line as shown to the cashier."""

    product_id: int
    label: str  # e.g. "Rice (x2)"
    amount: str  # e.g. "₹120.00"


@dataclass(frozen=True)
class BillView:
    """The live bill: rows with remove actions, total, generate toggle."""

    rows: list[BillRowDTO]
    total: str
    generate_enabled: bool
    placeholder: str | None = None


@dataclass(frozen=True)
class BillSummaryView:
    """Read-only confirmation of a finished bill."""

    rows: list[BillRowDTO]
    total: str
