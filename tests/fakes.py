"""Test doubles.

RecordingDisplay implements the Display port and keeps every outbound
call in order, so tests can assert on what the cashier would have seen.
"""

from __future__ import annotations

from pos.application.display import Display
from pos.application.dto import BillSummaryView, BillView, ProductListView
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


class RecordingDisplay(Display):

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def display_product_rows(self, view: ProductListView) -> None:
        self.calls.append(("products", view))

    def display_bill_rows(self, view: BillView) -> None:
        self.calls.append(("bill", view))

    def display_summary(self, view: BillSummaryView) -> None:
        self.calls.append(("summary", view))

    def hide_summary(self) -> None:
        self.calls.append(("hide_summary", None))

    def display_validation_error(self, message: str) -> None:
        self.calls.append(("error", message))

    # --- Convenience ----------------------------------------------------------

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.calls]

    def last(self, kind: str):
        for k, payload in reversed(self.calls):
            if k == kind:
                return payload
        return None

    def reset(self) -> None:
        self.calls.clear()


def rice() -> Product:
    return Product(id=1, name="Rice", price=Money.of("60.00"), unit_label="1kg")


def sugar() -> Product:
    return Product(id=2, name="Sugar", price=Money.of("45.50"), unit_label="1kg")
