"""Bill aggregate: the running cart for the current customer.

The Bill owns its lines and enforces the one-line-per-product rule.
Totals are always derived from the lines, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


class BillStatus(Enum):
    EMPTY = "EMPTY"
    BUILDING = "BUILDING"
    SUMMARIZED = "SUMMARIZED"


@dataclass
class BillLine:
    """One product in the bill, with the price it had when first added.

    Later catalog price edits never reach an existing line.
    """

    product_id: int
    product_name: str
    unit_price: Money  # snapshot taken at add time
    quantity: Quantity = field(default_factory=lambda: Quantity(1))

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def increment(self) -> None:
        self.quantity = self.quantity.increment()

    @staticmethod
    def from_product(product: Product) -> BillLine:
        return BillLine(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
        )


@dataclass
class Bill:
    """Aggregate root for the current transaction.

    Lifecycle: EMPTY -> BUILDING -> SUMMARIZED -> EMPTY. SUMMARIZED is
    a display state on top of the same lines; adds and removes are still
    accepted while summarized, and ``clear()`` always empties the bill.
    """

    _lines: list[BillLine] = field(default_factory=list)
    status: BillStatus = BillStatus.EMPTY

    # --- Commands -------------------------------------------------------------

    def add(self, product: Product) -> BillLine:
        """Add one unit of *product*; increments an existing line."""
        line = self.find_line(product.id)
        if line is not None:
            line.increment()
        else:
            line = BillLine.from_product(product)
            self._lines.append(line)
        if self.status == BillStatus.EMPTY:
            self.status = BillStatus.BUILDING
        return line

    def remove(self, product_id: int) -> bool:
        """Drop the line for *product_id*. Returns False if there was none."""
        line = self.find_line(product_id)
        if line is None:
            return False
        self._lines.remove(line)
        if not self._lines and self.status == BillStatus.BUILDING:
            self.status = BillStatus.EMPTY
        return True

    def clear(self) -> None:
        self._lines.clear()
        self.status = BillStatus.EMPTY

    def generate(self) -> None:
        """Transition to SUMMARIZED. Requires at least one line."""
        if not self._lines:
            raise ValidationError("Cannot generate a bill with no items")
        self.status = BillStatus.SUMMARIZED

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[BillLine, ...]:
        return tuple(self._lines)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def find_line(self, product_id: int) -> BillLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None
