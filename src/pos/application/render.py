"""Pure projections from store state to display models.

None of these functions mutate anything; call them after every change
and hand the result to the Display.
"""

from __future__ import annotations

from collections.abc import Iterable

from pos.application.dto import (
    BillRowDTO,
    BillSummaryView,
    BillView,
    ProductListView,
    ProductRowDTO,
)
from pos.domain.model.bill import Bill, BillLine
from pos.domain.model.product import Product

EMPTY_CATALOG_MESSAGE = "No products available. Add one above!"
EMPTY_BILL_MESSAGE = "No items added yet."


def render_product_list(products: Iterable[Product]) -> ProductListView:
    rows = [
        ProductRowDTO(
            product_id=p.id,
            name=p.name,
            price_field=p.price.plain(),
            unit_label_field=p.unit_label,
        )
        for p in products
    ]
    if not rows:
        return ProductListView(rows=[], placeholder=EMPTY_CATALOG_MESSAGE)
    return ProductListView(rows=rows)


def render_bill(bill: Bill) -> BillView:
    """Live bill view. "Generate" is only enabled when there is something to bill."""
    rows = _bill_rows(bill.lines)
    return BillView(
        rows=rows,
        total=str(bill.total),
        generate_enabled=bool(rows),
        placeholder=None if rows else EMPTY_BILL_MESSAGE,
    )


def render_bill_summary(bill: Bill) -> BillSummaryView:
    return BillSummaryView(rows=_bill_rows(bill.lines), total=str(bill.total))


def _bill_rows(lines: Iterable[BillLine]) -> list[BillRowDTO]:
    return [
        BillRowDTO(
            product_id=line.product_id,
            label=f"{line.product_name} (x{line.quantity})",
            amount=str(line.line_total),
        )
        for line in lines
    ]
