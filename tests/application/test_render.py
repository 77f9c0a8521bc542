"""Tests for the pure view projections."""

from pos.application.dto import BillRowDTO, ProductRowDTO
from pos.application.render import (
    EMPTY_BILL_MESSAGE,
    EMPTY_CATALOG_MESSAGE,
    render_bill,
    render_bill_summary,
    render_product_list,
)
from pos.domain.model.bill import Bill
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from tests.fakes import rice, sugar


class TestRenderProductList:

    def test_rows_carry_two_decimal_price(self):
        p = Product(id=7, name="Milk", price=Money.of("30"), unit_label="500ml")
        view = render_product_list([p])
        assert view.rows == [ProductRowDTO(7, "Milk", "30.00", "500ml")]
        assert view.placeholder is None

    def test_empty_catalog_placeholder(self):
        view = render_product_list([])
        assert view.rows == []
        assert view.placeholder == EMPTY_CATALOG_MESSAGE

    def test_does_not_touch_products(self):
        p = rice()
        render_product_list([p])
        assert p.price == Money.of("60.00")


class TestRenderBill:

    def test_empty_bill(self):
        view = render_bill(Bill())
        assert view.rows == []
        assert view.placeholder == EMPTY_BILL_MESSAGE
        assert view.total == "₹0.00"
        assert view.generate_enabled is False

    def test_rows_and_total(self):
        bill = Bill()
        bill.add(rice())
        bill.add(rice())
        bill.add(sugar())

        view = render_bill(bill)

        assert view.rows == [
            BillRowDTO(1, "Rice (x2)", "₹120.00"),
            BillRowDTO(2, "Sugar (x1)", "₹45.50"),
        ]
        assert view.total == "₹165.50"
        assert view.generate_enabled is True
        assert view.placeholder is None


class TestRenderBillSummary:

    def test_summary_matches_live_rows(self):
        bill = Bill()
        bill.add(sugar())
        bill.add(sugar())

        summary = render_bill_summary(bill)

        assert summary.rows == render_bill(bill).rows
        assert summary.total == "₹91.00"
