"""Cashier session: turns UI events into use-case calls and re-renders.

Each ``PosSession`` method handles exactly one user event start to
finish. Domain errors are caught here and shown to the cashier; they
never escape the event that raised them.
"""

from __future__ import annotations

import logging

from pos.application.add_product import AddProductHandler
from pos.application.add_to_bill import AddToBillHandler
from pos.application.clear_bill import ClearBillHandler
from pos.application.display import Display
from pos.application.generate_bill import GenerateBillHandler
from pos.application.list_products import ListProductsHandler
from pos.application.remove_from_bill import RemoveFromBillHandler
from pos.application.show_bill import ShowBillHandler
from pos.application.update_product_field import UpdateProductFieldHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.product import Product
from pos.domain.repository.bill_repository import BillRepository
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class PosSession:

    def __init__(
        self,
        product_repo: ProductRepository,
        bill_repo: BillRepository,
        display: Display,
        strict_prices: bool = False,
    ) -> None:
        self._display = display
        self._add_product = AddProductHandler(product_repo)
        self._update_field = UpdateProductFieldHandler(product_repo, strict_prices)
        self._list_products = ListProductsHandler(product_repo)
        self._add_to_bill = AddToBillHandler(product_repo, bill_repo)
        self._remove_from_bill = RemoveFromBillHandler(bill_repo)
        self._generate_bill = GenerateBillHandler(bill_repo)
        self._clear_bill = ClearBillHandler(bill_repo)
        self._show_bill = ShowBillHandler(bill_repo)

    def render_all(self) -> None:
        """Paint the product list and the bill."""
        self._render_products()
        self._render_bill()

    # --- Inbound events -------------------------------------------------------

    def submit_new_product(self, name: str, price_text: str, weight_label: str) -> Product | None:
        try:
            product = self._add_product.handle(name, price_text, weight_label)
        except DomainException as exc:
            self._reject(exc)
            return None
        self._render_products()
        return product

    def click_add_to_bill(self, product_id: int) -> None:
        self._add_to_bill.handle(product_id)
        self._render_bill()

    def edit_product_field(self, product_id: int, field: str, raw_value: str) -> None:
        # the input already shows the typed value, so no re-render
        try:
            self._update_field.handle(product_id, field, raw_value)
        except DomainException as exc:
            self._reject(exc)

    def click_remove_from_bill(self, product_id: int) -> None:
        self._remove_from_bill.handle(product_id)
        self._render_bill()

    def click_generate_bill(self) -> None:
        try:
            summary = self._generate_bill.handle()
        except DomainException as exc:
            self._reject(exc)
            return
        self._display.display_summary(summary)

    def click_close_summary(self) -> None:
        self._display.hide_summary()
        self._clear_bill.handle()
        self._render_bill()

    # --- Internal helpers -----------------------------------------------------

    def _render_products(self) -> None:
        self._display.display_product_rows(self._list_products.view())

    def _render_bill(self) -> None:
        self._display.display_bill_rows(self._show_bill.handle())

    def _reject(self, exc: DomainException) -> None:
        logger.info("Rejected: %s", exc)
        self._display.display_validation_error(str(exc))
