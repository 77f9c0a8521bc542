"""Outbound port to the host UI.

The session calls these after each event; a terminal, a web page or a
test double can implement them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.application.dto import BillSummaryView, BillView, ProductListView


class Display(ABC):

    @abstractmethod
    def display_product_rows(self, view: ProductListView) -> None:
        """Replace the product list."""

    @abstractmethod
    def display_bill_rows(self, view: BillView) -> None:
        """Replace the live bill, its total and the generate toggle."""

    @abstractmethod
    def display_summary(self, view: BillSummaryView) -> None:
        """Show the read-only bill summary."""

    @abstractmethod
    def hide_summary(self) -> None:
        """Dismiss the bill summary."""

    @abstractmethod
    def display_validation_error(self, message: str) -> None:
        """Show a blocking notice to the cashier."""
