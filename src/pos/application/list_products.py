"""Application service: List Products query."""

from __future__ import annotations

from pos.application.dto import ProductListView
from pos.application.render import render_product_list
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Every product, in the order it was added."""
        return self._product_repo.list_all()

    def view(self) -> ProductListView:
        return render_product_list(self.handle())
