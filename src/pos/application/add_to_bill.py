"""Application service: put one unit of a product on the bill."""

from __future__ import annotations

import logging

from pos.domain.model.bill import BillLine
from pos.domain.repository.bill_repository import BillRepository
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddToBillHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        bill_repo: BillRepository,
    ) -> None:
        self._product_repo = product_repo
        self._bill_repo = bill_repo

    def handle(self, product_id: int) -> BillLine | None:
        """Add *product_id* to the bill, or bump its quantity.

        The first add copies the product's current name and price onto
        the line (snapshot). Unknown IDs are ignored and return None.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.debug("Ignoring add for unknown product %s", product_id)
            return None

        bill = self._bill_repo.get_current()
        line = bill.add(product)
        self._bill_repo.save(bill)

        logger.info(
            "Bill line %s '%s' now x%s", line.product_id, line.product_name, line.quantity
        )
        return line
