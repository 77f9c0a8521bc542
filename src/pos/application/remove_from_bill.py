"""Application service: drop a line from the bill."""

from __future__ import annotations

import logging

from pos.domain.repository.bill_repository import BillRepository

logger = logging.getLogger(__name__)


class RemoveFromBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self, product_id: int) -> bool:
        """Remove the whole line for *product_id*; no-op if absent."""
        bill = self._bill_repo.get_current()
        removed = bill.remove(product_id)
        if not removed:
            logger.debug("No bill line for product %s", product_id)
            return False

        self._bill_repo.save(bill)
        logger.info("Removed product %s from bill", product_id)
        return True
