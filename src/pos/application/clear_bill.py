"""Application service: Clear Bill use case.

Runs when the cashier closes a generated bill, so the next customer
starts from an empty bill.
"""

from __future__ import annotations

import logging

from pos.domain.repository.bill_repository import BillRepository

logger = logging.getLogger(__name__)


class ClearBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self) -> None:
        bill = self._bill_repo.get_current()
        line_count = len(bill.lines)
        bill.clear()
        self._bill_repo.save(bill)
        logger.info("Bill cleared (%d lines dropped)", line_count)
