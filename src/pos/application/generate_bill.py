"""Application service: Generate Bill use case.

Marks the bill as summarized and returns the read-only summary.
"""

from __future__ import annotations

import logging

from pos.application.dto import BillSummaryView
from pos.application.render import render_bill_summary
from pos.domain.repository.bill_repository import BillRepository

logger = logging.getLogger(__name__)


class GenerateBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self) -> BillSummaryView:
        """Raises ValidationError if the bill has no lines."""
        bill = self._bill_repo.get_current()
        bill.generate()
        self._bill_repo.save(bill)

        logger.info("Generated bill: %d lines, total %s", len(bill.lines), bill.total)
        return render_bill_summary(bill)
