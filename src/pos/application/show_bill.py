"""Application service: Show Bill query."""

from __future__ import annotations

from pos.application.dto import BillView
from pos.application.render import render_bill
from pos.domain.repository.bill_repository import BillRepository


class ShowBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self) -> BillView:
        return render_bill(self._bill_repo.get_current())
