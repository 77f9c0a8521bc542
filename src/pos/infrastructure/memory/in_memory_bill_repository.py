"""In-memory implementation of BillRepository."""

from __future__ import annotations

from pos.domain.model.bill import Bill
from pos.domain.repository.bill_repository import BillRepository


class InMemoryBillRepository(BillRepository):

    def __init__(self, bill: Bill | None = None) -> None:
        self._bill = bill if bill is not None else Bill()

    def get_current(self) -> Bill:
        return self._bill

    def save(self, bill: Bill) -> None:
        self._bill = bill
