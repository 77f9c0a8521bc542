"""Abstract store for the bill being built at the counter."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.bill import Bill


class BillRepository(ABC):

    @abstractmethod
    def get_current(self) -> Bill:
        """Return the bill for the current customer (never None)."""

    @abstractmethod
    def save(self, bill: Bill) -> None:
        """Store the current bill."""
