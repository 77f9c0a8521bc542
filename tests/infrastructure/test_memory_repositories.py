"""Tests for the in-memory stores and the demo catalog wiring."""

from pos.domain.model.bill import Bill
from pos.infrastructure.bootstrap import Settings, demo_products, product_repository
from pos.infrastructure.memory.in_memory_bill_repository import InMemoryBillRepository
from pos.infrastructure.memory.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import rice, sugar


class TestInMemoryProductRepository:

    def test_next_id_on_empty_catalog(self):
        assert InMemoryProductRepository().next_id() == 1

    def test_next_id_is_max_plus_one(self):
        repo = InMemoryProductRepository([sugar(), rice()])
        assert repo.next_id() == 3

    def test_list_all_keeps_insertion_order(self):
        repo = InMemoryProductRepository([sugar(), rice()])
        assert [p.id for p in repo.list_all()] == [2, 1]

    def test_get_by_id_miss(self):
        assert InMemoryProductRepository().get_by_id(1) is None

    def test_save_replaces_in_place(self):
        repo = InMemoryProductRepository([rice(), sugar()])
        updated = rice()
        updated.update_unit_label("5kg")
        repo.save(updated)
        assert [p.unit_label for p in repo.list_all()] == ["5kg", "1kg"]


class TestInMemoryBillRepository:

    def test_starts_with_empty_bill(self):
        assert InMemoryBillRepository().get_current().is_empty

    def test_returns_same_bill_each_time(self):
        repo = InMemoryBillRepository()
        assert repo.get_current() is repo.get_current()

    def test_save_swaps_bill(self):
        repo = InMemoryBillRepository()
        bill = Bill()
        repo.save(bill)
        assert repo.get_current() is bill


class TestBootstrap:

    def test_demo_catalog(self):
        names = [p.name for p in demo_products()]
        assert names == ["Rice", "Sugar", "Toor Dal", "Sunflower Oil", "Milk"]

    def test_no_demo_gives_empty_catalog(self):
        repo = product_repository(Settings(demo_catalog=False))
        assert repo.list_all() == []
        assert repo.next_id() == 1

    def test_demo_next_id(self):
        assert product_repository(Settings()).next_id() == 6
