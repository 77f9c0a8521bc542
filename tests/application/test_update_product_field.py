"""Tests for in-place product edits."""

import pytest

from pos.application.add_to_bill import AddToBillHandler
from pos.application.update_product_field import UpdateProductFieldHandler
from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money
from pos.infrastructure.memory.in_memory_bill_repository import InMemoryBillRepository
from pos.infrastructure.memory.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import rice


def _setup(strict: bool = False):
    repo = InMemoryProductRepository([rice()])
    return UpdateProductFieldHandler(repo, strict_prices=strict), repo


class TestUpdatePrice:

    def test_valid_price(self):
        handler, repo = _setup()
        handler.handle(1, "price", "90")
        assert repo.get_by_id(1).price == Money.of("90.00")

    @pytest.mark.parametrize("raw", ["abc", "", "-3", "NaN", "9e999999", "1_0"])
    def test_invalid_price_degrades_to_zero(self, raw):
        handler, repo = _setup()
        handler.handle(1, "price", raw)
        assert repo.get_by_id(1).price == Money.zero()

    def test_strict_mode_rejects_and_keeps_old_price(self):
        handler, repo = _setup(strict=True)
        with pytest.raises(ValidationError, match="Price must be a number"):
            handler.handle(1, "price", "abc")
        assert repo.get_by_id(1).price == Money.of("60.00")

    def test_strict_mode_still_accepts_zero(self):
        handler, repo = _setup(strict=True)
        handler.handle(1, "price", "0")
        assert repo.get_by_id(1).price.is_zero


class TestUpdateLabel:

    def test_label_stored_verbatim(self):
        handler, repo = _setup()
        handler.handle(1, "weight", "5kg bag")
        assert repo.get_by_id(1).unit_label == "5kg bag"


class TestUpdateMisses:

    def test_unknown_product_is_noop(self):
        handler, repo = _setup()
        assert handler.handle(999, "price", "10") is None
        assert repo.get_by_id(1).price == Money.of("60.00")

    def test_unknown_product_with_unknown_field_is_noop(self):
        handler, repo = _setup()
        assert handler.handle(999, "colour", "red") is None
        assert repo.get_by_id(1).unit_label == "1kg"

    def test_unknown_field_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown product field"):
            handler.handle(1, "name", "Basmati")


class TestUpdateLogging:

    def test_logs_confirmation(self, caplog):
        handler, _ = _setup()
        with caplog.at_level("INFO", logger="pos.application.update_product_field"):
            handler.handle(1, "price", "90")
        assert "Updated product 1: price to 90" in caplog.text

    def test_logs_warning_on_degrade(self, caplog):
        handler, _ = _setup()
        with caplog.at_level("WARNING", logger="pos.application.update_product_field"):
            handler.handle(1, "price", "oops")
        assert "storing 0" in caplog.text


class TestPriceEditVsBill:

    def test_edit_after_add_keeps_bill_snapshot(self):
        product_repo = InMemoryProductRepository([rice()])
        bill_repo = InMemoryBillRepository()
        add = AddToBillHandler(product_repo, bill_repo)
        add.handle(1)
        add.handle(1)

        UpdateProductFieldHandler(product_repo).handle(1, "price", "90")

        bill = bill_repo.get_current()
        assert product_repo.get_by_id(1).price == Money.of("90.00")
        assert bill.lines[0].unit_price == Money.of("60.00")
        assert bill.total == Money.of("120.00")
