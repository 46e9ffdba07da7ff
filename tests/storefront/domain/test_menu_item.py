"""Tests for the MenuItem aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.catalog.menu_item import MenuItem


def _make_item(**overrides):
    defaults = {"meal_id": 1, "name": "Spaghetti Bolognese", "price": 11.9, "stock": 5}
    defaults.update(overrides)
    return MenuItem(**defaults)


class TestMenuItemCreation:
    def test_fields(self):
        item = _make_item()
        assert item.meal_id == 1
        assert item.name == "Spaghetti Bolognese"
        assert item.price == 11.9
        assert item.stock == 5

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_item(price=-1.0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            _make_item(stock=-1)

    def test_zero_stock_allowed(self):
        assert _make_item(stock=0).stock == 0


class TestDecrementStock:
    def test_reduces_stock(self):
        item = _make_item(stock=5)
        item.decrement_stock(2)
        assert item.stock == 3

    def test_can_reach_zero(self):
        item = _make_item(stock=3)
        item.decrement_stock(3)
        assert item.stock == 0

    def test_never_clamps_below_zero(self):
        item = _make_item(stock=1)
        with pytest.raises(ValidationError):
            item.decrement_stock(2)


class TestSnapshot:
    def test_snapshot_is_detached(self):
        item = _make_item(stock=5)
        copy = item.snapshot()
        copy.decrement_stock(5)
        assert item.stock == 5
        assert copy.stock == 0

    def test_wire_format(self):
        assert _make_item().to_wire() == {
            "id": 1,
            "name": "Spaghetti Bolognese",
            "price": 11.9,
            "stock": 5,
        }
