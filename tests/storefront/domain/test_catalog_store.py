"""Tests for the in-memory catalog store."""

from storefront.catalog.seed import SEED_MENU
from storefront.catalog.store import CatalogStore


def _state(catalog):
    return [item.to_wire() for item in catalog.list_all()]


class TestSeedState:
    def test_starts_with_four_items_in_id_order(self, catalog):
        assert [item.meal_id for item in catalog.list_all()] == [1, 2, 3, 4]

    def test_seed_values(self, catalog):
        assert _state(catalog) == [
            {"id": meal_id, "name": name, "price": price, "stock": stock}
            for meal_id, name, price, stock in SEED_MENU
        ]

    def test_one_item_is_sold_out(self, catalog):
        assert catalog.find_by_id(3).stock == 0


class TestFindById:
    def test_found(self, catalog):
        assert catalog.find_by_id(1).name == "Spaghetti Bolognese"

    def test_unknown_id(self, catalog):
        assert catalog.find_by_id(99) is None

    def test_string_id_does_not_resolve(self, catalog):
        assert catalog.find_by_id("1") is None

    def test_boolean_id_does_not_resolve(self, catalog):
        assert catalog.find_by_id(True) is None

    def test_missing_id(self, catalog):
        assert catalog.find_by_id(None) is None

    def test_unhashable_id(self, catalog):
        assert catalog.find_by_id([1]) is None

    def test_whole_float_resolves(self, catalog):
        assert catalog.find_by_id(2.0).meal_id == 2


class TestListAll:
    def test_returns_snapshots(self, catalog):
        listed = catalog.list_all()
        listed[0].decrement_stock(1)
        assert catalog.find_by_id(1).stock == 5


class TestDecrementStock:
    def test_reduces_stock(self, catalog):
        catalog.decrement_stock(1, 2)
        assert catalog.find_by_id(1).stock == 3

    def test_only_touches_target_item(self, catalog):
        before = _state(catalog)
        catalog.decrement_stock(4, 1)
        after = _state(catalog)
        assert [s for s in after if s["id"] != 4] == [s for s in before if s["id"] != 4]


class TestReset:
    def test_restores_seed_after_mutation(self, catalog):
        seeded = _state(catalog)
        catalog.decrement_stock(1, 5)
        catalog.decrement_stock(2, 1)
        catalog.reset()
        assert _state(catalog) == seeded

    def test_is_idempotent(self, catalog):
        catalog.reset()
        first = _state(catalog)
        catalog.reset()
        assert _state(catalog) == first

    def test_stores_are_independent(self):
        left = CatalogStore()
        right = CatalogStore()
        left.decrement_stock(1, 1)
        assert left.find_by_id(1).stock == 4
        assert right.find_by_id(1).stock == 5

    def test_custom_seed(self):
        catalog = CatalogStore(seed=[(7, "Soup", 4.25, 2)])
        assert _state(catalog) == [{"id": 7, "name": "Soup", "price": 4.25, "stock": 2}]
