"""Tests for order total calculation."""

from storefront.catalog.store import CatalogStore
from storefront.checkout.totals import compute_total


class TestComputeTotal:
    def test_single_line(self, catalog):
        assert compute_total(catalog, [(1, 1)]) == 11.9

    def test_two_lines(self, catalog):
        assert compute_total(catalog, [(1, 1), (2, 1)]) == 21.4

    def test_quantities_multiply(self, catalog):
        assert compute_total(catalog, [(4, 3)]) == 32.7

    def test_deterministic(self, catalog):
        lines = [(1, 2), (2, 3), (4, 1)]
        assert compute_total(catalog, lines) == compute_total(catalog, lines)

    def test_empty(self, catalog):
        assert compute_total(catalog, []) == 0.0

    def test_missing_item_contributes_zero(self, catalog):
        assert compute_total(catalog, [(1, 1), (99, 4)]) == 11.9

    def test_rounds_half_away_from_zero(self):
        catalog = CatalogStore(seed=[(1, "Half cent", 0.005, 10)])
        assert compute_total(catalog, [(1, 1)]) == 0.01

    def test_uses_current_catalog_prices(self):
        catalog = CatalogStore(seed=[(1, "Soup", 4.25, 10)])
        assert compute_total(catalog, [(1, 2)]) == 8.5
        catalog.find_by_id(1).price = 5.0
        assert compute_total(catalog, [(1, 2)]) == 10.0

    def test_no_binary_float_drift(self):
        catalog = CatalogStore(seed=[(1, "Dime", 0.1, 10), (2, "Fifth", 0.2, 10)])
        assert compute_total(catalog, [(1, 1), (2, 1)]) == 0.3
