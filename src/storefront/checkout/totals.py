"""Order total calculation."""

from decimal import ROUND_HALF_UP, Decimal

from storefront.catalog.store import CatalogStore

CENT = Decimal("0.01")


def compute_total(catalog: CatalogStore, lines) -> float:
    """Sum ``price * quantity`` over ``lines`` at current catalog prices.

    ``lines`` are ``(meal_id, quantity)`` pairs. Prices are read fresh from
    the catalog and summed as decimals, then rounded half away from zero to
    cents. A meal missing from the catalog contributes nothing; checkout
    validates every line first and never reaches that branch.
    """
    total = Decimal("0")
    for meal_id, quantity in lines:
        item = catalog.find_by_id(meal_id)
        if item is None:
            continue
        total += Decimal(str(item.price)) * quantity
    return float(total.quantize(CENT, rounding=ROUND_HALF_UP))
