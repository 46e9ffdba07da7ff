"""Cart line validation shared by the cart check and the checkout pipeline.

Checks run in a fixed order: the meal must exist, then the quantity must be
well formed, then stock must cover it. The first failing check decides the
rejection reported when several conditions fail at once.
"""

from dataclasses import dataclass
from typing import Any

from storefront.catalog.menu_item import MenuItem
from storefront.catalog.store import CatalogStore
from storefront.errors import InvalidQuantity, MealNotFound, OutOfStock

# Upper bound for the single-line cart check. Checkout lines have none.
CART_MAX_QTY = 10


@dataclass(frozen=True)
class CartLine:
    """A requested (meal, quantity) pair, exactly as the client sent it."""

    meal_id: Any
    qty: Any


@dataclass(frozen=True)
class ValidatedLine:
    item: MenuItem
    quantity: int


def as_positive_int(value):
    """Return ``value`` as an int if it is a whole number >= 1, else None.

    Follows JSON number semantics: ``2.0`` is an integer, booleans and
    strings are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int) or value < 1:
        return None
    return value


def validate_line(catalog: CatalogStore, line: CartLine, qty_upper_bound: int | None = None) -> ValidatedLine:
    """Validate one line against current catalog state without mutating it."""
    item = catalog.find_by_id(line.meal_id)
    if item is None:
        raise MealNotFound(line.meal_id)

    quantity = as_positive_int(line.qty)
    if quantity is None or (qty_upper_bound is not None and quantity > qty_upper_bound):
        raise InvalidQuantity(item.meal_id, line.qty, upper_bound=qty_upper_bound)

    if quantity > item.stock:
        raise OutOfStock(item.meal_id, available=item.stock)

    return ValidatedLine(item=item, quantity=quantity)
