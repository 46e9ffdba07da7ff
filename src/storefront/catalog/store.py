"""In-memory catalog store — the sole owner of MenuItem state."""

from threading import RLock

import structlog

from storefront.catalog.menu_item import MenuItem
from storefront.catalog.seed import SEED_MENU

logger = structlog.get_logger(__name__)


def _is_lookup_key(meal_id):
    # Only JSON numbers identify a meal; bool is an int subclass but "true" is not "1".
    return isinstance(meal_id, int | float) and not isinstance(meal_id, bool)


class CatalogStore:
    """Holds the purchasable menu and its stock levels.

    Every store starts from the seed menu. Reads go through ``list_all`` and
    ``find_by_id``; the only mutators are ``decrement_stock`` and ``reset``.

    ``lock`` is re-entrant so a caller can hold it across a whole
    read-validate-then-write sequence while the mutators take it again.
    """

    def __init__(self, seed=SEED_MENU):
        self._seed = tuple(seed)
        self._items: dict[int, MenuItem] = {}
        self.lock = RLock()
        self.reset()

    def list_all(self) -> list[MenuItem]:
        """Return snapshots of every item, in seed order."""
        with self.lock:
            return [item.snapshot() for item in self._items.values()]

    def find_by_id(self, meal_id) -> MenuItem | None:
        """Return the live item with ``meal_id``, or None when it does not resolve."""
        if not _is_lookup_key(meal_id):
            return None
        return self._items.get(meal_id)

    def reset(self) -> None:
        """Discard every mutation and reload the seed menu."""
        with self.lock:
            self._items = {
                meal_id: MenuItem(meal_id=meal_id, name=name, price=price, stock=stock)
                for meal_id, name, price, stock in self._seed
            }
        logger.info("catalog_reset", items=len(self._items))

    def decrement_stock(self, meal_id, quantity) -> None:
        """Reduce the item's stock by ``quantity``.

        Precondition: ``quantity <= stock``, already established by the line
        validator under the same ``lock`` acquisition. Not re-checked here.
        """
        with self.lock:
            item = self._items[meal_id]
            item.decrement_stock(quantity)
        logger.debug("stock_decremented", meal_id=meal_id, quantity=quantity, remaining=item.stock)
