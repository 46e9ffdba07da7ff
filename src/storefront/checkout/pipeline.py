"""Checkout pipeline — validate a whole cart, then commit it.

Flow:
    1. Reject an empty cart.
    2. Validate every line, in input order, with no upper bound on quantity.
    3. Require the customer to have accepted the terms.
    4. Compute the total at current catalog prices.
    5. Enforce the minimum order value.
    6. Decrement stock for every line, in input order.
    7. Issue an order id and return the Order.

Every check fails fast, and nothing is mutated before step 6. The catalog
lock is held from step 1 to step 7, so no other checkout or reset can run
between the validation pass and the commit.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any

import structlog
from protean.fields import Float, Integer

from storefront.cart.validation import CART_MAX_QTY, CartLine, ValidatedLine, validate_line
from storefront.catalog.store import CatalogStore
from storefront.checkout.order_ids import OrderIdGenerator
from storefront.checkout.totals import compute_total
from storefront.domain import storefront
from storefront.errors import EmptyCart, LineRejected, MinimumOrderNotMet, OutOfStock, TermsNotAccepted

logger = structlog.get_logger(__name__)

MINIMUM_ORDER_TOTAL = 10.0


@storefront.value_object
class Order:
    """A placed order. Returned to the caller and not stored."""

    order_id = Integer(required=True)
    total = Float(required=True, min_value=0.0)


@dataclass(frozen=True)
class Customer:
    # Email is carried but deliberately not validated at checkout.
    email: Any = None
    accept_terms: Any = None


class CheckoutPipeline:
    def __init__(
        self,
        catalog: CatalogStore,
        order_ids: OrderIdGenerator | None = None,
        minimum_total: float = MINIMUM_ORDER_TOTAL,
    ):
        self.catalog = catalog
        self.order_ids = order_ids or OrderIdGenerator()
        self.minimum_total = minimum_total

    def check_line(self, meal_id, qty) -> ValidatedLine:
        """Single-line cart check, bounded to CART_MAX_QTY units."""
        line = CartLine(meal_id=meal_id, qty=qty)
        try:
            return validate_line(self.catalog, line, qty_upper_bound=CART_MAX_QTY)
        except LineRejected as exc:
            logger.info("cart_line_rejected", code=exc.code, meal_id=meal_id, qty=qty)
            raise

    def place_order(self, lines: list[CartLine], customer: Customer) -> Order:
        with self.catalog.lock:
            validated = self._validate(lines, customer)
            total = compute_total(self.catalog, [(v.item.meal_id, v.quantity) for v in validated])

            if total < self.minimum_total:
                logger.info("checkout_rejected", code=MinimumOrderNotMet.code, total=total)
                raise MinimumOrderNotMet(minimum=self.minimum_total, total=total)

            for v in validated:
                self.catalog.decrement_stock(v.item.meal_id, v.quantity)

            order = Order(order_id=self.order_ids.next_id(), total=total)

        logger.info("order_placed", order_id=order.order_id, total=order.total, lines=len(validated))
        return order

    def _validate(self, lines, customer) -> list[ValidatedLine]:
        if not lines:
            logger.info("checkout_rejected", code=EmptyCart.code)
            raise EmptyCart()

        validated = []
        claimed = defaultdict(int)
        for line in lines:
            try:
                v = validate_line(self.catalog, line)
                # Repeated meals share one stock level across the order.
                remaining = v.item.stock - claimed[v.item.meal_id]
                if v.quantity > remaining:
                    raise OutOfStock(v.item.meal_id, available=remaining)
            except LineRejected as exc:
                logger.info("checkout_rejected", code=exc.code, meal_id=exc.meal_id)
                raise
            claimed[v.item.meal_id] += v.quantity
            validated.append(v)

        if customer.accept_terms is not True:
            logger.info("checkout_rejected", code=TermsNotAccepted.code)
            raise TermsNotAccepted()

        return validated
