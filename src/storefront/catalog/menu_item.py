"""MenuItem aggregate — a purchasable meal and its stock level."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class MenuItem:
    """A meal on the menu.

    The integer ``meal_id`` is the public identity used on the wire as ``id``
    and ``mealId``. Stock only moves through ``decrement_stock`` during a
    checkout commit, or back to the seed value on a catalog reset.
    """

    meal_id = Integer(identifier=True)
    name = String(required=True, max_length=100)
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    def decrement_stock(self, quantity):
        """Remove ``quantity`` units from stock.

        The caller must already have checked ``quantity <= stock``; a
        violation surfaces as a ValidationError, never as a clamped value.
        """
        self.stock = self.stock - quantity

    def snapshot(self):
        """Return a detached copy carrying the same field values."""
        return MenuItem(
            meal_id=self.meal_id,
            name=self.name,
            price=self.price,
            stock=self.stock,
        )

    def to_wire(self):
        return {
            "id": self.meal_id,
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
        }
