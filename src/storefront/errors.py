"""Rejections raised by cart checks and checkout.

Each rejection is an expected, user-facing outcome: it carries a stable
``code``, the HTTP status the API answers with, a human-readable message and
the structured fields that explain it. The API layer decides how those fields
are laid out in the response body.
"""


class OrderRejected(Exception):
    """Base class for every cart or checkout rejection."""

    code = "REJECTED"
    status_code = 400
    default_message = "Request rejected"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def fields(self):
        """Structured diagnostic data, empty by default."""
        return {}


class LineRejected(OrderRejected):
    """A single cart line failed validation."""

    def __init__(self, meal_id, message=None):
        self.meal_id = meal_id
        super().__init__(message)


class MealNotFound(LineRejected):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Meal does not exist"


class InvalidQuantity(LineRejected):
    code = "INVALID_QTY"
    status_code = 422
    default_message = "Invalid qty"

    def __init__(self, meal_id, quantity, upper_bound=None, message=None):
        self.quantity = quantity
        self.upper_bound = upper_bound
        if message is None and upper_bound is not None:
            message = f"qty must be 1..{upper_bound}"
        super().__init__(meal_id, message)


class OutOfStock(LineRejected):
    code = "OUT_OF_STOCK"
    status_code = 409
    default_message = "Not enough stock"

    def __init__(self, meal_id, available, message=None):
        self.available = available
        super().__init__(meal_id, message)

    def fields(self):
        return {"mealId": self.meal_id, "available": self.available}


class EmptyCart(OrderRejected):
    code = "INVALID_CART"
    status_code = 422
    default_message = "Cart is empty"


class TermsNotAccepted(OrderRejected):
    code = "TERMS_NOT_ACCEPTED"
    status_code = 412
    default_message = "Terms and conditions must be accepted"


class MinimumOrderNotMet(OrderRejected):
    code = "MIN_ORDER_NOT_MET"
    status_code = 400

    def __init__(self, minimum, total, message=None):
        self.minimum = minimum
        self.total = total
        super().__init__(message or f"Minimum order is €{minimum:g}")

    def fields(self):
        return {"minimum": self.minimum, "total": self.total}
