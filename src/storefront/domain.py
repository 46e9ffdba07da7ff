"""Storefront bounded context — Menu Catalog, Cart Checks and Checkout.

Holds the in-memory menu catalog, validates single cart lines, and runs the
checkout pipeline that turns a validated cart into an order while
decrementing stock.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
