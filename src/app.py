"""Mealstream FastAPI application.

Single-domain web server for the meal storefront. The catalog lives in
process memory and starts from the seed menu on every boot.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay applied from domain.toml.
from storefront.api import create_app
from storefront.catalog.store import CatalogStore
from storefront.domain import storefront

storefront.init()

with storefront.domain_context():
    catalog = CatalogStore()

app = create_app(catalog)
