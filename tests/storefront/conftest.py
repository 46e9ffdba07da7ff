import pytest
from storefront.catalog.store import CatalogStore


@pytest.fixture(scope="session")
def _storefront_domain():
    """Initialize the storefront domain once per session."""
    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, pop it after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    ctx.pop()


@pytest.fixture()
def catalog():
    """A fresh catalog in the seed state, independent of every other test."""
    return CatalogStore()
