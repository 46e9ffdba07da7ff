"""Storefront API package."""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.routes import router
from storefront.catalog.store import CatalogStore
from storefront.checkout.order_ids import OrderIdGenerator
from storefront.checkout.pipeline import CheckoutPipeline
from storefront.domain import storefront
from storefront.utils.logging import bind_request_context, clear_request_context

__all__ = ["router", "create_app"]


def create_app(catalog: CatalogStore | None = None, order_ids: OrderIdGenerator | None = None) -> FastAPI:
    """Build the Storefront ASGI app around one catalog store.

    Must be called inside an initialized storefront domain context when no
    ``catalog`` is supplied, since building the store creates aggregates.
    """
    app = FastAPI(
        title="Mealstream API",
        description="Meal storefront — menu, cart checks and checkout",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and tag logs with a request id."""
        clear_request_context()
        bind_request_context(request_id=str(uuid.uuid4()), path=request.url.path)
        with storefront.domain_context():
            response = await call_next(request)
        return response

    app.state.catalog = catalog if catalog is not None else CatalogStore()
    app.state.checkout = CheckoutPipeline(app.state.catalog, order_ids=order_ids)
    app.include_router(router)
    return app
