"""FastAPI routes for the Storefront — menu, cart check, checkout and admin."""

import json

from fastapi import APIRouter, Request

from storefront.api.responses import cart_rejection, checkout_rejection, invalid_json
from storefront.api.schemas import (
    CartCheckResponse,
    CartItemSchema,
    CheckoutResponse,
    MealSchema,
    OkResponse,
)
from storefront.cart.validation import CartLine
from storefront.checkout.pipeline import Customer
from storefront.errors import OrderRejected

router = APIRouter(prefix="/api", tags=["storefront"])


async def _json_object(request: Request) -> dict:
    """Decode the request body; anything but a JSON object reads as ``{}``.

    Raises ValueError when the body is not valid JSON.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    payload = json.loads(raw)
    return payload if isinstance(payload, dict) else {}


def _cart_lines(items) -> list[CartLine]:
    if not isinstance(items, list):
        return []
    lines = []
    for entry in items:
        entry = entry if isinstance(entry, dict) else {}
        lines.append(CartLine(meal_id=entry.get("mealId"), qty=entry.get("qty")))
    return lines


def _customer(raw) -> Customer:
    raw = raw if isinstance(raw, dict) else {}
    return Customer(email=raw.get("email"), accept_terms=raw.get("acceptTerms"))


@router.get("/health", response_model=OkResponse)
async def health() -> OkResponse:
    return OkResponse()


@router.get("/meals", response_model=list[MealSchema])
async def list_meals(request: Request) -> list[MealSchema]:
    catalog = request.app.state.catalog
    return [MealSchema(**item.to_wire()) for item in catalog.list_all()]


@router.post("/cart", status_code=201, response_model=CartCheckResponse)
async def check_cart_line(request: Request):
    try:
        payload = await _json_object(request)
    except ValueError:
        return invalid_json()

    meal_id = payload.get("mealId")
    try:
        validated = request.app.state.checkout.check_line(meal_id, payload.get("qty"))
    except OrderRejected as exc:
        return cart_rejection(exc)

    return CartCheckResponse(
        item=CartItemSchema(meal_id=meal_id, qty=validated.quantity, unit_price=validated.item.price),
    )


@router.post("/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout(request: Request):
    try:
        payload = await _json_object(request)
    except ValueError:
        return invalid_json()

    lines = _cart_lines(payload.get("items"))
    customer = _customer(payload.get("customer"))
    try:
        order = request.app.state.checkout.place_order(lines, customer)
    except OrderRejected as exc:
        return checkout_rejection(exc)

    return CheckoutResponse(order_id=order.order_id, total=order.total)


@router.post("/admin/reset", response_model=OkResponse)
async def reset_catalog(request: Request) -> OkResponse:
    request.app.state.catalog.reset()
    return OkResponse()
