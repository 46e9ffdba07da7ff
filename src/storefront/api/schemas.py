"""Pydantic response schemas for the Storefront API.

These are external contracts (anti-corruption layer) — separate from the
internal MenuItem aggregate and Order value object. Wire names are camelCase.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OkResponse(BaseModel):
    ok: bool = True


class MealSchema(BaseModel):
    id: int
    name: str
    price: float
    stock: int


class CartItemSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Echoed exactly as the client sent it.
    meal_id: Any = Field(alias="mealId")
    qty: int
    unit_price: float = Field(alias="unitPrice")


class CartCheckResponse(BaseModel):
    ok: bool = True
    item: CartItemSchema


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    order_id: int = Field(alias="orderId")
    total: float


class ErrorResponse(BaseModel):
    ok: bool = False
    code: str
    message: str
