"""Rendering of rejections into JSON error bodies.

The cart check and checkout report the same rejections with slightly
different body layouts; both layouts are part of the public contract.
"""

from fastapi.responses import JSONResponse

from storefront.errors import InvalidQuantity, MealNotFound, OrderRejected, OutOfStock


def _body(exc: OrderRejected, message=None):
    return {"ok": False, "code": exc.code, "message": message or exc.message}


def cart_rejection(exc: OrderRejected) -> JSONResponse:
    body = _body(exc)
    if isinstance(exc, OutOfStock):
        body["available"] = exc.available
    return JSONResponse(status_code=exc.status_code, content=body)


def checkout_rejection(exc: OrderRejected) -> JSONResponse:
    if isinstance(exc, MealNotFound):
        body = _body(exc, f"Meal {exc.meal_id} does not exist")
    elif isinstance(exc, InvalidQuantity):
        body = {**_body(exc), "path": "items[].qty"}
    elif isinstance(exc, OutOfStock):
        body = {**_body(exc), "details": exc.fields()}
    else:
        body = {**_body(exc), **exc.fields()}
    return JSONResponse(status_code=exc.status_code, content=body)


def invalid_json() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"ok": False, "code": "INVALID_JSON", "message": "Request body is not valid JSON"},
    )
