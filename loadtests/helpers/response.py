"""Response error extraction for load test observability.

Parses Mealstream API error responses into human-readable messages. Every
rejection has the shape ``{"ok": false, "code": "...", "message": "..."}``
plus optional diagnostic fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_DIAGNOSTIC_FIELDS = ("available", "details", "minimum", "total", "path")


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines,
    starting with the rejection code when there is one.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON — return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict) or "code" not in body:
        return str(body)[:300]

    detail = f"{body['code']}: {body.get('message', '')}"
    extras = [f"{key}={body[key]}" for key in _DIAGNOSTIC_FIELDS if key in body]
    if extras:
        detail += f" ({', '.join(extras)})"
    return detail
