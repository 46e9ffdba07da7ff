"""Mealstream Load Testing — Locust entry point.

Checkout under load is where overselling would show up: many users racing
for the same few meals. Reset the menu between runs with
``POST /api/admin/reset``.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:3000

    # Checkout rush only, headless (CI mode):
    locust -f loadtests/locustfile.py CheckoutRushUser --headless \
           -u 50 -r 5 -t 60s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.storefront import BrowsingUser, CheckoutRushUser  # noqa: F401

logger = logging.getLogger("loadtest")

# Rejections that are expected business outcomes under contention, not failures.
EXPECTED_CODES = ("OUT_OF_STOCK", "MIN_ORDER_NOT_MET")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Fires globally for all scenarios — no per-task wiring needed.
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        if not detail.startswith(EXPECTED_CODES):
            logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the final stock levels so overselling is visible at a glance."""
    if not environment.host:
        return
    try:
        meals = requests.get(f"{environment.host}/api/meals", timeout=5).json()
    except requests.RequestException as exc:
        print(f"[LOADTEST] Could not read final stock: {exc}")
        return
    for meal in meals:
        flag = "  <-- NEGATIVE" if meal["stock"] < 0 else ""
        print(f"[LOADTEST] meal {meal['id']:>2} {meal['name']:<24} stock={meal['stock']}{flag}")
