"""Storefront load test scenarios.

BrowsingUser reads the menu and checks cart lines. CheckoutRushUser runs
the full journey: read the menu, check a line, check out. Many rush users
against the seeded stock produce a burst of OUT_OF_STOCK rejections once the
menu sells out; stock must end at zero, never below.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

MEAL_IDS = (1, 2, 3, 4)


def _customer():
    return {"email": f"loadtest-{random.randint(1, 10_000)}@example.com", "acceptTerms": True}


class BrowsingUser(HttpUser):
    wait_time = between(0.5, 2)

    @task(3)
    def list_meals(self):
        self.client.get("/api/meals", name="GET /api/meals")

    @task(1)
    def check_line(self):
        with self.client.post(
            "/api/cart",
            json={"mealId": random.choice(MEAL_IDS), "qty": random.randint(1, 3)},
            catch_response=True,
            name="POST /api/cart",
        ) as resp:
            # Sold-out meals answer 409; that is a correct outcome.
            if resp.status_code in (201, 409):
                resp.success()
            else:
                resp.failure(f"Cart check failed: {resp.status_code}")


class CheckoutJourney(SequentialTaskSet):
    """Read Menu -> Check Line -> Check Out."""

    def on_start(self):
        self.meal_id = None

    @task
    def read_menu(self):
        with self.client.get("/api/meals", catch_response=True, name="GET /api/meals") as resp:
            if resp.status_code != 200:
                resp.failure(f"Menu failed: {resp.status_code}")
                self.interrupt()
            in_stock = [m["id"] for m in resp.json() if m["stock"] > 0]
            if not in_stock:
                self.interrupt()
            self.meal_id = random.choice(in_stock)

    @task
    def check_line(self):
        with self.client.post(
            "/api/cart",
            json={"mealId": self.meal_id, "qty": 1},
            catch_response=True,
            name="POST /api/cart",
        ) as resp:
            if resp.status_code in (201, 409):
                resp.success()
            else:
                resp.failure(f"Cart check failed: {resp.status_code}")

    @task
    def check_out(self):
        with self.client.post(
            "/api/checkout",
            json={"items": [{"mealId": self.meal_id, "qty": 1}], "customer": _customer()},
            catch_response=True,
            name="POST /api/checkout",
        ) as resp:
            # Losing the race for the last unit, or a sub-minimum salad order, is expected.
            if resp.status_code in (201, 400, 409):
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code}")
        self.interrupt()


class CheckoutRushUser(HttpUser):
    tasks = [CheckoutJourney]
    wait_time = between(0.1, 0.5)
