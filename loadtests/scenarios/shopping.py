"""Customer-facing load test scenarios.

Stateful SequentialTaskSet journeys over the public catalogue, the session
cart and checkout against the fake payment gateway. Steps execute in order
and each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_item, registration_data, webhook_event
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class BrowseCatalogueJourney(SequentialTaskSet):
    """Banners -> Categories -> Category listing -> Product detail.

    Read-only traffic from anonymous visitors; the most common request mix.
    """

    def on_start(self):
        self.state = ShopperState()
        self.category_slug = None

    @task
    def home_banners(self):
        self.client.get("/api/banners?active=true", name="GET /api/banners")

    @task
    def featured_products(self):
        with self.client.get(
            "/api/products?featured=true",
            catch_response=True,
            name="GET /api/products?featured",
        ) as resp:
            if resp.status_code == 200:
                self.state.product_ids = [p["id"] for p in resp.json()]
            else:
                resp.failure(f"Featured products failed: {resp.status_code}")

    @task
    def categories(self):
        with self.client.get("/api/categories", catch_response=True, name="GET /api/categories") as resp:
            categories = resp.json() if resp.status_code == 200 else []
            if categories:
                self.category_slug = random.choice(categories)["slug"]

    @task
    def category_listing(self):
        if not self.category_slug:
            return
        with self.client.get(
            f"/api/products?category={self.category_slug}",
            catch_response=True,
            name="GET /api/products?category",
        ) as resp:
            if resp.status_code == 200:
                self.state.product_ids += [p["id"] for p in resp.json()]
            else:
                resp.failure(f"Category listing failed: {resp.status_code}")

    @task
    def product_detail(self):
        if not self.state.product_ids:
            self.interrupt()
            return
        product_id = random.choice(self.state.product_ids)
        self.client.get(f"/api/products/{product_id}", name="GET /api/products/{id}")

    @task
    def done(self):
        self.interrupt()


class CheckoutJourney(SequentialTaskSet):
    """Register -> Fill Cart -> Authorize -> Pay -> Place Order -> View Order.

    The happy path from a new account to a paid order. Subclasses change
    ``payment_status`` to steer the fake processor's outcome.
    """

    payment_status: str | None = None  # None: the gateway's configured outcome

    def on_start(self):
        self.state = ShopperState()

    @property
    def declined(self) -> bool:
        return self.payment_status == "requires_payment_method"

    @task
    def register(self):
        payload = registration_data()
        with self.client.post(
            "/api/register",
            json=payload,
            catch_response=True,
            name="POST /api/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.username = payload["username"]
            else:
                resp.failure(f"Register failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def fill_cart(self):
        resp = self.client.get("/api/products", name="GET /api/products")
        products = resp.json() if resp.status_code == 200 else []
        if not products:
            self.interrupt()
            return

        for product in random.sample(products, k=min(2, len(products))):
            with self.client.post(
                "/api/cart/items",
                json=cart_item(product["id"]),
                catch_response=True,
                name="POST /api/cart/items",
            ) as add:
                if add.status_code == 200:
                    self.state.cart_items = add.json()["totalItems"]
                else:
                    add.failure(f"Add to cart failed: {add.status_code} - {extract_error_detail(add)}")

    @task
    def authorize_payment(self):
        with self.client.post(
            "/api/create-payment-intent",
            json={},
            catch_response=True,
            name="POST /api/create-payment-intent",
        ) as resp:
            if resp.status_code == 200:
                self.state.payment_intent_id = resp.json()["paymentIntentId"]
            else:
                resp.failure(f"Authorization failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def pay(self):
        self.client.post(
            f"/api/payments/gateway/intents/{self.state.payment_intent_id}/confirm",
            json={"status": self.payment_status} if self.payment_status else None,
            name="POST /api/payments/gateway/intents/{id}/confirm",
        )

    @task
    def place_order(self):
        expected = 402 if self.declined else 201
        with self.client.post(
            "/api/orders",
            json={"paymentIntentId": self.state.payment_intent_id},
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code != expected:
                resp.failure(f"Place order: expected {expected}, got {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
            elif resp.status_code == 201:
                self.state.order_id = resp.json()["id"]
                self.state.order_status = resp.json()["status"]
            else:
                resp.success()
                self.interrupt()

    @task
    def settle_payment(self):
        """Deliver the processor's webhook for a payment that was still settling."""
        if self.state.order_status != "pending":
            return
        with self.client.post(
            "/api/webhook",
            data=webhook_event("payment_intent.succeeded", self.state.payment_intent_id),
            catch_response=True,
            name="POST /api/webhook",
        ) as resp:
            if resp.status_code != 200 or resp.json().get("orderId") != self.state.order_id:
                resp.failure(f"Webhook not reconciled: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def view_order(self):
        self.client.get(f"/api/orders/{self.state.order_id}", name="GET /api/orders/{id}")

    @task
    def done(self):
        self.interrupt()


class DeclinedCheckoutJourney(CheckoutJourney):
    """The card is declined; the order request must answer 402."""

    payment_status = "requires_payment_method"


class SettlementWebhookJourney(CheckoutJourney):
    """The payment is still settling at order time and is reconciled by webhook."""

    payment_status = "processing"


class ShopperUser(HttpUser):
    """Anonymous browsing mixed with new customers checking out."""

    wait_time = between(1.0, 3.0)
    tasks = {
        BrowseCatalogueJourney: 6,
        CheckoutJourney: 3,
        DeclinedCheckoutJourney: 1,
    }
