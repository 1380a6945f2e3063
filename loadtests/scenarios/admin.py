"""Administrator load test scenarios: catalogue upkeep and order fulfilment."""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import ADMIN_CREDENTIALS, category_data, order_status, price_change, product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import AdminState


class _AdminJourney(SequentialTaskSet):
    def on_start(self):
        self.state = AdminState()
        with self.client.post(
            "/api/login",
            json=ADMIN_CREDENTIALS,
            catch_response=True,
            name="POST /api/login (admin)",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Admin login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()


class CatalogueUpkeepJourney(_AdminJourney):
    """Create Category -> Create Product -> Reprice -> Delete Product."""

    @task
    def create_category(self):
        with self.client.post(
            "/api/categories",
            json=category_data(),
            catch_response=True,
            name="POST /api/categories",
        ) as resp:
            if resp.status_code == 201:
                self.state.category_id = resp.json()["id"]
            else:
                resp.failure(f"Create category failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def create_product(self):
        with self.client.post(
            "/api/products",
            json=product_data(self.state.category_id),
            catch_response=True,
            name="POST /api/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def reprice(self):
        self.client.put(
            f"/api/products/{self.state.product_id}",
            json=price_change(),
            name="PUT /api/products/{id}",
        )

    @task
    def retire_product(self):
        self.client.delete(f"/api/products/{self.state.product_id}", name="DELETE /api/products/{id}")

    @task
    def done(self):
        self.interrupt()


class FulfilmentJourney(_AdminJourney):
    """Dashboard -> Paid orders -> Advance a status."""

    @task
    def dashboard(self):
        self.client.get("/api/admin/summary", name="GET /api/admin/summary")

    @task
    def paid_orders(self):
        with self.client.get("/api/orders?status=paid", catch_response=True, name="GET /api/orders?status") as resp:
            if resp.status_code == 200:
                self.state.order_ids = [o["id"] for o in resp.json()]
            else:
                resp.failure(f"List orders failed: {resp.status_code}")

    @task
    def advance_status(self):
        if not self.state.order_ids:
            self.interrupt()
            return
        self.client.put(
            f"/api/orders/{self.state.order_ids[0]}/status",
            json={"status": order_status()},
            name="PUT /api/orders/{id}/status",
        )

    @task
    def done(self):
        self.interrupt()


class AdminUser(HttpUser):
    wait_time = between(2.0, 5.0)
    tasks = {
        CatalogueUpkeepJourney: 1,
        FulfilmentJourney: 2,
    }
