"""Integration tests for the development gateway controls."""


class TestConfigureGateway:
    def test_configure_decline(self, client, fake_gateway):
        response = client.post(
            "/api/payments/gateway/configure",
            json={"shouldSucceed": False, "failureReason": "Your card has insufficient funds."},
        )

        assert response.status_code == 200
        assert response.json() == {
            "gateway": "FakeGateway",
            "shouldSucceed": False,
            "failureReason": "Your card has insufficient funds.",
            "outage": None,
        }
        assert fake_gateway.should_succeed is False

    def test_not_available_for_real_gateway(self, client):
        from storefront.payments.gateway import set_gateway
        from storefront.payments.gateway.stripe_adapter import StripeGateway

        set_gateway(StripeGateway("sk_test_123"))
        response = client.post("/api/payments/gateway/configure", json={"shouldSucceed": True})
        assert response.status_code == 400


class TestConfirmIntent:
    def test_confirm_intent(self, customer_client, make_product):
        product = make_product(price=10.0)
        intent_id = customer_client.post(
            "/api/create-payment-intent", json={"items": [{"productId": product.id, "quantity": 2}]}
        ).json()["paymentIntentId"]

        response = customer_client.post(f"/api/payments/gateway/intents/{intent_id}/confirm")

        assert response.status_code == 200
        assert response.json()["status"] == "succeeded"
        assert response.json()["amount"] == 2000

    def test_force_status(self, customer_client, make_product):
        product = make_product()
        intent_id = customer_client.post(
            "/api/create-payment-intent", json={"items": [{"productId": product.id}]}
        ).json()["paymentIntentId"]

        response = customer_client.post(
            f"/api/payments/gateway/intents/{intent_id}/confirm", json={"status": "processing"}
        )
        assert response.json()["status"] == "processing"

    def test_unknown_intent_is_404(self, client):
        assert client.post("/api/payments/gateway/intents/pi_nope/confirm").status_code == 404
