"""StripeGateway against a monkeypatched stripe SDK."""

import json
from types import SimpleNamespace

import pytest
import stripe
from storefront.payments.gateway import get_gateway, reset_gateway
from storefront.payments.gateway.port import PaymentGatewayError, WebhookVerificationError
from storefront.payments.gateway.stripe_adapter import StripeGateway


def _intent(**overrides):
    data = {
        "id": "pi_live_1",
        "client_secret": "pi_live_1_secret",
        "amount": 59980,
        "currency": "usd",
        "status": "requires_payment_method",
        "last_payment_error": None,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


@pytest.fixture
def gateway():
    return StripeGateway("sk_test_123")


class TestStripeGateway:
    def test_sets_api_key(self, gateway):
        assert stripe.api_key == "sk_test_123"

    def test_create_payment_intent(self, gateway, monkeypatch):
        captured = {}

        def fake_create(**kwargs):
            captured.update(kwargs)
            return _intent()

        monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

        result = gateway.create_payment_intent(59980, "usd", {"user_id": "1"}, "key-1")

        assert result.id == "pi_live_1"
        assert result.client_secret == "pi_live_1_secret"
        assert captured["amount"] == 59980
        assert captured["idempotency_key"] == "key-1"
        assert captured["automatic_payment_methods"] == {"enabled": True}

    def test_retrieve_reports_failure_message(self, gateway, monkeypatch):
        declined = _intent(last_payment_error=SimpleNamespace(message="Your card was declined."))
        monkeypatch.setattr(stripe.PaymentIntent, "retrieve", lambda intent_id: declined)

        result = gateway.retrieve_payment_intent("pi_live_1")

        assert result.failure_message == "Your card was declined."
        assert not result.succeeded

    def test_sdk_errors_become_gateway_errors(self, gateway, monkeypatch):
        def boom(**kwargs):
            raise stripe.APIConnectionError("Network down")

        monkeypatch.setattr(stripe.PaymentIntent, "create", boom)

        with pytest.raises(PaymentGatewayError):
            gateway.create_payment_intent(100, "usd", {}, "key-2")

    def test_webhook_signature_failure(self, gateway, monkeypatch):
        def reject(payload, sig_header, secret):
            raise stripe.SignatureVerificationError("bad signature", sig_header)

        monkeypatch.setattr(stripe.Webhook, "construct_event", reject)

        with pytest.raises(WebhookVerificationError, match="Invalid signature"):
            gateway.construct_webhook_event(b"{}", "t=1,v1=forged", "whsec_test")

    def test_webhook_returns_decoded_payload(self, gateway, monkeypatch):
        monkeypatch.setattr(stripe.Webhook, "construct_event", lambda payload, sig_header, secret: None)
        payload = json.dumps({"type": "payment_intent.succeeded"}).encode()

        assert gateway.construct_webhook_event(payload, "t=1,v1=ok", "whsec_test") == {
            "type": "payment_intent.succeeded"
        }


class TestGatewaySelection:
    def test_stripe_selected_when_key_configured(self, monkeypatch):
        monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_abc")
        reset_gateway()
        assert isinstance(get_gateway(), StripeGateway)

    def test_fake_selected_without_key(self, monkeypatch):
        from storefront.payments.gateway.fake_adapter import FakeGateway

        monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
        reset_gateway()
        assert isinstance(get_gateway(), FakeGateway)
