"""Configurable fake payment gateway for development and testing.

This adapter simulates a payment processor without any external calls.
Intents are kept in memory. The customer's confirmation step, which a real
processor handles in the browser, is simulated by ``confirm_payment_intent``
and its outcome follows the runtime configuration:
- Manual API testing via /api/payments/gateway/configure
- Automated tests with predictable outcomes
- Development without real processor credentials
"""

import json
from dataclasses import replace
from uuid import uuid4

from storefront.payments.gateway.port import (
    REQUIRES_PAYMENT_METHOD,
    SUCCEEDED,
    PaymentGateway,
    PaymentGatewayError,
    PaymentIntentResult,
    WebhookVerificationError,
)

TEST_SIGNATURE = "test-signature"


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Your card was declined."
        self.outage: str | None = None
        self.intents: dict[str, PaymentIntentResult] = {}
        self.calls: list[dict] = []

    def configure(
        self,
        should_succeed: bool,
        failure_reason: str = "Your card was declined.",
        outage: str | None = None,
    ) -> None:
        """Configure gateway behavior at runtime.

        ``outage`` makes every processor call fail with that message, as if
        the processor were unreachable.
        """
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.outage = outage

    def _check_available(self) -> None:
        if self.outage:
            raise PaymentGatewayError(self.outage)

    def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        metadata: dict[str, str],
        idempotency_key: str,
    ) -> PaymentIntentResult:
        self.calls.append(
            {
                "method": "create_payment_intent",
                "amount_cents": amount_cents,
                "currency": currency,
                "metadata": metadata,
                "idempotency_key": idempotency_key,
            }
        )
        self._check_available()

        intent_id = f"pi_fake_{uuid4().hex[:16]}"
        intent = PaymentIntentResult(
            id=intent_id,
            client_secret=f"{intent_id}_secret_{uuid4().hex[:12]}",
            amount=amount_cents,
            currency=currency,
            status=REQUIRES_PAYMENT_METHOD,
        )
        self.intents[intent_id] = intent
        return intent

    def retrieve_payment_intent(self, intent_id: str) -> PaymentIntentResult:
        self.calls.append({"method": "retrieve_payment_intent", "intent_id": intent_id})
        self._check_available()

        if intent_id not in self.intents:
            raise PaymentGatewayError(f"No such payment_intent: '{intent_id}'")
        return self.intents[intent_id]

    def confirm_payment_intent(self, intent_id: str, status: str | None = None) -> PaymentIntentResult:
        """Simulate the customer completing payment with the processor.

        Without an explicit ``status`` the configured outcome applies.
        """
        if intent_id not in self.intents:
            raise PaymentGatewayError(f"No such payment_intent: '{intent_id}'")

        if status is None:
            status = SUCCEEDED if self.should_succeed else REQUIRES_PAYMENT_METHOD
        failure_message = None if status == SUCCEEDED else self.failure_reason

        intent = replace(self.intents[intent_id], status=status, failure_message=failure_message)
        self.intents[intent_id] = intent
        return intent

    def construct_webhook_event(self, payload: bytes, signature: str | None, secret: str) -> dict:  # noqa: ARG002
        if signature != TEST_SIGNATURE:
            raise WebhookVerificationError("Invalid signature")
        try:
            return json.loads(payload)
        except ValueError as exc:
            raise WebhookVerificationError("Invalid payload") from exc
