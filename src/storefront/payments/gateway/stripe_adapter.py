"""Stripe payment gateway adapter.

Uses the stripe-python SDK to create and read PaymentIntents and to verify
webhook signatures with the endpoint's signing secret.
"""

import json

import stripe

from storefront.payments.gateway.port import (
    PaymentGateway,
    PaymentGatewayError,
    PaymentIntentResult,
    WebhookVerificationError,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _to_result(intent) -> PaymentIntentResult:
    last_error = getattr(intent, "last_payment_error", None)
    return PaymentIntentResult(
        id=intent.id,
        client_secret=intent.client_secret,
        amount=intent.amount,
        currency=intent.currency,
        status=intent.status,
        failure_message=last_error.message if last_error else None,
    )


class StripeGateway(PaymentGateway):
    """Production Stripe gateway adapter."""

    def __init__(self, api_key: str) -> None:
        stripe.api_key = api_key

    def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        metadata: dict[str, str],
        idempotency_key: str,
    ) -> PaymentIntentResult:
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount_cents,
                currency=currency,
                automatic_payment_methods={"enabled": True},
                metadata=metadata,
                idempotency_key=idempotency_key,
            )
        except stripe.StripeError as exc:
            logger.error("stripe.create_intent_failed", error=str(exc), amount_cents=amount_cents)
            raise PaymentGatewayError(exc.user_message or str(exc)) from exc

        return _to_result(intent)

    def retrieve_payment_intent(self, intent_id: str) -> PaymentIntentResult:
        try:
            intent = stripe.PaymentIntent.retrieve(intent_id)
        except stripe.StripeError as exc:
            logger.error("stripe.retrieve_intent_failed", error=str(exc), intent_id=intent_id)
            raise PaymentGatewayError(exc.user_message or str(exc)) from exc

        return _to_result(intent)

    def construct_webhook_event(self, payload: bytes, signature: str | None, secret: str) -> dict:
        try:
            stripe.Webhook.construct_event(payload=payload, sig_header=signature, secret=secret)
        except ValueError as exc:
            raise WebhookVerificationError("Invalid payload") from exc
        except stripe.SignatureVerificationError as exc:
            raise WebhookVerificationError("Invalid signature") from exc

        return json.loads(payload)
