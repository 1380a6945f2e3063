"""FastAPI endpoints for processor webhooks and the development gateway."""

import json

from fastapi import APIRouter, HTTPException, Request
from protean.utils.globals import current_domain

from storefront import config
from storefront.ordering.order.payment import RecordPaymentOutcome
from storefront.payments.api.schemas import (
    ConfigureGatewayRequest,
    ConfirmIntentRequest,
    GatewayConfigResponse,
    PaymentIntentResponse,
    WebhookResponse,
)
from storefront.payments.gateway import get_gateway
from storefront.payments.gateway.fake_adapter import FakeGateway
from storefront.payments.gateway.port import WebhookVerificationError
from storefront.payments.webhook import outcome_for
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Webhook Router
# ---------------------------------------------------------------------------
webhook_router = APIRouter(prefix="/api", tags=["payments"])


@webhook_router.post("/webhook", response_model=WebhookResponse)
async def process_webhook(request: Request) -> WebhookResponse:
    """Receive asynchronous payment events from the processor.

    With STRIPE_WEBHOOK_SECRET set the ``stripe-signature`` header must
    verify; without it the payload is trusted as-is (development only).
    """
    payload = await request.body()
    secret = config.stripe_webhook_secret()

    if secret:
        try:
            event = get_gateway().construct_webhook_event(payload, request.headers.get("stripe-signature"), secret)
        except WebhookVerificationError as exc:
            logger.warning("webhook.rejected", reason=str(exc))
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    else:
        logger.warning("webhook.unverified", reason="STRIPE_WEBHOOK_SECRET is not set")
        try:
            event = json.loads(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="Invalid payload") from exc

    if not isinstance(event, dict):
        raise HTTPException(status_code=400, detail="Invalid payload")

    extracted = outcome_for(event)
    if extracted is None:
        logger.debug("webhook.ignored", event_type=event.get("type"))
        return WebhookResponse()

    intent_id, outcome, failure_reason = extracted
    command = RecordPaymentOutcome(
        payment_intent_id=intent_id,
        outcome=outcome,
        failure_reason=failure_reason,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return WebhookResponse(order_id=order_id)


# ---------------------------------------------------------------------------
# Development gateway controls (non-production only)
# ---------------------------------------------------------------------------
gateway_router = APIRouter(prefix="/api/payments/gateway", tags=["payments"])


def _fake_gateway() -> FakeGateway:
    if config.is_production():
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, FakeGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakeGateway")
    return gateway


@gateway_router.post("/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the FakeGateway behavior for manual API testing."""
    gateway = _fake_gateway()
    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
        outage=body.outage,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
        outage=gateway.outage,
    )


@gateway_router.post("/intents/{intent_id}/confirm", response_model=PaymentIntentResponse)
async def confirm_intent(intent_id: str, body: ConfirmIntentRequest | None = None) -> PaymentIntentResponse:
    """Play the customer's part: complete payment for an intent with the fake processor."""
    gateway = _fake_gateway()
    if intent_id not in gateway.intents:
        raise HTTPException(status_code=404, detail=f"Payment intent {intent_id} not found")
    intent = gateway.confirm_payment_intent(intent_id, status=body.status if body else None)
    return PaymentIntentResponse(
        id=intent.id,
        status=intent.status,
        amount=intent.amount,
        currency=intent.currency,
        failure_message=intent.failure_message,
    )
