"""Pydantic request/response schemas for the Payments API."""

from __future__ import annotations

from pydantic import Field

from storefront.api.schemas import CamelModel


class WebhookResponse(CamelModel):
    received: bool = True
    order_id: int | None = None


class ConfigureGatewayRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"shouldSucceed": False, "failureReason": "Your card has insufficient funds."},
            ]
        }
    }

    should_succeed: bool = True
    failure_reason: str = Field("Your card was declined.", max_length=500)
    outage: str | None = Field(None, max_length=500)


class GatewayConfigResponse(CamelModel):
    gateway: str
    should_succeed: bool
    failure_reason: str
    outage: str | None = None


class ConfirmIntentRequest(CamelModel):
    status: str | None = Field(None, description="Force a processor status instead of the configured outcome")


class PaymentIntentResponse(CamelModel):
    id: str
    status: str
    amount: int
    currency: str
    failure_message: str | None = None
