"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from storefront.api.schemas import CamelModel

# --- Cart ---


class AddCartItemRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"productId": 1, "quantity": 2}]}}

    product_id: int
    quantity: int = 1


class SetCartQuantityRequest(CamelModel):
    quantity: int


class CartLineResponse(CamelModel):
    product_id: int
    name: str
    price: float
    quantity: int
    image_url: str | None = None
    line_total: float


class CartResponse(CamelModel):
    items: list[CartLineResponse] = []
    total_items: int = 0
    subtotal: float = 0.0


# --- Checkout ---


class CheckoutLine(CamelModel):
    product_id: int
    quantity: int = Field(1, ge=1)


class CreatePaymentIntentRequest(CamelModel):
    model_config = {
        "json_schema_extra": {"examples": [{"items": [{"productId": 1, "quantity": 2}]}]},
    }

    items: list[CheckoutLine] | None = None


class PaymentIntentResponse(CamelModel):
    client_secret: str
    payment_intent_id: str


class CreateOrderRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "paymentIntentId": "pi_3NqX2Y2eZvKYlo2C0dnSnb6S",
                    "items": [{"productId": 1, "quantity": 2}],
                }
            ]
        }
    }

    payment_intent_id: str = Field(..., min_length=1, max_length=255)
    items: list[CheckoutLine] | None = None


# --- Orders ---


class OrderItemResponse(CamelModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float


class OrderResponse(CamelModel):
    id: int
    user_id: int | None = None
    total: float
    status: str
    payment_id: str | None = None
    created_at: datetime | None = None
    items: list[OrderItemResponse] = []


class UpdateOrderStatusRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "shipped"}]}}

    status: str = Field(..., min_length=1)


class AdminSummaryResponse(CamelModel):
    total_orders: int
    total_revenue: float
    average_order_value: float
    pending_orders: int
    product_count: int
