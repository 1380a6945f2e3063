"""FastAPI endpoints for the Ordering domain: cart, checkout and orders."""

import json

from fastapi import APIRouter, Depends, HTTPException, Request
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.identity.api.dependencies import require_admin, require_user
from storefront.identity.user.user import User
from storefront.ordering.api.schemas import (
    AddCartItemRequest,
    AdminSummaryResponse,
    CartLineResponse,
    CartResponse,
    CreateOrderRequest,
    CreatePaymentIntentRequest,
    OrderItemResponse,
    OrderResponse,
    PaymentIntentResponse,
    SetCartQuantityRequest,
    UpdateOrderStatusRequest,
)
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.session import load_cart, save_cart
from storefront.ordering.checkout.authorization import StartCheckout
from storefront.ordering.checkout.confirmation import ConfirmCheckout
from storefront.ordering.order.order import Order, OrderStatus
from storefront.ordering.order.status import UpdateOrderStatus

cart_router = APIRouter(prefix="/api/cart", tags=["cart"])
checkout_router = APIRouter(prefix="/api", tags=["checkout"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


def cart_response(cart: Cart) -> CartResponse:
    return CartResponse(
        items=[
            CartLineResponse(
                product_id=line.product_id,
                name=line.name,
                price=line.price,
                quantity=line.quantity,
                image_url=line.image_url,
                line_total=line.line_total,
            )
            for line in cart.lines
        ],
        total_items=cart.total_items,
        subtotal=cart.subtotal,
    )


def order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        user_id=order.user_id,
        total=order.total,
        status=order.status,
        payment_id=order.payment_id,
        created_at=order.created_at,
        items=[
            OrderItemResponse(
                id=item.id,
                order_id=order.id,
                product_id=item.product_id,
                quantity=item.quantity,
                price=item.price,
            )
            for item in sorted(order.items, key=lambda i: i.id)
        ],
    )


def _lines_json(lines) -> str:
    return json.dumps([{"product_id": line.product_id, "quantity": line.quantity} for line in lines])


# --- Cart endpoints ---


@cart_router.get("", response_model=CartResponse)
async def get_cart(request: Request) -> CartResponse:
    return cart_response(load_cart(request))


@cart_router.post("/items", response_model=CartResponse)
async def add_cart_item(body: AddCartItemRequest, request: Request) -> CartResponse:
    product = current_domain.repository_for(Product).get(body.product_id)

    cart = load_cart(request)
    cart.add(product.id, product.name, product.price, body.quantity, product.image_url)
    save_cart(request, cart)
    return cart_response(cart)


@cart_router.put("/items/{product_id}", response_model=CartResponse)
async def set_cart_quantity(product_id: int, body: SetCartQuantityRequest, request: Request) -> CartResponse:
    cart = load_cart(request)
    if cart.get(product_id) is None:
        raise ObjectNotFoundError(f"Product with ID {product_id} is not in the cart")

    cart.set_quantity(product_id, body.quantity)
    save_cart(request, cart)
    return cart_response(cart)


@cart_router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_cart_item(product_id: int, request: Request) -> CartResponse:
    cart = load_cart(request)
    cart.remove(product_id)
    save_cart(request, cart)
    return cart_response(cart)


@cart_router.delete("", response_model=CartResponse)
async def clear_cart(request: Request) -> CartResponse:
    cart = load_cart(request)
    cart.clear()
    save_cart(request, cart)
    return cart_response(cart)


# --- Checkout endpoints ---


@checkout_router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    body: CreatePaymentIntentRequest,
    request: Request,
    user: User = Depends(require_user),
) -> PaymentIntentResponse:
    """Request a payment authorization for the given lines, or for the session cart."""
    lines = body.items if body.items is not None else load_cart(request).lines

    result = current_domain.process(
        StartCheckout(user_id=user.id, items=_lines_json(lines)),
        asynchronous=False,
    )
    return PaymentIntentResponse(
        client_secret=result["client_secret"],
        payment_intent_id=result["payment_intent_id"],
    )


@checkout_router.post("/orders", status_code=201, response_model=OrderResponse)
async def create_order(
    body: CreateOrderRequest,
    request: Request,
    user: User = Depends(require_user),
) -> OrderResponse:
    """Turn a completed payment into an order.

    A declined payment answers 402 with the processor's message and leaves
    the cart as it was.
    """
    command = ConfirmCheckout(
        payment_intent_id=body.payment_intent_id,
        user_id=user.id,
        items=_lines_json(body.items) if body.items is not None else None,
    )
    result = current_domain.process(command, asynchronous=False)

    if result.get("failure_reason"):
        raise HTTPException(status_code=402, detail=result["failure_reason"])

    cart = load_cart(request)
    cart.clear()
    save_cart(request, cart)

    return order_response(current_domain.repository_for(Order).get(result["order_id"]))


# --- Order endpoints ---


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(status: str | None = None, user: User = Depends(require_user)) -> list[OrderResponse]:
    """Admins see every order; customers see their own."""
    repo = current_domain.repository_for(Order)
    orders = repo.list_orders(user_id=None if user.is_admin else user.id, status=status)
    return [order_response(o) for o in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, user: User = Depends(require_user)) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    if not user.is_admin and order.user_id != user.id:
        raise HTTPException(status_code=403, detail="Not allowed to view this order")
    return order_response(order)


@order_router.put("/{order_id}/status", response_model=OrderResponse, dependencies=[Depends(require_admin)])
async def update_order_status(order_id: int, body: UpdateOrderStatusRequest) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return order_response(current_domain.repository_for(Order).get(order_id))


# --- Admin endpoints ---


@admin_router.get("/summary", response_model=AdminSummaryResponse, dependencies=[Depends(require_admin)])
async def admin_summary() -> AdminSummaryResponse:
    """Dashboard figures. Revenue excludes cancelled orders."""
    orders = current_domain.repository_for(Order).list_orders()
    billable = [o for o in orders if o.status != OrderStatus.CANCELLED.value]
    revenue = round(sum(o.total for o in billable), 2)

    return AdminSummaryResponse(
        total_orders=len(orders),
        total_revenue=revenue,
        average_order_value=round(revenue / len(billable), 2) if billable else 0.0,
        pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING.value),
        product_count=len(current_domain.repository_for(Product).list_all()),
    )
