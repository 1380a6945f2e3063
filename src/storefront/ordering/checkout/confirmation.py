"""Confirming a checkout: read the payment outcome and persist the order.

The order and all of its items belong to one aggregate and are written in
the handler's unit of work. If any product has disappeared since
authorization, nothing is written and the checkout stays where it was.
"""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.checkout.checkout import Checkout, CheckoutAlreadyConfirmed
from storefront.ordering.checkout.pricing import price_lines, to_cents
from storefront.ordering.order.order import Order, OrderStatus
from storefront.payments.gateway import get_gateway
from storefront.sequence import allocate, next_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DECLINE_MESSAGE = "Payment was not completed"


@storefront.command(part_of="Checkout")
class ConfirmCheckout:
    payment_intent_id = String(required=True, max_length=255)
    user_id = Integer()
    items = Text()  # JSON lines; the authorized lines are used when absent


@storefront.command_handler(part_of=Checkout)
class ConfirmCheckoutHandler:
    @handle(ConfirmCheckout)
    def confirm_checkout(self, command):
        """Returns ``{"order_id": ...}`` on success or ``{"failure_reason": ...}`` on decline.

        A decline is a normal outcome, not an exception, so the Failed state
        is committed and the customer can retry with the same intent.
        """
        checkout_repo = current_domain.repository_for(Checkout)
        try:
            checkout = checkout_repo.get(command.payment_intent_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Payment {command.payment_intent_id} not found") from None

        if checkout.user_id is not None and checkout.user_id != command.user_id:
            raise ObjectNotFoundError(f"Payment {command.payment_intent_id} not found")

        if checkout.is_confirmed:
            raise CheckoutAlreadyConfirmed(checkout.id, checkout.order_id)

        lines = json.loads(command.items) if command.items else checkout.requested_lines
        priced, total = price_lines(lines)

        intent = get_gateway().retrieve_payment_intent(checkout.id)

        if intent.succeeded:
            order_status = OrderStatus.PAID.value
        elif intent.in_flight:
            order_status = OrderStatus.PENDING.value
        else:
            reason = intent.failure_message or DEFAULT_DECLINE_MESSAGE
            checkout.fail(reason, payment_status=intent.status)
            checkout_repo.add(checkout)
            logger.warning(
                "checkout.payment_declined",
                payment_intent_id=checkout.id,
                payment_status=intent.status,
                reason=reason,
            )
            return {"failure_reason": reason}

        if to_cents(total) != intent.amount:
            logger.warning(
                "checkout.amount_mismatch",
                payment_intent_id=checkout.id,
                authorized_cents=intent.amount,
                order_cents=to_cents(total),
            )

        order = Order.place(
            id=next_id("orders"),
            user_id=command.user_id,
            lines=priced,
            item_ids=allocate("order_items", len(priced)),
            payment_id=checkout.id,
            status=order_status,
        )
        current_domain.repository_for(Order).add(order)

        checkout.confirm(order.id, payment_status=intent.status)
        checkout_repo.add(checkout)

        logger.info(
            "checkout.confirmed",
            payment_intent_id=checkout.id,
            order_id=order.id,
            total=order.total,
            status=order.status,
        )
        return {"order_id": order.id}
