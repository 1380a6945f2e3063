"""Starting a checkout: price the lines and request a payment authorization."""

import json
from uuid import uuid4

from protean import handle
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from storefront import config
from storefront.domain import storefront
from storefront.ordering.checkout.checkout import Checkout
from storefront.ordering.checkout.pricing import price_lines, to_cents
from storefront.payments.gateway import get_gateway
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Checkout")
class StartCheckout:
    user_id = Integer()
    items = Text(required=True)  # JSON: [{"product_id": ..., "quantity": ...}]
    currency = String(max_length=3)


@storefront.command_handler(part_of=Checkout)
class StartCheckoutHandler:
    @handle(StartCheckout)
    def start_checkout(self, command):
        """Returns the intent id and the client secret the browser needs to pay.

        Lines are validated before the processor is called, so an empty
        request or an unknown product never creates an authorization.
        """
        priced, amount = price_lines(json.loads(command.items))
        currency = command.currency or config.currency()

        gateway = get_gateway()
        intent = gateway.create_payment_intent(
            amount_cents=to_cents(amount),
            currency=currency,
            metadata={
                "user_id": str(command.user_id) if command.user_id else "",
                "line_count": str(len(priced)),
            },
            idempotency_key=str(uuid4()),
        )

        checkout = Checkout.draft(
            payment_intent_id=intent.id,
            user_id=command.user_id,
            lines=priced,
            amount=amount,
            currency=currency,
        )
        checkout.start_authorization(payment_status=intent.status)
        current_domain.repository_for(Checkout).add(checkout)

        logger.info(
            "checkout.authorization_requested",
            payment_intent_id=intent.id,
            amount=amount,
            currency=currency,
            user_id=command.user_id,
        )
        return {"payment_intent_id": intent.id, "client_secret": intent.client_secret}
