"""Payment outcome reconciliation: command and handler.

The processor reports asynchronously (webhooks) whether a payment intent
succeeded, is still processing, or failed. The matching order's status and
the checkout's payment status are brought in line with that report.
"""

from enum import Enum

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.checkout.checkout import Checkout, CheckoutState
from storefront.ordering.order.order import Order, OrderStatus
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentOutcome(Enum):
    SUCCEEDED = "succeeded"
    PROCESSING = "processing"
    FAILED = "failed"


_ORDER_STATUS_FOR_OUTCOME = {
    PaymentOutcome.SUCCEEDED.value: OrderStatus.PAID.value,
    PaymentOutcome.PROCESSING.value: OrderStatus.PENDING.value,
    PaymentOutcome.FAILED.value: OrderStatus.PENDING.value,
}


@storefront.command(part_of="Order")
class RecordPaymentOutcome:
    payment_intent_id = String(required=True, max_length=255)
    outcome = String(required=True, choices=PaymentOutcome)
    failure_reason = String(max_length=500)


@storefront.command_handler(part_of=Order)
class RecordPaymentOutcomeHandler:
    @handle(RecordPaymentOutcome)
    def record_payment_outcome(self, command):
        """Returns the id of the updated order, or None when no order matches yet."""
        order_repo = current_domain.repository_for(Order)
        order = order_repo.find_by_payment_id(command.payment_intent_id)
        if order is not None:
            order.update_status(_ORDER_STATUS_FOR_OUTCOME[command.outcome], source="webhook")
            order_repo.add(order)

        checkout_repo = current_domain.repository_for(Checkout)
        try:
            checkout = checkout_repo.get(command.payment_intent_id)
        except ObjectNotFoundError:
            checkout = None

        if checkout is not None:
            checkout.payment_status = command.outcome
            if not checkout.is_confirmed:
                if command.outcome == PaymentOutcome.FAILED.value:
                    checkout.fail(command.failure_reason or "Payment failed", payment_status=command.outcome)
                elif checkout.state == CheckoutState.FAILED.value:
                    # The customer retried the same intent and it is back in flight
                    checkout.start_authorization(payment_status=command.outcome)
            checkout_repo.add(checkout)

        if order is None and checkout is None:
            logger.info("payment.outcome_unmatched", payment_intent_id=command.payment_intent_id)
        else:
            logger.info(
                "payment.outcome_recorded",
                payment_intent_id=command.payment_intent_id,
                outcome=command.outcome,
                order_id=order.id if order else None,
            )

        return order.id if order else None
