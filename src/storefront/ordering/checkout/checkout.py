"""Checkout aggregate: one payment intent on its way to becoming an order.

State machine:
    Draft → Authorizing   the processor issued a payment intent for the amount
    Authorizing → Confirmed   payment succeeded (or is settling) and the order exists
    Authorizing → Failed   the processor declined, cancelled or wants more action
    Failed → Authorizing / Confirmed   the customer retried with the same intent
"""

import json
from datetime import datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.domain import storefront


class CheckoutState(Enum):
    DRAFT = "Draft"
    AUTHORIZING = "Authorizing"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    CheckoutState.DRAFT.value: {CheckoutState.AUTHORIZING.value, CheckoutState.FAILED.value},
    CheckoutState.AUTHORIZING.value: {CheckoutState.CONFIRMED.value, CheckoutState.FAILED.value},
    CheckoutState.FAILED.value: {CheckoutState.AUTHORIZING.value, CheckoutState.CONFIRMED.value},
    CheckoutState.CONFIRMED.value: set(),
}


class CheckoutAlreadyConfirmed(Exception):
    """An order was already created for this payment intent."""

    def __init__(self, payment_intent_id, order_id):
        self.payment_intent_id = payment_intent_id
        self.order_id = order_id
        super().__init__(f"Payment {payment_intent_id} was already confirmed as order {order_id}")


@storefront.aggregate
class Checkout:
    """Keyed by the processor's payment intent id."""

    id = String(identifier=True, max_length=255)
    user_id = Integer()
    amount = Float(required=True, min_value=0.0)
    currency = String(required=True, max_length=3)
    items = Text(required=True)  # JSON: [{"product_id": ..., "quantity": ...}]
    state = String(max_length=20, choices=CheckoutState, default=CheckoutState.DRAFT.value)
    payment_status = String(max_length=50)
    failure_reason = String(max_length=500)
    order_id = Integer()
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def draft(cls, payment_intent_id, user_id, lines, amount, currency):
        now = datetime.now()
        return cls(
            id=payment_intent_id,
            user_id=user_id,
            amount=amount,
            currency=currency,
            items=json.dumps([{"product_id": line["product_id"], "quantity": line["quantity"]} for line in lines]),
            created_at=now,
            updated_at=now,
        )

    @property
    def requested_lines(self) -> list[dict]:
        return json.loads(self.items)

    @property
    def is_confirmed(self) -> bool:
        return self.state == CheckoutState.CONFIRMED.value

    def _transition_to(self, new_state):
        allowed = _VALID_TRANSITIONS.get(self.state, set())
        if new_state not in allowed:
            raise ValidationError({"state": [f"Cannot transition checkout from {self.state} to {new_state}"]})
        self.state = new_state
        self.updated_at = datetime.now()

    def start_authorization(self, payment_status):
        self._transition_to(CheckoutState.AUTHORIZING.value)
        self.payment_status = payment_status
        self.failure_reason = None

    def confirm(self, order_id, payment_status):
        if self.is_confirmed:
            raise CheckoutAlreadyConfirmed(self.id, self.order_id)
        self._transition_to(CheckoutState.CONFIRMED.value)
        self.order_id = order_id
        self.payment_status = payment_status
        self.failure_reason = None

    def fail(self, reason, payment_status):
        if self.state == CheckoutState.FAILED.value:
            # Repeated declines on the same intent only refresh the details
            self.failure_reason = reason
            self.payment_status = payment_status
            self.updated_at = datetime.now()
            return
        self._transition_to(CheckoutState.FAILED.value)
        self.failure_reason = reason
        self.payment_status = payment_status
