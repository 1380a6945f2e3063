"""Translating processor webhook events into payment outcomes."""

from storefront.ordering.order.payment import PaymentOutcome

# Processor event type -> outcome. Unlisted types are acknowledged and ignored.
EVENT_OUTCOMES = {
    "payment_intent.succeeded": PaymentOutcome.SUCCEEDED.value,
    "payment_intent.processing": PaymentOutcome.PROCESSING.value,
    "payment_intent.payment_failed": PaymentOutcome.FAILED.value,
    "payment_intent.canceled": PaymentOutcome.FAILED.value,
}


def outcome_for(event: dict) -> tuple[str, str, str | None] | None:
    """Extract ``(payment_intent_id, outcome, failure_reason)`` from an event.

    Returns None for event types that carry no payment outcome.
    """
    event_type = event.get("type")
    outcome = EVENT_OUTCOMES.get(event_type) if isinstance(event_type, str) else None
    if outcome is None:
        return None

    data = event.get("data")
    intent = data.get("object") if isinstance(data, dict) else None
    if not isinstance(intent, dict):
        return None

    intent_id = intent.get("id")
    if not isinstance(intent_id, str) or not intent_id:
        return None

    last_error = intent.get("last_payment_error")
    message = last_error.get("message") if isinstance(last_error, dict) else None
    return intent_id, outcome, message if isinstance(message, str) else None
