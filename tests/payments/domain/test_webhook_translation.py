import pytest
from storefront.payments.webhook import outcome_for


def _event(event_type, intent=None):
    return {"type": event_type, "data": {"object": intent or {"id": "pi_123"}}}


@pytest.mark.parametrize(
    "event_type, outcome",
    [
        ("payment_intent.succeeded", "succeeded"),
        ("payment_intent.processing", "processing"),
        ("payment_intent.payment_failed", "failed"),
        ("payment_intent.canceled", "failed"),
    ],
)
def test_payment_events_map_to_outcomes(event_type, outcome):
    assert outcome_for(_event(event_type)) == ("pi_123", outcome, None)


def test_failure_reason_comes_from_last_payment_error():
    event = _event(
        "payment_intent.payment_failed",
        {"id": "pi_123", "last_payment_error": {"message": "Your card was declined."}},
    )
    assert outcome_for(event) == ("pi_123", "failed", "Your card was declined.")


@pytest.mark.parametrize(
    "event",
    [
        {"type": "charge.refunded", "data": {"object": {"id": "ch_1"}}},
        {"type": "payment_intent.succeeded", "data": {"object": {}}},
        {"type": "payment_intent.succeeded"},
        {},
    ],
)
def test_events_without_outcome_are_ignored(event):
    assert outcome_for(event) is None


@pytest.mark.parametrize(
    "event",
    [
        {"type": "payment_intent.succeeded", "data": "x"},
        {"type": "payment_intent.succeeded", "data": {"object": "pi_123"}},
        {"type": "payment_intent.succeeded", "data": {"object": {"id": 42}}},
        {"type": ["payment_intent.succeeded"], "data": {"object": {"id": "pi_123"}}},
    ],
)
def test_malformed_payment_events_are_ignored(event):
    assert outcome_for(event) is None


def test_non_object_payment_error_is_dropped():
    event = _event("payment_intent.payment_failed", {"id": "pi_123", "last_payment_error": "declined"})
    assert outcome_for(event) == ("pi_123", "failed", None)
