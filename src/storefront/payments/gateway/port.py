"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement.
This enables swapping between FakeGateway (dev/test) and StripeGateway
(production) without changing any domain or application code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

# Processor statuses, as reported for a payment intent
SUCCEEDED = "succeeded"
PROCESSING = "processing"
REQUIRES_CAPTURE = "requires_capture"
REQUIRES_PAYMENT_METHOD = "requires_payment_method"
REQUIRES_ACTION = "requires_action"
CANCELED = "canceled"


class PaymentGatewayError(Exception):
    """The processor could not be reached or rejected the request itself."""


class WebhookVerificationError(Exception):
    """A webhook payload failed authenticity or format checks."""


@dataclass(frozen=True)
class PaymentIntentResult:
    """Snapshot of a payment intent as the processor reports it."""

    id: str
    client_secret: str | None
    amount: int
    currency: str
    status: str
    failure_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCEEDED

    @property
    def in_flight(self) -> bool:
        """Authorized or still settling; money is expected but not yet captured."""
        return self.status in (PROCESSING, REQUIRES_CAPTURE)


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        metadata: dict[str, str],
        idempotency_key: str,
    ) -> PaymentIntentResult:
        """Ask the processor to authorize ``amount_cents`` and return the new intent."""
        ...

    @abstractmethod
    def retrieve_payment_intent(self, intent_id: str) -> PaymentIntentResult:
        """Read the current state of an intent."""
        ...

    @abstractmethod
    def construct_webhook_event(self, payload: bytes, signature: str | None, secret: str) -> dict:
        """Verify a webhook payload against ``secret`` and return the decoded event."""
        ...
