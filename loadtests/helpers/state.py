"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, with no cross-user sharing.
State tracks ids returned by earlier steps so follow-up requests can
reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a simulated customer from browsing to a placed order."""

    username: str | None = None
    product_ids: list[int] = field(default_factory=list)
    cart_items: int = 0
    payment_intent_id: str | None = None
    order_id: int | None = None
    order_status: str | None = None


@dataclass
class AdminState:
    """Tracks catalogue entries and orders touched by a simulated administrator."""

    category_id: int | None = None
    product_id: int | None = None
    order_ids: list[int] = field(default_factory=list)
