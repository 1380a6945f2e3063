"""Order aggregate: a confirmed purchase and its line items.

An order is created only from a confirmed checkout and is persisted
together with its items in one unit of work. After creation only the
status changes, either through an admin overwrite or a payment webhook.

Status flow (advisory, not enforced):
    pending → processing → shipped → delivered
    paid (set by payment confirmation) → processing
    cancelled (from pending, paid or processing)
"""

from datetime import datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from storefront.domain import storefront
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Transitions the storefront expects. Anything else is applied but logged.
_EXPECTED_TRANSITIONS = {
    OrderStatus.PENDING.value: {OrderStatus.PAID.value, OrderStatus.PROCESSING.value, OrderStatus.CANCELLED.value},
    OrderStatus.PAID.value: {OrderStatus.PROCESSING.value, OrderStatus.CANCELLED.value},
    OrderStatus.PROCESSING.value: {OrderStatus.SHIPPED.value, OrderStatus.CANCELLED.value},
    OrderStatus.SHIPPED.value: {OrderStatus.DELIVERED.value},
    OrderStatus.DELIVERED.value: set(),
    OrderStatus.CANCELLED.value: set(),
}


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A purchased product line; ``price`` is the unit price captured at purchase time."""

    id = Integer(identifier=True)
    product_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return round(self.price * self.quantity, 2)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    id = Integer(identifier=True)
    user_id = Integer()
    total = Float(required=True, min_value=0.0)
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_id = String(max_length=255)
    items = HasMany(OrderItem)
    created_at = DateTime(default=datetime.now)

    @classmethod
    def place(cls, id, user_id, lines, item_ids, payment_id=None, status=OrderStatus.PENDING.value):
        """Create an order from priced lines.

        Args:
            lines: Dicts with product_id, quantity and price (unit price now).
            item_ids: One pre-allocated id per line, in order.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        items = [
            OrderItem(id=item_id, product_id=line["product_id"], quantity=line["quantity"], price=line["price"])
            for item_id, line in zip(item_ids, lines, strict=True)
        ]
        total = round(sum(item.price * item.quantity for item in items), 2)

        order = cls(
            id=id,
            user_id=user_id,
            total=total,
            status=status,
            payment_id=payment_id,
            items=items,
            created_at=datetime.now(),
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                total=total,
                status=status,
                payment_id=payment_id,
                item_count=len(items),
            )
        )
        return order

    def update_status(self, new_status, source="admin"):
        """Overwrite the status with any known value.

        Unknown values are rejected. Known but unusual transitions (for
        example delivered → pending) are applied and logged.
        """
        valid = {s.value for s in OrderStatus}
        if new_status not in valid:
            raise ValidationError({"status": [f"Invalid status '{new_status}'. Must be one of: {', '.join(sorted(valid))}"]})

        previous = self.status
        if previous == new_status:
            return

        if new_status not in _EXPECTED_TRANSITIONS.get(previous, set()):
            logger.warning(
                "order.unusual_status_transition",
                order_id=self.id,
                from_status=previous,
                to_status=new_status,
                source=source,
            )

        self.status = new_status
        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=new_status,
                source=source,
            )
        )
