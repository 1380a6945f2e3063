"""Domain events for the Order aggregate."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order and its items were created from a confirmed checkout."""

    __version__ = 1

    order_id = Integer(required=True)
    user_id = Integer()
    total = Float(required=True)
    status = String(required=True)
    payment_id = String()
    item_count = Integer(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An order's status was overwritten by an admin or a payment notification."""

    __version__ = 1

    order_id = Integer(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    source = String(required=True)
