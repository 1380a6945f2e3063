"""Tests for the Order aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.ordering.order.order import Order, OrderStatus


def _place(status=OrderStatus.PENDING.value, lines=None):
    lines = lines or [{"product_id": 1, "quantity": 2, "price": 299.90}]
    return Order.place(
        id=1,
        user_id=7,
        lines=lines,
        item_ids=list(range(1, len(lines) + 1)),
        payment_id="pi_123",
        status=status,
    )


class TestPlacingOrders:
    def test_total_is_sum_of_lines(self):
        order = _place()
        assert order.total == 599.80
        assert order.status == "pending"
        assert len(order.items) == 1
        assert order.items[0].price == 299.90

    def test_multiple_lines(self):
        order = _place(
            lines=[
                {"product_id": 1, "quantity": 1, "price": 299.90},
                {"product_id": 2, "quantity": 3, "price": 10.10},
            ]
        )
        assert order.total == 330.20
        assert sorted(item.id for item in order.items) == [1, 2]

    def test_raises_order_placed(self):
        order = _place(status=OrderStatus.PAID.value)
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.total == 599.80
        assert event.status == "paid"
        assert event.item_count == 1

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Order.place(id=1, user_id=7, lines=[], item_ids=[])
        assert "items" in exc.value.messages

    def test_item_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            _place(lines=[{"product_id": 1, "quantity": 0, "price": 299.90}])


class TestStatusUpdates:
    def test_pending_to_shipped_is_applied(self):
        order = _place()
        order.update_status("shipped")
        assert order.status == "shipped"
        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert (event.previous_status, event.new_status, event.source) == ("pending", "shipped", "admin")

    def test_backwards_transition_is_applied(self):
        order = _place(status=OrderStatus.DELIVERED.value)
        order.update_status("pending")
        assert order.status == "pending"

    def test_unknown_status_rejected(self):
        order = _place()
        with pytest.raises(ValidationError) as exc:
            order.update_status("lost")
        assert "status" in exc.value.messages
        assert order.status == "pending"

    def test_same_status_raises_no_event(self):
        order = _place()
        order._events.clear()
        order.update_status("pending")
        assert order._events == []
