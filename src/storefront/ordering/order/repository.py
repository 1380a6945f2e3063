"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.ordering.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def find_by_payment_id(self, payment_id: str) -> Order | None:
        return self._dao.query.filter(payment_id=payment_id).all().first

    def list_orders(self, user_id: int | None = None, status: str | None = None) -> list[Order]:
        """Orders newest first, optionally narrowed to one customer and/or status."""
        query = self._dao.query
        if user_id is not None:
            query = query.filter(user_id=user_id)
        if status is not None:
            query = query.filter(status=status)
        return query.order_by("-id").limit(None).all().items
