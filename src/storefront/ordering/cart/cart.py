"""Session cart: a transient, quantity-keyed collection of product lines.

The cart is never persisted server-side. It round-trips through the signed
session cookie as a plain dict (see ``storefront.ordering.cart.session``).
"""

from dataclasses import asdict, dataclass


@dataclass
class CartLine:
    product_id: int
    name: str
    price: float
    quantity: int
    image_url: str | None = None

    @property
    def line_total(self) -> float:
        return round(self.price * self.quantity, 2)


class Cart:
    """Cart lines keyed by product id.

    Quantities are always positive: a line whose quantity would drop to zero
    or below is removed, and adding a non-positive quantity for an absent
    product creates nothing.
    """

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self._lines: dict[int, CartLine] = {}
        for line in lines or []:
            if line.quantity > 0:
                self._lines[line.product_id] = line

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def subtotal(self) -> float:
        return round(sum(line.price * line.quantity for line in self._lines.values()), 2)

    def get(self, product_id: int) -> CartLine | None:
        return self._lines.get(product_id)

    def add(self, product_id: int, name: str, price: float, quantity: int = 1, image_url: str | None = None) -> None:
        """Increment an existing line or insert a new one.

        The price snapshot is refreshed on every add; it is for display only,
        orders are always priced from the catalogue.
        """
        line = self._lines.get(product_id)
        if line is None:
            if quantity > 0:
                self._lines[product_id] = CartLine(product_id, name, price, quantity, image_url)
            return

        line.name = name
        line.price = price
        line.image_url = image_url
        self.set_quantity(product_id, line.quantity + quantity)

    def set_quantity(self, product_id: int, quantity: int) -> None:
        line = self._lines.get(product_id)
        if line is None:
            return
        if quantity <= 0:
            self.remove(product_id)
        else:
            line.quantity = quantity

    def remove(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    def to_dict(self) -> dict:
        return {"lines": [asdict(line) for line in self._lines.values()]}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Cart":
        lines = [CartLine(**raw) for raw in (data or {}).get("lines", [])]
        return cls(lines)
