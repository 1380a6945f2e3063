"""Pricing requested checkout lines from the current catalogue."""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product


def price_lines(lines: list[dict]) -> tuple[list[dict], float]:
    """Resolve ``[{product_id, quantity}]`` against the catalogue.

    Repeated products are merged. Returns the priced lines (product_id,
    quantity, price) and their total rounded to cents.

    Raises:
        ValidationError: no lines, or a line with a non-positive quantity.
        ObjectNotFoundError: a referenced product does not exist.
    """
    if not lines:
        raise ValidationError({"items": ["Items are required"]})

    quantities: dict[int, int] = {}
    for line in lines:
        quantity = line.get("quantity")
        if type(quantity) is not int or quantity < 1:
            raise ValidationError({"items": [f"Quantity for product {line.get('product_id')} must be at least 1"]})
        quantities[line["product_id"]] = quantities.get(line["product_id"], 0) + quantity

    repo = current_domain.repository_for(Product)
    priced = []
    for product_id, quantity in quantities.items():
        try:
            product = repo.get(product_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Product with ID {product_id} not found") from None
        priced.append({"product_id": product.id, "quantity": quantity, "price": product.price})

    total = round(sum(line["price"] * line["quantity"] for line in priced), 2)
    return priced, total


def to_cents(amount: float) -> int:
    return int(round(amount * 100))
