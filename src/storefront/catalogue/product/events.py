"""Domain events for the Product aggregate."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Integer(required=True)
    name: String(required=True)
    slug: String(required=True)
    price: Float(required=True)
    category_id: Integer()


@storefront.event(part_of="Product")
class ProductUpdated:
    """One or more product attributes were changed by an admin."""

    __version__ = 1

    product_id: Integer(required=True)
    changed_fields: String(required=True)
    price: Float(required=True)
