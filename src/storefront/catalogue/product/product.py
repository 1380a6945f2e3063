"""Product aggregate root."""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.catalogue.product.events import ProductCreated, ProductUpdated
from storefront.catalogue.slug import ensure_url_safe
from storefront.domain import storefront

# Attributes an admin may change through a partial update
EDITABLE_FIELDS = (
    "name",
    "slug",
    "description",
    "price",
    "compare_price",
    "category_id",
    "image_url",
    "rating",
    "review_count",
    "in_stock",
    "is_featured",
    "is_new",
)


@storefront.aggregate
class Product:
    """A sellable item in the catalogue.

    Products reference their category by id only; the category is resolved
    at read time and may no longer exist.
    """

    id: Integer(identifier=True)
    name: String(required=True, max_length=200)
    slug: String(required=True, max_length=220)
    description: Text()
    price: Float(required=True, min_value=0.0)
    compare_price: Float(min_value=0.0)
    category_id: Integer()
    image_url: String(max_length=500)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    in_stock: Boolean(default=True)
    is_featured: Boolean(default=False)
    is_new: Boolean(default=False)
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def slug_must_be_url_safe(self):
        ensure_url_safe("slug", self.slug)

    @invariant.post
    def price_must_not_be_negative(self):
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

    @property
    def discount_percent(self) -> int | None:
        """Percentage saved against the compare-at price, when there is a saving."""
        if not self.compare_price or self.price is None or self.compare_price <= self.price:
            return None
        return round((1 - self.price / self.compare_price) * 100)

    @classmethod
    def create(cls, id, name, slug, price, **attributes):
        product = cls(id=id, name=name, slug=slug, price=price, created_at=datetime.now(), **attributes)
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                slug=product.slug,
                price=product.price,
                category_id=product.category_id,
            )
        )
        return product

    def update(self, **changes):
        """Merge ``changes`` into the product; unknown attributes are rejected."""
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({name: ["Unknown product attribute"] for name in unknown})

        with atomic_change(self):
            for name, value in changes.items():
                setattr(self, name, value)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=",".join(sorted(changes)),
                price=self.price,
            )
        )
