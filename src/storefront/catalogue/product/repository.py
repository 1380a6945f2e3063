"""Repository for the Product aggregate.

Listings are unbounded; the default query limit does not apply.
"""

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_slug(self, slug: str) -> Product | None:
        return self._dao.query.filter(slug=slug).all().first

    def list_all(self) -> list[Product]:
        return self._dao.query.order_by("id").limit(None).all().items

    def in_category(self, category_id: int) -> list[Product]:
        return self._dao.query.filter(category_id=category_id).order_by("id").limit(None).all().items

    def featured(self) -> list[Product]:
        return self._dao.query.filter(is_featured=True).order_by("id").limit(None).all().items

    def new_arrivals(self) -> list[Product]:
        return self._dao.query.filter(is_new=True).order_by("id").limit(None).all().items
