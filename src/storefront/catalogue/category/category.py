"""Category aggregate for grouping products in the storefront."""

from protean import invariant
from protean.fields import Integer, String

from storefront.catalogue.category.events import CategoryCreated, CategoryDetailsUpdated
from storefront.catalogue.slug import ensure_url_safe
from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A flat product grouping, addressed publicly by its slug."""

    id: Integer(identifier=True)
    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=120)
    image_url: String(max_length=500)

    @invariant.post
    def slug_must_be_url_safe(self):
        ensure_url_safe("slug", self.slug)

    @classmethod
    def create(cls, id, name, slug, image_url=None):
        category = cls(id=id, name=name, slug=slug, image_url=image_url)
        category.raise_(CategoryCreated(category_id=id, name=name, slug=slug))
        return category

    def update_details(self, name=None, slug=None, image_url=None):
        if name is not None:
            self.name = name
        if slug is not None:
            self.slug = slug
        if image_url is not None:
            self.image_url = image_url

        self.raise_(CategoryDetailsUpdated(category_id=self.id, name=self.name, slug=self.slug))
