"""Product management: commands and handlers."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.slug import slugify
from storefront.domain import storefront
from storefront.sequence import next_id


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=200)
    slug: String(max_length=220)
    description: Text()
    price: Float(required=True, min_value=0.0)
    compare_price: Float(min_value=0.0)
    category_id: Integer()
    image_url: String(max_length=500)
    rating: Float(default=0.0)
    review_count: Integer(default=0)
    in_stock: Boolean(default=True)
    is_featured: Boolean(default=False)
    is_new: Boolean(default=False)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Integer(required=True)
    changes: Text(required=True)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Integer(required=True)


def _ensure_slug_available(repo, slug, product_id=None):
    existing = repo.find_by_slug(slug)
    if existing is not None and existing.id != product_id:
        raise ValidationError({"slug": [f"Product slug '{slug}' is already in use"]})


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)
        slug = command.slug or slugify(command.name)
        _ensure_slug_available(repo, slug)

        product = Product.create(
            id=next_id("products"),
            name=command.name,
            slug=slug,
            price=command.price,
            description=command.description,
            compare_price=command.compare_price,
            category_id=command.category_id,
            image_url=command.image_url,
            rating=command.rating,
            review_count=command.review_count,
            in_stock=command.in_stock,
            is_featured=command.is_featured,
            is_new=command.is_new,
        )
        repo.add(product)
        return product.id

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = json.loads(command.changes)
        if changes.get("slug"):
            _ensure_slug_available(repo, changes["slug"], product.id)

        product.update(**changes)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo.remove(product)
