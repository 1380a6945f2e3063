"""Category management: commands and handlers."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.slug import slugify
from storefront.domain import storefront
from storefront.sequence import next_id


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(max_length=120)
    image_url: String(max_length=500)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Integer(required=True)
    changes: Text(required=True)


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Integer(required=True)


def _ensure_slug_available(repo, slug, category_id=None):
    existing = repo.find_by_slug(slug)
    if existing is not None and existing.id != category_id:
        raise ValidationError({"slug": [f"Category slug '{slug}' is already in use"]})


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        slug = command.slug or slugify(command.name)
        _ensure_slug_available(repo, slug)

        category = Category.create(
            id=next_id("categories"),
            name=command.name,
            slug=slug,
            image_url=command.image_url,
        )
        repo.add(category)
        return category.id

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        changes = json.loads(command.changes)
        if changes.get("slug"):
            _ensure_slug_available(repo, changes["slug"], category.id)

        category.update_details(
            name=changes.get("name"),
            slug=changes.get("slug"),
            image_url=changes.get("image_url"),
        )
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        repo.remove(category)
